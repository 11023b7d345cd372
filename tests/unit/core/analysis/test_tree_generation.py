from __future__ import annotations

"""
Unit tests for the Directory Tree Generator.

Verifies hierarchical structure building, insertion-order preservation,
recursive pruning of blocked names and descent below the root folder.
"""

from treemark.core.analysis.tree_generator import (
    build_tree,
    descend_root,
    prune_builtin_names,
    prune_tree,
)
from treemark.domain.constants import BUILTIN_IGNORED_NAMES, BUILTIN_PRUNE_ORDER


def test_build_tree_merges_shared_prefixes():
    tree = build_tree(["proj/src/a.py", "proj/src/b.py", "proj/README.md"])

    assert tree == {
        "proj": {
            "src": {"a.py": {}, "b.py": {}},
            "README.md": {},
        }
    }


def test_build_tree_preserves_first_insertion_order():
    tree = build_tree(["r/zeta", "r/alpha", "r/mid/x", "r/alpha"])
    assert list(tree["r"].keys()) == ["zeta", "alpha", "mid"]


def test_build_tree_shape_is_order_independent():
    paths = ["p/a/1", "p/b/2", "p/a/3", "p/c"]
    assert build_tree(paths) == build_tree(list(reversed(paths)))


def test_build_tree_accepts_empty_segments():
    assert build_tree([""]) == {"": {}}
    assert build_tree(["p/dir/"]) == {"p": {"dir": {"": {}}}}


def test_prune_tree_removes_nested_matches():
    tree = build_tree([
        "a/node_modules/b/c",
        "a/src/node_modules/x.js",
        "a/src/keep.js",
    ])

    prune_tree(tree, "node_modules")

    assert tree == {"a": {"src": {"keep.js": {}}}}


def test_prune_tree_is_idempotent_without_matches():
    tree = build_tree(["a/b/c"])
    snapshot = build_tree(["a/b/c"])

    prune_tree(tree, "node_modules")
    prune_tree(tree, "node_modules")

    assert tree == snapshot


def test_prune_builtin_names_removes_all_three():
    tree = build_tree([
        "p/.git/HEAD",
        "p/src/.DS_Store",
        "p/lib/node_modules/dep/index.js",
        "p/src/app.js",
    ])

    prune_builtin_names(tree)

    assert tree == {"p": {"src": {"app.js": {}}, "lib": {}}}


def test_pruning_covers_every_builtin_ignored_name():
    tree = build_tree([f"p/deep/{name}/x" for name in sorted(BUILTIN_IGNORED_NAMES)])

    prune_builtin_names(tree)

    assert tree == {"p": {"deep": {}}}
    assert len(BUILTIN_PRUNE_ORDER) == len(BUILTIN_IGNORED_NAMES)


def test_descend_root_returns_children_of_root():
    tree = build_tree(["proj/a", "proj/b/c"])
    assert descend_root(tree, "proj") == {"a": {}, "b": {"c": {}}}


def test_descend_root_keeps_foreign_top_level_keys_after_root_children():
    tree = build_tree(["proj/a", "other/x", "proj/b"])
    root = descend_root(tree, "proj")
    assert list(root.keys()) == ["a", "b", "other"]


def test_descend_root_merges_colliding_foreign_keys():
    tree = build_tree(["proj/src/a", "src/b"])
    root = descend_root(tree, "proj")
    assert root == {"src": {"a": {}, "b": {}}}


def test_descend_root_without_root_key_is_identity():
    tree = build_tree(["x/y"])
    assert descend_root(tree, "proj") is tree
