from __future__ import annotations

"""
Argument parser of the `treemark` command.

Flags that correspond to config settings are turned into an overrides
dict; flags that only steer this invocation (`--paths-from`,
`--ignore-dir`, `--overwrite`, `--json`, ...) stay on the namespace.
"""

import argparse
from typing import Any, Dict, List, Optional

from treemark.utils.i18n import i18n

# -----------------------------------------------------------------------------
# PARSER
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Parser whose help texts come from the `cli.args` catalog section."""
    p = argparse.ArgumentParser(
        prog="treemark",
        description=i18n.t("app.description"),
    )

    # --- Path Sources ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help=i18n.t("cli.args.input"),
    )
    p.add_argument(
        "--paths-from",
        dest="paths_from",
        metavar="FILE",
        default=None,
        help=i18n.t("cli.args.paths_from"),
    )
    p.add_argument(
        "--root-name",
        dest="root_folder_name",
        default=None,
        help=i18n.t("cli.args.root_name"),
    )

    # --- Exclusions ---
    p.add_argument(
        "--ignore",
        dest="ignore_roots",
        default=None,
        help=i18n.t("cli.args.ignore"),
    )
    p.add_argument(
        "--ignore-dir",
        dest="ignore_dirs",
        metavar="DIR",
        action="append",
        default=[],
        help=i18n.t("cli.args.ignore_dir"),
    )

    # --- Output ---
    p.add_argument(
        "-o", "--output-dir",
        dest="output_dir",
        default=None,
        help=i18n.t("cli.args.output_dir"),
    )
    p.add_argument(
        "--preview-limit",
        dest="preview_limit",
        type=int,
        default=None,
        help=i18n.t("cli.args.preview_limit"),
    )
    p.add_argument("--no-markdown", action="store_true", help=i18n.t("cli.args.no_markdown"))
    p.add_argument("--no-preview", action="store_true", help=i18n.t("cli.args.no_preview"))
    p.add_argument("--overwrite", action="store_true", help=i18n.t("cli.args.overwrite"))

    # --- Configuration and Diagnostics ---
    p.add_argument("--use-defaults", action="store_true", help=i18n.t("cli.args.defaults"))
    p.add_argument("--dump-config", action="store_true", help=i18n.t("cli.args.dump"))
    p.add_argument("--debug", action="store_true", help=i18n.t("cli.args.debug"))
    p.add_argument("--save-log", action="store_true", help=i18n.t("cli.args.save_log"))
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )

    return p

# -----------------------------------------------------------------------------
# OVERRIDES
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Config settings requested on the command line.

    Options the user did not give map to None, which leaves the saved or
    default value in place when the overrides are applied.

    Args:
        args: Result of `build_parser().parse_args()`.

    Returns:
        Dict[str, Any]: Setting name to value (or None).
    """
    overrides: Dict[str, Any] = {
        "input_path": args.input_path,
        "output_dir": args.output_dir,
        "root_folder_name": args.root_folder_name,
        "preview_limit": args.preview_limit,
        "ignore_roots": _names_from_csv(args.ignore_roots),
    }

    if args.no_markdown:
        overrides["write_markdown"] = False
    if args.no_preview:
        overrides["print_preview"] = False
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides


def _names_from_csv(value: Optional[str]) -> Optional[List[str]]:
    """`"dist, build"` -> `["dist", "build"]`; None when the flag was not given."""
    if value is None:
        return None
    return [name.strip() for name in value.split(",") if name.strip()]
