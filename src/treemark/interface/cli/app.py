from __future__ import annotations

"""
treemark command-line host.

Owns everything the core pipeline leaves to its caller: resolving the
session config, collecting paths from disk or a path list, showing scan
progress, printing the preview and writing `<root>.md`. Each step maps its
failures to an exit code (0 success, 1 failure, 2 invalid input, 130
interrupted).
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional, Set

from treemark.core.analysis.path_filter import ignore_roots_from_groups
from treemark.core.output.markdown import markdown_file_name, render_as_markdown, save_markdown
from treemark.core.pipeline.engine import run_structure
from treemark.core.pipeline.validator import validate_config
from treemark.core.services.scanner import collect_relative_paths, read_path_list
from treemark.domain.config import get_default_config, load_config, save_config
from treemark.domain.structure_models import (
    MissingInputError,
    StructureError,
    StructureRequest,
    StructureResult,
)
from treemark.infra.fs import normalize_path
from treemark.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from treemark.interface.cli import args as cli_args
from treemark.utils.i18n import i18n

logger = get_logger(__name__)

# Config keys a command-line flag may set for this run
OVERRIDABLE_KEYS = (
    "input_path",
    "output_dir",
    "root_folder_name",
    "ignore_roots",
    "preview_limit",
    "write_markdown",
    "print_preview",
    "log_level",
)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_BAD_INPUT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Run one treemark invocation.

    Args:
        argv: Arguments without the program name; `sys.argv[1:]` when None.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32":
        for stream in (sys.stdout, sys.stderr):
            if hasattr(stream, "reconfigure"):
                stream.reconfigure(encoding="utf-8")

    args = cli_args.build_parser().parse_args(argv)

    # 1. Saved session (or defaults), then this run's flags
    base_conf = get_default_config() if args.use_defaults else load_config()
    merged = apply_overrides(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(merged, strict=False)

    # 2. Logging, with the persistent file only on request
    log_file = get_default_log_path() if args.save_log else None
    configure_logging(LoggingConfig(level=conf["log_level"], console=True, log_file=log_file))
    for w in warnings:
        logger.warning(f"Ignored config value: {w}")

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 3. Paths and ignore names for this run
    try:
        paths = _collect_paths(args, conf)
    except FileNotFoundError as e:
        return _fail(str(e), EXIT_BAD_INPUT)

    ignore_roots: Set[str] = set(conf["ignore_roots"])
    ignore_roots |= ignore_roots_from_groups(_collect_ignore_groups(args.ignore_dirs))
    request = StructureRequest.create(paths, ignore_roots, conf["root_folder_name"] or None)

    # 4. Structure generation
    try:
        result = run_structure(
            request,
            None if args.json_output else _print_progress,
            yield_delay=conf["yield_delay"],
            preview_limit=conf["preview_limit"],
            progress_interval=conf["progress_interval"],
        )
    except MissingInputError:
        return _fail(i18n.t("cli.errors.no_input"), EXIT_BAD_INPUT)
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        msg = i18n.t("cli.errors.pipeline_fail", error=str(e))
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_FAILURE

    # 5. Document
    document_path: Optional[str] = None
    if conf["write_markdown"]:
        try:
            document_path = _write_document(result, conf["output_dir"], args.overwrite)
        except FileExistsError as e:
            return _fail(i18n.t("cli.errors.exists", path=str(e)), EXIT_FAILURE)
        except (StructureError, OSError) as e:
            return _fail(i18n.t("cli.errors.save_fail", error=str(e)), EXIT_FAILURE)

    if not args.use_defaults:
        save_config(conf)

    # 6. Report
    if args.json_output:
        payload: Dict[str, Any] = asdict(result)
        payload["document_path"] = document_path
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result, document_path, bool(conf["print_preview"]))

    return EXIT_OK


def apply_overrides(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of `base` with every non-None override in `OVERRIDABLE_KEYS` applied."""
    merged = dict(base)
    merged.update({
        key: overrides[key]
        for key in OVERRIDABLE_KEYS
        if overrides.get(key) is not None
    })
    return merged

# -----------------------------------------------------------------------------
# HOST HELPERS
# -----------------------------------------------------------------------------

def _fail(message: str, code: int) -> int:
    logger.error(message)
    print(f"ERROR: {message}", file=sys.stderr)
    return code


def _collect_paths(args: Any, conf: Dict[str, Any]) -> List[str]:
    """
    Paths for this run: from `--paths-from` (a file or stdin), otherwise
    from scanning the input directory.

    Raises:
        FileNotFoundError: If the path list or the input directory is missing.
    """
    if args.paths_from == "-":
        return read_path_list(sys.stdin)
    if args.paths_from:
        if not os.path.isfile(args.paths_from):
            raise FileNotFoundError(i18n.t("cli.errors.path_not_exist", path=args.paths_from))
        with open(args.paths_from, "r", encoding="utf-8") as f:
            return read_path_list(f)

    input_dir = normalize_path(conf["input_path"], os.getcwd())
    if not os.path.isdir(input_dir):
        raise FileNotFoundError(i18n.t("cli.errors.path_not_exist", path=input_dir))

    logger.info(f"Scanning {input_dir}")
    return collect_relative_paths(input_dir)


def _collect_ignore_groups(ignore_dirs: List[str]) -> List[List[str]]:
    """Scan each `--ignore-dir` folder; missing folders are reported and skipped."""
    groups: List[List[str]] = []
    for d in ignore_dirs:
        if not os.path.isdir(d):
            logger.warning(i18n.t("cli.errors.path_not_exist", path=d))
            continue
        groups.append(collect_relative_paths(d))
    return groups


def _write_document(result: StructureResult, output_dir: str, overwrite: bool) -> str:
    """
    Render and persist `<root>.md` into the output directory.

    Raises:
        FileExistsError: If the document exists and overwrite is off.
        PreconditionError: If the result carries no structure.
        OSError: On write failure.
    """
    content = render_as_markdown(result.root_folder_name, result.full_text)
    target = os.path.join(
        normalize_path(output_dir, os.getcwd()),
        markdown_file_name(result.root_folder_name),
    )
    if os.path.exists(target) and not overwrite:
        raise FileExistsError(target)

    return save_markdown(target, content)

# -----------------------------------------------------------------------------
# TERMINAL OUTPUT
# -----------------------------------------------------------------------------

def _print_progress(percent: int) -> None:
    """Redraw the scan percentage in place on stderr."""
    end = "\n" if percent >= 100 else ""
    print("\r" + i18n.t("cli.status.progress", percent=percent), end=end, file=sys.stderr, flush=True)


def _print_human_summary(result: StructureResult, document_path: Optional[str], show_preview: bool) -> None:
    if show_preview:
        print(result.preview_text)
        print()

    print(i18n.t(
        "cli.status.summary",
        kept=result.kept_paths,
        total=result.total_paths,
        lines=result.line_count,
    ))
    if document_path:
        print(i18n.t("cli.status.saved", path=document_path))


if __name__ == "__main__":
    sys.exit(main())
