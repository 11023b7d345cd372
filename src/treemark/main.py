from __future__ import annotations

"""
Entry point of the `treemark` console script.

Importing this module installs a process-wide excepthook: anything that
escapes the CLI's own error mapping is logged at CRITICAL with its
traceback, echoed on stderr, and ends the process with status 1.
"""

import logging
import os
import sys
import traceback
from typing import Any

# Running `python src/treemark/main.py` from a checkout needs `src` importable
SRC_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

# -----------------------------------------------------------------------------
# UNCAUGHT EXCEPTIONS
# -----------------------------------------------------------------------------

def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """`sys.excepthook` replacement; never returns."""
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))
    logging.getLogger("treemark.supervisor").critical(f"Unhandled {exctype.__name__}: {value}\n{stack_trace}")

    print(f"\ntreemark crashed with {exctype.__name__}:", file=sys.stderr)
    print(stack_trace, file=sys.stderr)
    sys.exit(1)


sys.excepthook = global_exception_handler


def main() -> int:
    from treemark.interface.cli.app import main as cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
