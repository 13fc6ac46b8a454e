"""User-facing messages for mmhelp commands.

Help text is the only thing written to stdout. Everything addressed to
the user about the run itself goes to stderr through the THAC0
OutputManager, so ``mmhelp list > targets.txt`` captures help alone.

Also re-exports the log_lib public API for convenience imports.
"""

import sys

# Re-export log_lib public API - one-stop import for commands
from mmhelp.lib.log_lib import (                     # noqa: F401
    OutputManager, init_output, get_output,
    Hint, register_hint, register_hints, get_hint,
    trace,
)


def print_warn(msg):
    """Print a warning to stderr (level -2)."""
    get_output().warning(f"  [WARN] {msg}")


def print_error(msg):
    """Print an error message to stderr.

    Routes through OutputManager.error() (level -3): shown at every
    verbosity except the hard wall (-QQQQ). Falls back to a plain
    stderr write if the manager itself fails.
    """
    try:
        get_output().error(f"  ERROR: {msg}")
    except (OSError, ValueError):
        print(f"  ERROR: {msg}", file=sys.stderr)
