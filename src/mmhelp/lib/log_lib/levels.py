"""
THAC0 verbosity levels.

OutputManager gates messages against these values.
A message is shown when its level is at or below the threshold:

    message.level <= threshold

    ←── quieter ─────────── default ─────────── louder ──→
    -4     -3      -2       -1      0       1      2      3
    wall   errors  warnings minimal default render parse  debug
"""

# Louder (-v, -vv, -vvv)
DEBUG = 3          # Tracing, per-line decoder detail
CONFIG = 2         # Resolved config, parser selection, node counts
TIMING = 1         # Render summaries
DEFAULT = 0        # Normal output, result hints

# Quieter (-Q, -QQ, -QQQ, -QQQQ)
MINIMAL = -1       # No hints
WARNING = -2       # Warnings and errors
ERROR = -3         # Errors only
NOTHING = -4       # Hard wall, exit code only
