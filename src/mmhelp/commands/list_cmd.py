"""mmhelp list - one-line summary of every documented target."""

import argparse
import sys

from mmhelp.lib.help_lib import render_all_short
from mmhelp.lib.log_lib import get_output

from .common import render_with


def register(subparsers, parents):
    """Register the 'list' subcommand."""
    p = subparsers.add_parser(
        "list",
        parents=parents,
        help="Show a one-line summary for every documented target",
        description=(
            "Print an aligned table of targets and the first line of each\n"
            "target's comment, sorted by target name."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.set_defaults(func=run)


def run(args):
    """Execute the list command."""
    rc, listed = render_with(args, render_all_short)
    if rc == 0:
        sys.stdout.flush()
        out = get_output()
        out.hint('list.describe' if listed else 'list.empty', 'result')
    return rc
