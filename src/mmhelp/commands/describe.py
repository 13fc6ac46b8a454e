"""mmhelp describe - full description of one target or of all of them."""

import argparse
import sys

from mmhelp.lib.help_lib import render_all_long, render_target_long
from mmhelp.lib.log_lib import get_output

from .common import render_with


def register(subparsers, parents):
    """Register the 'describe' subcommand."""
    p = subparsers.add_parser(
        "describe",
        parents=parents,
        help="Show the full description of a target (or of every target)",
        description=(
            "With TARGET, print that target's complete comment. Without it,\n"
            "print every target followed by its indented description.\n"
            "Target names are matched exactly and case-sensitively."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("target", nargs="?", metavar="TARGET",
                   help="Target to describe (default: all targets)")
    p.set_defaults(func=run)


def _render_target(target):
    """Bind ``target`` so the renderer fits render_with()."""
    def render(source, out, **kwargs):
        return render_target_long(source, out, target, **kwargs)
    return render


def run(args):
    """Execute the describe command."""
    if args.target is None:
        rc, described = render_with(args, render_all_long)
        if rc == 0 and not described:
            sys.stdout.flush()
            get_output().hint('list.empty', 'result')
        return rc

    rc, blocks = render_with(args, _render_target(args.target))
    if rc == 0 and not blocks:
        sys.stdout.flush()
        get_output().hint('describe.no_match', 'result', target=args.target)
    return rc
