"""Main CLI entry point for mmhelp.

Implements a Docker-style two-pass argument parser:
  1. First pass: extract global flags (--verbose, --quiet, --show, --config)
  2. Second pass: dispatch to subcommand with shared parent args

Global flags can appear before OR after the subcommand:
  mmhelp -v list -f nodes.jsonl      # works
  mmhelp list -f nodes.jsonl -v      # also works

Subcommands self-register via register(subparsers, parents) convention.
"""

import argparse
import sys

from mmhelp._version import BASE_VERSION


# ---------------------------------------------------------------------------
# Global flags (Docker-style: can precede the subcommand)
# ---------------------------------------------------------------------------
GLOBAL_FLAGS = {
    "--verbose": {"aliases": ["-v"], "action": "count", "default": 0,
                  "help": "Increase verbosity (-v, -vv, -vvv)"},
    "--quiet": {"aliases": ["-Q"], "action": "count", "default": 0,
                "help": "Decrease verbosity (-Q, -QQ, -QQQ, -QQQQ=silent)"},
    "--show": {"nargs": "?", "action": "append", "metavar": "CHANNEL[:LEVEL]",
               "help": "Show output channel (bare --show lists channels)"},
    "--config": {"metavar": "PATH", "default": None,
                 "help": "Path to global config file (default: ~/.mmhelp/config.json)"},
}


def _extract_global_flags(argv):
    """Two-pass parse: pull global flags from anywhere in argv.

    Returns (global_namespace, remaining_argv).
    """
    global_parser = argparse.ArgumentParser(add_help=False)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        global_parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    return global_parser.parse_known_args(argv)


# ---------------------------------------------------------------------------
# Shared parent parser (inherited by all subcommands via parents=[])
# ---------------------------------------------------------------------------
def _build_common_parser():
    """Build the shared argument parser for source-selection flags.

    Defaults are None so unset flags fall through to the config files.
    """
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--file", "-f", metavar="PATH",
                        help="Node stream to read, or input for --parser ('-' = stdin, the default)")
    common.add_argument("--include-dir", "-I", metavar="DIR",
                        help="Include search directory (default: /usr/local/include)")
    common.add_argument("--parser", metavar="MODULE:CALLABLE",
                        help="Parser to use (default: built-in JSON Lines node stream)")
    return common


# ---------------------------------------------------------------------------
# Subcommand discovery and registration
# ---------------------------------------------------------------------------
def _discover_commands():
    """Import and return all command modules.

    Each module in mmhelp.commands must export:
      register(subparsers, parents) - add itself to the subparser
      run(args) - execute the command, return an exit code
    """
    from mmhelp.commands import describe, list_cmd
    return [list_cmd, describe]


def _build_parser(commands, common_parser):
    """Build the main argparse parser with subcommand dispatch."""
    parser = argparse.ArgumentParser(
        prog="mmhelp",
        description="mmhelp - help text for build targets",
        epilog=(
            "Run 'mmhelp <command> --help' for details on a specific command.\n"
            "\n"
            "Global flags (--verbose, --quiet, --show, --config) can appear\n"
            "before or after the subcommand."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"mmhelp {BASE_VERSION}",
    )

    # Add global flags to main parser too (for --help display)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    # Let each command register itself
    for cmd_module in commands:
        cmd_module.register(subparsers, parents=[common_parser])

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None):
    """Main entry point for mmhelp CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success).
    """
    if argv is None:
        argv = sys.argv[1:]

    # Pass 1: extract global flags from anywhere in the arg list
    global_args, remaining = _extract_global_flags(argv)

    # Handle bare --show (list channels and exit)
    if global_args.show and None in global_args.show:
        from mmhelp.channels import format_mmhelp_channel_list
        print(format_mmhelp_channel_list())
        return 0

    # Initialize THAC0 output system
    verbosity = global_args.verbose - global_args.quiet
    channels = [s for s in (global_args.show or []) if s is not None]
    from mmhelp.channels import configure_channels
    from mmhelp.lib.log_lib import init_output
    configure_channels()
    try:
        init_output(verbosity=verbosity, channels=channels)
    except ValueError as e:
        print(f"mmhelp: error: --show: {e}", file=sys.stderr)
        return 2
    import mmhelp.hints  # noqa: F401 - register mmhelp hints

    # Pass 2: parse subcommand + shared/specific args
    common_parser = _build_common_parser()
    commands = _discover_commands()
    parser = _build_parser(commands, common_parser)

    # If no args at all, print help
    if not remaining:
        parser.print_help()
        return 0

    args = parser.parse_args(remaining)

    # If subcommand selected but no handler, print help
    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    # Merge global args into the namespace for convenience
    for key, value in vars(global_args).items():
        if key not in vars(args) or getattr(args, key) is None:
            setattr(args, key, value)

    # Dispatch
    try:
        return args.func(args) or 0
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
