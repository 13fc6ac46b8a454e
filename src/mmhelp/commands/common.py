"""Plumbing shared by the rendering subcommands.

Resolves the file, include directory and parser from the three config
layers, opens the source, and turns renderer failures into exit codes.
"""

import sys
from contextlib import contextmanager

from mmhelp.config import resolve_config
from mmhelp.errors import ParseFailure, ParserLoadError
from mmhelp.lib.log_lib import get_output
from mmhelp.output import print_error, print_warn
from mmhelp.parser import DEFAULT_INCLUDE_PATH, get_parser

STDIN_NAME = "-"


@contextmanager
def open_source(path):
    """Yield a readable text stream for ``path`` (``-`` is stdin)."""
    if path == STDIN_NAME:
        if sys.stdin.isatty():
            print_warn("Reading node stream from stdin (Ctrl-D to finish)")
        yield sys.stdin
        return
    with open(path, encoding="utf-8") as f:
        yield f


def render_with(args, render):
    """Run ``render(source, sys.stdout, parser=..., include_path=...)``.

    Returns:
        (exit_code, render_result). The exit code is 0 on success and 1
        on a configuration, I/O or parse error; the result is None then.
    """
    cfg = resolve_config(args)
    path = cfg["file"] or STDIN_NAME
    include_path = cfg["include_dir"] or DEFAULT_INCLUDE_PATH

    out = get_output()
    try:
        parser = get_parser(cfg["parser"])
    except ParserLoadError as e:
        print_error(str(e))
        return 1, None
    out.emit(2, "  [parse] parser: {name}", channel='parse',
             name=cfg["parser"] or "built-in node stream")

    try:
        with open_source(path) as source:
            result = render(source, sys.stdout,
                            parser=parser, include_path=include_path)
    except OSError as e:
        print_error(f"cannot read {path}: {e.strerror or e}")
        return 1, None
    except ParseFailure as e:
        print_error(str(e))
        if cfg["parser"] is None:
            out.hint('parse.node_stream', 'error')
        return 1, None
    return 0, result
