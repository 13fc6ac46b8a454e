"""
Help renderer.

Collects the target comments produced by a parser and writes the short,
long, or single-target view to an output stream::

    render_all_short(source, out)            # one line per target
    render_all_long(source, out)             # every target, full text
    render_target_long(source, out, "build") # one target, full text

Every view is framed by a leading and a trailing blank line. Comments
are gathered before anything is written, so a parse failure leaves
``out`` untouched.
"""

from typing import List, Optional, TextIO

from mmhelp.errors import ParseFailure
from mmhelp.lib.log_lib import get_output, trace
from mmhelp.nodes import Comment, comments_only
from mmhelp.parser import DEFAULT_INCLUDE_PATH, ParserFunc, get_parser

from .formatters import LongFormatter, ShortFormatter, TargetFormatter


def filter_comments(comments: List[Comment]) -> List[Comment]:
    """Drop comments that are not attached to a target."""
    return [c for c in comments if c.target]


def sort_comments(comments: List[Comment]) -> List[Comment]:
    """Order by target name.

    The sort is stable: comments sharing a target keep their input order.
    """
    return sorted(comments, key=lambda c: c.target)


@trace
def get_comments(source: TextIO,
                 parser: Optional[ParserFunc] = None,
                 include_path: str = DEFAULT_INCLUDE_PATH) -> List[Comment]:
    """
    Parse ``source`` and return its target comments, sorted by target.

    Args:
        source: Readable text stream handed to the parser
        parser: Parser callable (default: built-in node stream decoder)
        include_path: Include search directory passed to the parser

    Returns:
        Comments with a non-empty target, stable-sorted by target

    Raises:
        ParseFailure: Wrapping any exception the parser raised
    """
    if parser is None:
        parser = get_parser()

    # Any parser failure, built-in or plugin, surfaces as one ParseFailure
    try:
        nodes = list(parser(source, include_path))
    except Exception as e:
        raise ParseFailure("parsing", e) from e

    comments = filter_comments(comments_only(nodes))
    get_output().emit(2, "  [parse] {nodes} nodes, {comments} target comments",
                      channel='parse', nodes=len(nodes), comments=len(comments))
    return sort_comments(comments)


def _write_view(out: TextIO, lines: List[str]) -> None:
    """Write ``lines`` between the leading and trailing blank lines."""
    out.write("\n")
    out.writelines(lines)
    out.write("\n")


def render_all_short(source: TextIO, out: TextIO,
                     parser: Optional[ParserFunc] = None,
                     include_path: str = DEFAULT_INCLUDE_PATH) -> int:
    """Write the one-line summary of every target to ``out``.

    Returns:
        Number of targets listed
    """
    comments = get_comments(source, parser=parser, include_path=include_path)
    _write_view(out, ShortFormatter.format_list(comments))
    get_output().emit(1, "  [render] short view: {n} targets",
                      channel='render', n=len(comments))
    return len(comments)


def render_all_long(source: TextIO, out: TextIO,
                    parser: Optional[ParserFunc] = None,
                    include_path: str = DEFAULT_INCLUDE_PATH) -> int:
    """Write the full description of every target to ``out``.

    Returns:
        Number of targets described
    """
    comments = get_comments(source, parser=parser, include_path=include_path)
    _write_view(out, LongFormatter.format_list(comments))
    get_output().emit(1, "  [render] long view: {n} targets",
                      channel='render', n=len(comments))
    return len(comments)


def render_target_long(source: TextIO, out: TextIO, target: str,
                       parser: Optional[ParserFunc] = None,
                       include_path: str = DEFAULT_INCLUDE_PATH) -> int:
    """
    Write the full description of ``target`` to ``out``.

    The match is exact and case-sensitive. A target with no comments is
    not an error; only the framing blank lines are written.

    Returns:
        Number of comment blocks written
    """
    comments = get_comments(source, parser=parser, include_path=include_path)
    lines = TargetFormatter.format_list(comments, target)
    _write_view(out, lines)
    get_output().emit(1, "  [render] {target}: {n} blocks",
                      channel='render', target=target, n=len(lines))
    return len(lines)
