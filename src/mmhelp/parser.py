"""Parser collaborator contract.

mmhelp does not read build-file syntax itself. A parser is any callable
with the signature::

    parse_recursive(source, include_path) -> Iterable[Node]

``source`` is a readable text stream and ``include_path`` the directory
searched for includes that are not found relative to the build file.
The parser resolves includes, yields nodes in file order, and raises
ParseError on malformed input.

Parsers are selected by a ``"package.module:callable"`` spec (from
``--parser`` or the ``parser`` config key). Without a spec, the built-in
node stream decoder is used.
"""

import importlib
from typing import Callable, Iterable, Optional, TextIO

from mmhelp.errors import ParserLoadError
from mmhelp.nodes import Node

DEFAULT_INCLUDE_PATH = "/usr/local/include"
DEFAULT_PARSER_SPEC = "mmhelp.nodestream:parse_recursive"

ParserFunc = Callable[[TextIO, str], Iterable[Node]]


def load_parser(spec: str) -> ParserFunc:
    """Resolve a ``"package.module:callable"`` spec to the callable.

    Args:
        spec: Module path and attribute name separated by a colon.
            Dotted attribute paths (``mod:Class.method``) are allowed.

    Returns:
        The parser callable.

    Raises:
        ParserLoadError: If the spec is malformed, the module cannot be
            imported, or the attribute is missing or not callable.
    """
    module_name, sep, attr_path = spec.partition(":")
    if not sep or not module_name or not attr_path:
        raise ParserLoadError(
            f"invalid parser spec {spec!r} (expected 'package.module:callable')"
        )

    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise ParserLoadError(f"cannot import parser module {module_name!r}: {e}") from e

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise ParserLoadError(
                f"parser module {module_name!r} has no attribute {attr_path!r}"
            ) from e

    if not callable(obj):
        raise ParserLoadError(f"parser {spec!r} is not callable")
    return obj


def get_parser(spec: Optional[str] = None) -> ParserFunc:
    """Return the parser for ``spec``, or the built-in one when unset."""
    return load_parser(spec or DEFAULT_PARSER_SPEC)
