"""JSON Lines node stream codec.

The built-in parser. A build-file parser that runs out of process dumps
its node sequence in this format and mmhelp reads it back::

    {"kind": "comment", "target": "build", "value": "Builds the project."}
    {"kind": "target", "name": "build"}
    {"kind": "include", "path": "common.mk", "optional": false}

One JSON object per line, blank lines ignored. Includes were already
resolved by the producer, so Include nodes are passed through as-is and
``include_path`` is accepted only to satisfy the parser contract.
"""

import json
from typing import Iterator, List, TextIO

from mmhelp.errors import ParseError
from mmhelp.lib.log_lib import get_output
from mmhelp.nodes import Comment, Include, Node, NodeKind, Target


def _require_str(obj, key, kind, default=None):
    """Fetch a string field from a decoded object."""
    if key not in obj:
        if default is not None:
            return default
        raise ParseError(f"{kind} node is missing {key!r}")
    value = obj[key]
    if not isinstance(value, str):
        raise ParseError(f"{kind} node field {key!r} must be a string")
    return value


def decode_node(obj) -> Node:
    """Build a Node from one decoded JSON object.

    Raises:
        ParseError: On an unknown kind or a missing/mistyped field.
    """
    if not isinstance(obj, dict):
        raise ParseError("node must be a JSON object")

    kind = obj.get("kind")
    if kind == NodeKind.COMMENT.value:
        return Comment(
            target=_require_str(obj, "target", kind, default=""),
            value=_require_str(obj, "value", kind),
        )
    if kind == NodeKind.TARGET.value:
        return Target(name=_require_str(obj, "name", kind))
    if kind == NodeKind.INCLUDE.value:
        optional = obj.get("optional", False)
        if not isinstance(optional, bool):
            raise ParseError("include node field 'optional' must be a boolean")
        return Include(path=_require_str(obj, "path", kind), optional=optional)

    raise ParseError(f"unknown node kind {kind!r}")


def parse_recursive(source: TextIO, include_path: str) -> Iterator[Node]:
    """Yield nodes from a JSON Lines stream in order.

    Raises:
        ParseError: With the line number of the first bad line.
    """
    out = get_output()
    count = 0
    for lineno, line in enumerate(source, 1):
        if not line.strip():
            continue
        try:
            obj = json.loads(line)
        except json.JSONDecodeError as e:
            raise ParseError(f"invalid JSON: {e.msg}", line=lineno) from e
        except RecursionError as e:
            raise ParseError("invalid JSON: nested too deeply", line=lineno) from e
        try:
            node = decode_node(obj)
        except ParseError as e:
            raise ParseError(e.message, line=lineno) from e
        count += 1
        yield node
    out.emit(3, "  [parse] decoded {count} nodes (include path {path})",
             channel='parse', count=count, path=include_path)


def encode_node(node: Node) -> dict:
    """Return the JSON-ready dict for ``node``."""
    if node.kind is NodeKind.COMMENT:
        return {"kind": node.kind.value, "target": node.target, "value": node.value}
    if node.kind is NodeKind.TARGET:
        return {"kind": node.kind.value, "name": node.name}
    return {"kind": node.kind.value, "path": node.path, "optional": node.optional}


def dump_nodes(nodes: List[Node], out: TextIO) -> None:
    """Write ``nodes`` to ``out`` as JSON Lines."""
    for node in nodes:
        out.write(json.dumps(encode_node(node)))
        out.write("\n")
