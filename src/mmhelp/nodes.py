"""Structural nodes produced by build-file parsers.

A parser turns build-file text into an ordered sequence of nodes. The
variants form a closed set, each carrying an explicit ``kind``
discriminant so consumers select on ``node.kind`` instead of probing
types::

    Comment  - a tagged comment, optionally attached to a target
    Target   - a rule declaration
    Include  - an include directive (already resolved by the parser)

Only comments matter to the help renderer; the other variants pass
through untouched.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Union


class NodeKind(Enum):
    """Discriminant for the node variants."""
    COMMENT = "comment"
    TARGET = "target"
    INCLUDE = "include"


@dataclass(frozen=True)
class Comment:
    """A comment block.

    Attributes:
        target: Name of the target the comment documents. Empty when the
            comment is not attached to any target.
        value: Raw comment text with the comment markers stripped. May
            span several lines.
    """
    target: str = ""
    value: str = ""
    kind: NodeKind = field(default=NodeKind.COMMENT, init=False)


@dataclass(frozen=True)
class Target:
    """A rule declaration."""
    name: str
    kind: NodeKind = field(default=NodeKind.TARGET, init=False)


@dataclass(frozen=True)
class Include:
    """An include directive."""
    path: str
    optional: bool = False
    kind: NodeKind = field(default=NodeKind.INCLUDE, init=False)


Node = Union[Comment, Target, Include]


def comments_only(nodes: Iterable[Node]) -> List[Comment]:
    """Return the Comment nodes of ``nodes`` in their original order."""
    return [n for n in nodes if n.kind is NodeKind.COMMENT]
