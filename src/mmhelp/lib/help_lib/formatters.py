"""
Formatters for the help views.

Each formatter turns a sorted list of comments into the lines of one
view. Lines carry their own trailing newlines so a view is written with
a single ``out.writelines()``.
"""

from typing import List

from mmhelp.nodes import Comment

INDENT = "  "


def first_line(s: str) -> str:
    """Text of ``s`` up to, not including, the first newline."""
    return s.split("\n", 1)[0]


def indent(s: str) -> str:
    """Indent every line of ``s`` by two spaces.

    Nesting composes: ``indent(indent("a\\nb")) == "    a\\n    b"``.
    """
    return (INDENT + s).replace("\n", "\n" + INDENT)


def target_width(comments: List[Comment]) -> int:
    """Length of the longest target name, 0 for no comments.

    Counted in characters, the same unit the ``:<`` padding uses.
    """
    return max((len(c.target) for c in comments), default=0)


class ShortFormatter:
    """One aligned line per target: name column, then the summary."""

    @staticmethod
    def format(item: Comment, width: int) -> str:
        """
        Format a single summary line.

        Args:
            item: The comment to describe
            width: Longest target name in the table

        Returns:
            ``"  <target padded to width+2> <first line>\\n"``
        """
        return f"{INDENT}{item.target:<{width + 2}} {first_line(item.value)}\n"

    @staticmethod
    def format_list(items: List[Comment]) -> List[str]:
        """Format a table, column width taken from ``items``."""
        width = target_width(items)
        return [ShortFormatter.format(item, width) for item in items]


class LongFormatter:
    """Target name heading followed by the full, nested description."""

    @staticmethod
    def format(item: Comment) -> str:
        """
        Format one target block.

        Returns:
            ``"  <target>:\\n<value indented 4>\\n\\n"``
        """
        return f"{INDENT}{item.target}:\n{indent(indent(item.value))}\n\n"

    @staticmethod
    def format_list(items: List[Comment]) -> List[str]:
        return [LongFormatter.format(item) for item in items]


class TargetFormatter:
    """Description of a single target, without a heading."""

    @staticmethod
    def format(item: Comment) -> str:
        return f"{indent(item.value)}\n"

    @staticmethod
    def format_list(items: List[Comment], target: str) -> List[str]:
        """Format every comment whose target equals ``target`` exactly."""
        return [TargetFormatter.format(item) for item in items if item.target == target]
