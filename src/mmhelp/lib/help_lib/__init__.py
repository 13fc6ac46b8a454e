"""
Help rendering for build targets.

Separates comment collection (core) from layout (formatters), so the
same sorted comments can be shown as a summary table or in full.
"""

from .core import (
    filter_comments,
    get_comments,
    render_all_long,
    render_all_short,
    render_target_long,
    sort_comments,
)
from .formatters import (
    LongFormatter,
    ShortFormatter,
    TargetFormatter,
    first_line,
    indent,
    target_width,
)

__all__ = [
    'filter_comments',
    'get_comments',
    'render_all_long',
    'render_all_short',
    'render_target_long',
    'sort_comments',
    'LongFormatter',
    'ShortFormatter',
    'TargetFormatter',
    'first_line',
    'indent',
    'target_width',
]
