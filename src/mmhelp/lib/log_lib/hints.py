"""
Hint dataclass and registry.

Domain modules register hints at import time; OutputManager.hint()
decides whether and when each one is displayed.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set


@dataclass
class Hint:
    """A tip shown after a command in matching contexts.

    Attributes:
        id: Dot-namespaced identifier (e.g., 'list.describe')
        message: Template with {var} placeholders for str.format()
        context: Contexts the hint belongs to ('result', 'error', 'verbose')
        min_level: Lowest verbosity at which the hint is displayed
        category: Grouping key (e.g., 'render', 'parse')
    """
    id: str
    message: str
    context: Set[str] = field(default_factory=lambda: {'result'})
    min_level: int = 0
    category: str = 'general'


_HINTS: Dict[str, Hint] = {}


def register_hint(hint: Hint) -> None:
    """Add a hint to the registry, replacing any hint with the same id."""
    _HINTS[hint.id] = hint


def register_hints(*hints: Hint) -> None:
    """Register several hints at once."""
    for h in hints:
        register_hint(h)


def get_hint(hint_id: str) -> Optional[Hint]:
    """Look up a hint by id. Returns None if not registered."""
    return _HINTS.get(hint_id)


def get_hints_by_category(category: str) -> List[Hint]:
    """All registered hints in ``category``."""
    return [h for h in _HINTS.values() if h.category == category]
