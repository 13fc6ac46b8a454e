"""
OutputManager - verbosity-gated diagnostic output.

Diagnostics never go to the render sink. They are printed to the
manager's file (stderr by default) when the message level is at or
below the threshold of its channel:

    message.level <= channel_overrides.get(channel, verbosity)

-v raises the global verbosity, -Q lowers it; they compose (-vv -Q = 1).
A threshold of -4 is the hard wall: nothing is printed on that channel.
"""

import sys
from typing import Any, Dict, List, Optional, Set, TextIO

from . import channels as _channels
from .hints import get_hint
from .levels import ERROR, MINIMAL, NOTHING, WARNING


class OutputManager:
    """Central coordinator for verbosity-gated diagnostics.

    Usage::

        out = OutputManager(verbosity=1)
        out.emit(1, "rendered {n} targets", channel='render', n=3)
        out.hint('list.describe', 'result')
        out.error("parsing: line 2: invalid JSON")
    """

    def __init__(
        self,
        verbosity: int = 0,
        channel_overrides: Optional[Dict[str, int]] = None,
        file: Optional[TextIO] = None,
    ):
        self.verbosity = verbosity
        self.channel_overrides: Dict[str, int] = dict(channel_overrides or {})
        self.file = file if file is not None else sys.stderr
        self._shown_hints: Set[str] = set()

    def threshold(self, channel: str) -> int:
        """Effective threshold for ``channel``."""
        return self.channel_overrides.get(channel, self.verbosity)

    def emit(self, level: int, message: str, *,
             channel: str = 'general', **kwargs: Any) -> None:
        """Print ``message`` if ``level`` passes the channel threshold.

        Args:
            level: Message level (higher = more verbose)
            message: Format string, filled with ``kwargs`` when given
            channel: Output channel name
            **kwargs: Template values
        """
        threshold = self.threshold(channel)
        if threshold <= NOTHING or level > threshold:
            return
        text = message.format(**kwargs) if kwargs else message
        print(text, file=self.file)

    def hint(self, hint_id: str, context: str = 'result', **kwargs: Any) -> None:
        """Show a registered hint once per session.

        The hint is skipped when it is unknown, does not belong to
        ``context``, was already shown, or its min_level exceeds the
        'hint' channel threshold.
        """
        if hint_id in self._shown_hints:
            return
        h = get_hint(hint_id)
        if h is None or context not in h.context:
            return

        threshold = self.threshold('hint')
        if threshold <= NOTHING or h.min_level > threshold:
            return

        text = h.message.format(**kwargs) if kwargs else h.message
        print(text, file=self.file)
        self._shown_hints.add(hint_id)

    def warning(self, message: str) -> None:
        """Emit a warning (level -2)."""
        self.emit(WARNING, message, channel='general')

    def error(self, message: str) -> None:
        """Emit an error (level -3, shown everywhere but the hard wall)."""
        self.emit(ERROR, message, channel='error')

    def channel_active(self, channel: str) -> bool:
        """True if a level-0 message on ``channel`` would be shown."""
        threshold = self.threshold(channel)
        return threshold > NOTHING and threshold >= 0

    @property
    def shown_hints(self) -> Set[str]:
        """Hint ids displayed this session."""
        return self._shown_hints.copy()


# =============================================================================
# Module-level singleton
# =============================================================================

_manager: Optional[OutputManager] = None


def init_output(verbosity: int = 0, channels: Optional[List[str]] = None,
                file: Optional[TextIO] = None) -> OutputManager:
    """Create the module-level OutputManager.

    Call once at startup, after argument parsing and after the
    application has installed its channel table.

    Args:
        verbosity: Global threshold (0=default, positive=verbose, negative=quiet)
        channels: Channel specs like ``['parse:2', 'trace']``
        file: Destination stream (default: stderr)

    Raises:
        ValueError: On a malformed channel spec.
    """
    global _manager

    # Opt-in channels stay silent unless named explicitly
    channel_overrides = {ch: MINIMAL for ch in _channels.OPT_IN_CHANNELS}
    for spec in channels or []:
        cfg = _channels.parse_channel_spec(spec)
        channel_overrides[cfg.name] = cfg.level

    _manager = OutputManager(
        verbosity=verbosity,
        channel_overrides=channel_overrides,
        file=file,
    )
    return _manager


def get_output() -> OutputManager:
    """Return the module-level OutputManager, creating a default one if needed."""
    global _manager
    if _manager is None:
        _manager = OutputManager()
    return _manager
