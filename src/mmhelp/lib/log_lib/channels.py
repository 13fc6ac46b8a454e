"""
Named output channels for the THAC0 verbosity system.

A channel is a category of diagnostic output. Each one may carry its
own threshold that overrides the global verbosity for its messages.

Channel spec syntax on the command line::

    CHANNEL          # threshold 0
    CHANNEL:LEVEL    # threshold LEVEL

Applications replace the module-level channel tables at startup to
declare their own channel set (see mmhelp.channels).
"""

from dataclasses import dataclass
from typing import Dict, Set


# Channels every application gets
KNOWN_CHANNELS: Set[str] = {
    'general',      # Default channel
    'hint',         # Hint messages
    'error',        # Error messages
    'trace',        # Function tracing (@trace decorator)
}

CHANNEL_DESCRIPTIONS: Dict[str, str] = {
    'general': 'General output',
    'hint':    'Contextual tips and suggestions',
    'error':   'Error messages',
    'trace':   'Function call tracing',
}

# Off unless enabled with --show
OPT_IN_CHANNELS: Set[str] = {
    'trace',
}


@dataclass
class ChannelConfig:
    """Threshold setting for a single channel."""
    name: str
    level: int = 0


def parse_channel_spec(spec: str) -> ChannelConfig:
    """Parse ``CHANNEL[:LEVEL]`` into a ChannelConfig.

    Raises:
        ValueError: If the level is not an integer or the name is empty.
    """
    name, _, level = spec.partition(':')
    name = name.strip()
    if not name:
        raise ValueError(f"empty channel name in {spec!r}")
    if level:
        try:
            return ChannelConfig(name=name, level=int(level))
        except ValueError:
            raise ValueError(f"invalid level {level!r} for channel {name!r}") from None
    return ChannelConfig(name=name)


def format_channel_list() -> str:
    """Format the current channel table for ``--show`` listings."""
    lines = ["Available channels:"]
    width = max(len(name) for name in KNOWN_CHANNELS)
    for name in sorted(KNOWN_CHANNELS):
        desc = CHANNEL_DESCRIPTIONS.get(name, '')
        opt_in = " (opt-in)" if name in OPT_IN_CHANNELS else ""
        lines.append(f"  {name:<{width}}  {desc}{opt_in}")
    return "\n".join(lines)
