"""
log_lib - THAC0 verbosity system with named channels.

Public API:
    OutputManager      - verbosity-gated diagnostics
    init_output        - singleton initialization
    get_output         - access singleton
    Hint               - hint dataclass
    register_hint      - register a hint
    register_hints     - register several hints
    get_hint           - look up a hint by id
    ChannelConfig      - parsed channel spec
    parse_channel_spec - parse CHANNEL[:LEVEL]
    format_channel_list - channel listing for --show
    trace              - function tracing decorator
"""

from .manager import OutputManager, init_output, get_output
from .hints import (
    Hint, register_hint, register_hints, get_hint, get_hints_by_category,
)
from .channels import ChannelConfig, parse_channel_spec, format_channel_list
from .trace import trace

__all__ = [
    'OutputManager', 'init_output', 'get_output',
    'Hint', 'register_hint', 'register_hints', 'get_hint', 'get_hints_by_category',
    'ChannelConfig', 'parse_channel_spec', 'format_channel_list',
    'trace',
]
