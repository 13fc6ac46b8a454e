"""mmhelp channel definitions for the THAC0 verbosity system.

Keeps log_lib project-agnostic: this module installs the channel set
mmhelp actually emits on.

Usage:
    from mmhelp.channels import configure_channels, format_mmhelp_channel_list
"""

from mmhelp.lib.log_lib import channels as _ch


MMHELP_CHANNELS = {
    'parse',        # Parser selection and node counts
    'render',       # View summaries
    'config',       # Configuration loading and resolution
    'general',      # Default channel
    'hint',         # Contextual tips and suggestions
    'error',        # Error messages
    'trace',        # Function tracing (@trace decorator)
}

MMHELP_CHANNEL_DESCRIPTIONS = {
    'parse':    'Parser selection and node counts',
    'render':   'Rendered view summaries',
    'config':   'Configuration loading and resolution',
    'general':  'General output',
    'hint':     'Contextual tips and suggestions',
    'error':    'Error messages',
    'trace':    'Function call tracing (--show trace:3)',
}

MMHELP_OPT_IN_CHANNELS = {
    'trace',
}


def configure_channels():
    """Install the mmhelp channel set. Call before init_output()."""
    _ch.KNOWN_CHANNELS = MMHELP_CHANNELS
    _ch.CHANNEL_DESCRIPTIONS = MMHELP_CHANNEL_DESCRIPTIONS
    _ch.OPT_IN_CHANNELS = MMHELP_OPT_IN_CHANNELS


def format_mmhelp_channel_list() -> str:
    """Channel listing for bare ``--show``."""
    configure_channels()
    return _ch.format_channel_list()
