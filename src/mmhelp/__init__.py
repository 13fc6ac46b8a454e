"""mmhelp - target help for build files.

Renders the tagged comments a build-file parser attaches to targets as
a one-line summary table or as full per-target descriptions.
"""

from mmhelp._version import __version__, __app_name__

__all__ = ["__version__", "__app_name__"]
