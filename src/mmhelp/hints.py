"""mmhelp hints for the THAC0 verbosity system.

Tips printed to stderr after a command, each at most once per session.
Import this module to register them.
"""

from mmhelp.lib.log_lib import Hint, register_hints


register_hints(
    Hint(
        id='list.describe',
        message="  Tip: Run 'mmhelp describe <target>' for a target's full description.",
        context={'result'},
        min_level=1,
        category='render',
    ),
    Hint(
        id='list.empty',
        message=('  Note: No target comments found. Comments must be attached '
                 'to a target by the parser to appear here.'),
        context={'result'},
        min_level=0,
        category='render',
    ),
    Hint(
        id='describe.no_match',
        message="  Note: No help found for target '{target}' (names are case-sensitive).",
        context={'result'},
        min_level=0,
        category='render',
    ),
    Hint(
        id='parse.node_stream',
        message=('  Tip: The built-in parser reads a JSON Lines node stream. '
                 "Use --parser 'package.module:callable' to plug in a build-file parser."),
        context={'error'},
        min_level=0,
        category='parse',
    ),
)
