"""Error types for mmhelp.

Parsers report malformed input with ParseError. The help renderer never
recovers from a parser failure: it wraps the cause in a ParseFailure
with a short context label and hands it to the caller.
"""


class ParseError(Exception):
    """Raised by a parser when input cannot be turned into nodes.

    Args:
        message: What went wrong.
        line: 1-based line number of the offending input, if known.
    """

    def __init__(self, message, line=None):
        self.message = message
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class ParserLoadError(ValueError):
    """Raised when a parser spec cannot be resolved to a callable."""


class ParseFailure(Exception):
    """A parser failure seen from the help renderer.

    ``str()`` reads ``"<context>: <cause>"``, e.g.
    ``"parsing: line 3: invalid JSON"``. The original exception is kept
    on ``cause`` and chained with ``raise ... from``.
    """

    def __init__(self, context, cause):
        self.context = context
        self.cause = cause
        super().__init__(f"{context}: {cause}")
