"""
Function tracing decorator.

Trace lines go through the OutputManager at level 3 on the 'trace'
channel. That channel is opt-in and pinned below the global verbosity,
so -vvv alone does not trace; it takes ``--show trace:3``.
"""

import functools


def _short_repr(value) -> str:
    """repr() clipped for one-line trace output."""
    if isinstance(value, (list, tuple)) and len(value) > 3:
        return f"[...{len(value)} items...]"
    text = repr(value)
    if len(text) > 50:
        return text[:47] + "..."
    return text


def trace(func):
    """Log entry, return value and exceptions of ``func`` when tracing is on."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # Lazy import to avoid circular dependency
        from .manager import get_output

        out = get_output()
        if out.threshold('trace') < 3:
            return func(*args, **kwargs)

        name = f"{func.__module__}.{func.__qualname__}"
        args_repr = [_short_repr(a) for a in args]
        args_repr += [f"{k}={_short_repr(v)}" for k, v in kwargs.items()]
        out.emit(3, "[TRACE] >> {fn}({args})",
                 channel='trace', fn=name, args=', '.join(args_repr))
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            out.emit(3, "[TRACE] !! {fn} raised: {exc}: {msg}",
                     channel='trace', fn=name, exc=type(e).__name__, msg=str(e))
            raise
        if result is not None:
            out.emit(3, "[TRACE] << {fn} returned: {val}",
                     channel='trace', fn=name, val=_short_repr(result))
        return result

    return wrapper
