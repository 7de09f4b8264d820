"""
Introspection helpers for user-supplied callables.

Projections must accept one argument and validators one to three, and both
are checked when rules are compiled rather than when they first run.
"""

import inspect
from typing import Any, Callable


def positional_arity(fn: Callable[..., Any]) -> tuple[int, int | None] | None:
    """
    Positional argument bounds of a callable.

    Returns:
        (required, maximum) where maximum is None for *args, or None when the
        signature cannot be inspected (some builtins)
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return None

    required = 0
    maximum = 0
    for param in signature.parameters.values():
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            maximum += 1
            if param.default is param.empty:
                required += 1
        elif param.kind == param.VAR_POSITIONAL:
            return required, None
        elif param.kind == param.KEYWORD_ONLY and param.default is param.empty:
            # Cannot be satisfied positionally
            return required, -1
    return required, maximum


def accepts(fn: Callable[..., Any], count: int) -> bool:
    """Whether `fn` can be called with exactly `count` positional arguments."""
    arity = positional_arity(fn)
    if arity is None:
        return True
    required, maximum = arity
    if maximum == -1:
        return False
    return required <= count and (maximum is None or count <= maximum)


def callable_name(fn: Any) -> str:
    name = getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None)
    if name:
        return name
    return type(fn).__name__
