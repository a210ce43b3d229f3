from __future__ import annotations
import inspect
import math
from .types import *


def bind(callback: Any, name: str, max_args: int = 3, fallback: int = 1) -> Callable[..., Any]:
    """
    adapts a user callback to the full positional argument list of an operation.
    stages always call with (element, index, upstream) and reducers with
    (accumulator, element, index, upstream); the callback receives as many of
    those as it has required positional parameters (at least one if it takes any
    positional parameter, all of them for *args). callables without an
    inspectable signature get the first `fallback` arguments.
    """
    if not callable(callback):
        raise TypeError(f"{name} expects a callable, got {type(callback).__name__}")

    try:
        params = list(inspect.signature(callback).parameters.values())
    except (TypeError, ValueError):
        arity = fallback
    else:
        if any(p.kind is p.VAR_POSITIONAL for p in params):
            arity = max_args
        else:
            positional = [p for p in params if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)]
            required = sum(1 for p in positional if p.default is p.empty)
            # optional positional parameters never receive the index
            arity = max(required, 1) if positional else 0

    if arity >= max_args:
        return callback
    return lambda *args: callback(*args[:arity])


def skip(source: Iterator[Any], count: Number) -> int:
    """pull and discard up to `count` elements, returns how many were dropped"""
    skipped = 0
    while skipped < count and next(source, MISSING) is not MISSING:
        skipped += 1
    return skipped


def is_array_like(item: Any) -> bool:
    """true for values that flat() spreads into their members"""
    from .pipeline import IQueryable
    return isinstance(item, ARRAY_LIKE) or isinstance(item, IQueryable)


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def same_value(a: Any, b: Any) -> bool:
    """equality that also matches nan against nan"""
    if a is b:
        return True
    if _is_nan(a) and _is_nan(b):
        return True
    return bool(a == b)
