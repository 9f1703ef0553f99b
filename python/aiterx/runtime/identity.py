from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, Optional

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def mimic(
    arity: Optional[int], name: str
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Give a produced helper the name and arity of the method it stands for.

    Only introspection changes: the returned callable forwards every call to
    ``fn`` untouched. ``arity=None`` leaves the arity to be derived from the
    signature.
    """

    def decorate(fn: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return fn(*args, **kwargs)

        wrapper.__name__ = name
        wrapper.__qualname__ = name
        if arity is not None:
            wrapper.__arity__ = arity
        return wrapper

    return decorate


def arity(fn: Callable[..., Any]) -> int:
    declared = getattr(fn, "__arity__", None)
    if declared is not None:
        return declared
    # The receiver is not counted.
    params = list(inspect.signature(fn).parameters.values())[1:]
    return sum(
        1
        for param in params
        if param.kind in _POSITIONAL and param.default is inspect.Parameter.empty
    )
