from __future__ import annotations

import inspect
from typing import Any, Callable

from .closing import close_on_error
from .guards import (
    BoundNext,
    bind_iterator,
    is_callable,
    not_callable_message,
    validate_arg,
)
from .identity import mimic


@mimic(1, "for_each")
@validate_arg(is_callable, not_callable_message)
@bind_iterator
async def for_each(iterator, step: BoundNext, fn: Callable[[Any], Any]) -> None:
    """Call ``fn`` on every value of ``iterator`` in order.

    ``fn`` may be sync or async. If it fails, ``iterator`` is closed and the
    same exception is re-raised; no further values are pulled.
    """
    while True:
        done, value = await step()
        if done:
            return
        try:
            result = fn(value)
            if inspect.isawaitable(result):
                await result
        except BaseException as exc:
            await close_on_error(iterator, exc)
            raise
