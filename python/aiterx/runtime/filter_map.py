"""Lazy map-and-filter stage over an async iterator of argument tuples."""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable

from .closing import close_async_iterator, close_on_error
from .equality import same_value_zero
from .errors import ArgumentTypeError
from .guards import (
    BoundNext,
    bind_iterator,
    is_callable,
    not_callable_message,
    validate_arg,
)
from .identity import mimic

logger = logging.getLogger(__name__)


class FilterMap:
    """Transform stage produced by :func:`filter_map`.

    Each pull feeds the pending resume value upstream, calls ``fn(*args)`` on
    the upstream tuple and hands the result downstream unless it matches
    ``ignore_value``. A resume value is delivered upstream once and then
    cleared, so suppressed steps pull with ``None``.
    """

    __slots__ = (
        "_iterator",
        "_step",
        "_fn",
        "_ignore_value",
        "_equals",
        "_resume",
        "_started",
        "_running",
        "_done",
    )

    def __init__(
        self,
        iterator,
        step: BoundNext,
        fn: Callable[..., Any],
        ignore_value: Any = None,
        equals: Callable[[Any, Any], bool] = same_value_zero,
    ) -> None:
        if not callable(equals):
            raise ArgumentTypeError(not_callable_message(equals), equals)
        self._iterator = iterator
        self._step = step
        self._fn = fn
        self._ignore_value = ignore_value
        self._equals = equals
        self._resume = None
        self._started = False
        self._running = False
        self._done = False

    def __repr__(self) -> str:
        return f"<FilterMap over {self._iterator!r}>"

    def __aiter__(self) -> FilterMap:
        return self

    def __anext__(self):
        return self.asend(None)

    def _enter(self) -> None:
        if self._running:
            raise RuntimeError("filter_map stage is already running")

    async def asend(self, value: Any = None) -> Any:
        self._enter()
        if self._done:
            raise StopAsyncIteration
        # Nothing has been handed downstream yet, so there is nobody to resume.
        if self._started:
            self._resume = value
        self._started = True
        self._running = True
        try:
            return await self._pull()
        finally:
            self._running = False

    async def _pull(self) -> Any:
        while True:
            resume, self._resume = self._resume, None
            try:
                done, args = await self._step(resume)
            except Exception:
                self._done = True
                raise
            if done:
                self._done = True
                raise StopAsyncIteration
            try:
                result = self._fn(*args)
                if inspect.isawaitable(result):
                    result = await result
                ignored = self._equals(result, self._ignore_value)
            except BaseException as exc:
                self._done = True
                await close_on_error(self._iterator, exc)
                raise
            if not ignored:
                return result

    async def athrow(self, error: BaseException) -> Any:
        """Fail the stage with ``error``, closing upstream first if still active."""
        self._enter()
        if isinstance(error, type):
            error = error()
        if not self._done:
            self._done = True
            self._running = True
            try:
                await close_on_error(self._iterator, error)
            finally:
                self._running = False
        raise error

    async def aclose(self) -> None:
        """Stop the stage early and close upstream. No-op once finished."""
        self._enter()
        if self._done:
            return
        self._done = True
        logger.debug("filter_map stopped early; closing %r", self._iterator)
        self._running = True
        try:
            await close_async_iterator(self._iterator)
        finally:
            self._running = False


@mimic(1, "filter_map")
@validate_arg(is_callable, not_callable_message)
@bind_iterator
def filter_map(
    iterator,
    step: BoundNext,
    fn: Callable[..., Any],
    ignore_value: Any = None,
    *,
    equals: Callable[[Any, Any], bool] = same_value_zero,
) -> FilterMap:
    """Map ``fn`` over argument tuples from ``iterator``, dropping ``ignore_value``.

    Upstream values are spread into ``fn``; results equal to ``ignore_value``
    under ``equals`` are skipped. The returned stage is an async iterator that
    also forwards ``asend`` values upstream.
    """
    return FilterMap(iterator, step, fn, ignore_value, equals)
