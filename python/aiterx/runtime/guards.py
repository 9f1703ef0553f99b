"""Argument validation and receiver binding for async-iterator helpers.

A helper body is written as ``body(iterator, next, *args)``. ``bind_iterator``
turns it into ``method(iterator, *args)`` by probing the receiver and binding
its step function once; ``validate_arg`` puts a check on the first user
argument in front of that.
"""

from __future__ import annotations

import functools
import inspect
from typing import (
    Any,
    Awaitable,
    Callable,
    NamedTuple,
    Protocol,
    runtime_checkable,
)

from .errors import ArgumentTypeError, ReceiverTypeError


class Step(NamedTuple):
    done: bool
    value: Any = None


BoundNext = Callable[..., Awaitable[Step]]

_DONE = Step(True)


@runtime_checkable
class SupportsAnext(Protocol):
    def __anext__(self) -> Awaitable[Any]: ...


@runtime_checkable
class SupportsAclose(Protocol):
    def aclose(self) -> Awaitable[Any]: ...


def is_callable(value) -> bool:
    return callable(value)


def not_callable_message(value) -> str:
    return f"{value!r} is not a function"


def validate_arg(
    predicate: Callable[[Any], bool], message_factory: Callable[[Any], str]
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Check the first argument after the receiver before running ``fn``.

    The check happens when the helper is called, not when its result is
    awaited or iterated, so a failing call never touches the receiver.
    """

    def decorate(fn: Callable[..., Any]) -> Callable[..., Any]:
        # Name of the checked parameter, so keyword calls are validated too.
        params = list(inspect.signature(fn).parameters.values())
        name = params[1].name if len(params) > 1 else None

        @functools.wraps(fn)
        def wrapper(receiver, *args: Any, **kwargs: Any) -> Any:
            if args:
                value = args[0]
            else:
                value = kwargs.get(name)
            if not predicate(value):
                raise ArgumentTypeError(message_factory(value), value)
            return fn(receiver, *args, **kwargs)

        return wrapper

    return decorate


def _make_bound_next(receiver) -> BoundNext:
    send = getattr(receiver, "asend", None)
    if callable(send):

        async def step(value=None) -> Step:
            try:
                return Step(False, await send(value))
            except StopAsyncIteration:
                return _DONE

        return step

    anext = receiver.__anext__

    async def step(value=None) -> Step:
        try:
            return Step(False, await anext())
        except StopAsyncIteration:
            return _DONE

    return step


def bind_iterator(body: Callable[..., Any]) -> Callable[..., Any]:
    """Turn ``body(receiver, next, *args)`` into ``method(receiver, *args)``.

    Only ``__anext__`` is probed on the receiver before the step function is
    bound. Receivers that also offer ``asend`` get resume values delivered to
    them; plain async iterators drop them.
    """

    @functools.wraps(body)
    def method(receiver, *args: Any, **kwargs: Any) -> Any:
        if not callable(getattr(receiver, "__anext__", None)):
            raise ReceiverTypeError(receiver)
        return body(receiver, _make_bound_next(receiver), *args, **kwargs)

    signature = inspect.signature(body)
    params = list(signature.parameters.values())
    method.__signature__ = signature.replace(parameters=params[:1] + params[2:])
    return method

