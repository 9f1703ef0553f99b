from __future__ import annotations


class ArgumentTypeError(TypeError):
    """A user-supplied argument failed its validation predicate."""

    def __init__(self, message: str, value=None) -> None:
        super().__init__(message)
        self.value = value


class ReceiverTypeError(TypeError):
    """The receiver does not expose a callable ``__anext__``."""

    def __init__(self, receiver) -> None:
        super().__init__(f"{receiver!r} is not an async iterator")
        self.receiver = receiver
