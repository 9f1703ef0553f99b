from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Iterable, Optional

import pytest

ROOT = Path(__file__).resolve().parents[2]
PYTHON_DIR = ROOT / "python"
sys.path.insert(0, str(PYTHON_DIR))


class SpyIterator:
    """Async iterator over fixed values that records how it is driven."""

    def __init__(
        self,
        values: Iterable[Any],
        *,
        fail_at: Optional[int] = None,
        error: Optional[BaseException] = None,
        close_error: Optional[BaseException] = None,
        closable: bool = True,
    ) -> None:
        self._values = list(values)
        self._index = 0
        self.fail_at = fail_at
        self.error = error or RuntimeError("upstream failed")
        self.close_error = close_error
        self.pulls = 0
        self.close_calls = 0
        if not closable:
            self.aclose = None

    def __aiter__(self):
        return self

    async def __anext__(self):
        self.pulls += 1
        if self.fail_at is not None and self._index == self.fail_at:
            raise self.error
        if self._index >= len(self._values):
            raise StopAsyncIteration
        value = self._values[self._index]
        self._index += 1
        return value

    async def aclose(self):
        self.close_calls += 1
        if self.close_error is not None:
            raise self.close_error


class UntouchableIterator:
    """Async iterator that fails the test if it is ever pulled or closed."""

    def __aiter__(self):
        return self

    async def __anext__(self):
        raise AssertionError("__anext__ must not be called")

    async def aclose(self):
        raise AssertionError("aclose must not be called")


class RecordingGenerator:
    """Wraps an async generator that records the resume values it receives."""

    def __init__(self, values: Iterable[Any]) -> None:
        self.received: list[Any] = []
        self.closed = False
        self._gen = self._run(list(values))

    async def _run(self, values):
        try:
            for value in values:
                self.received.append((yield value))
        finally:
            self.closed = True

    def __aiter__(self):
        return self

    def __anext__(self):
        return self._gen.__anext__()

    def asend(self, value):
        return self._gen.asend(value)

    async def aclose(self):
        await self._gen.aclose()


@pytest.fixture
def spy_iterator():
    return SpyIterator


@pytest.fixture
def untouchable_iterator():
    return UntouchableIterator()


@pytest.fixture
def recording_generator():
    return RecordingGenerator
