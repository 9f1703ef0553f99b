from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


async def close_async_iterator(iterator) -> None:
    """Ask ``iterator`` to release its resources via ``aclose()``.

    Iterators without a callable ``aclose`` are left alone. Closing an
    already-closed async generator is a no-op, so repeated calls are safe.
    """
    aclose = getattr(iterator, "aclose", None)
    if not callable(aclose):
        return
    await aclose()


async def close_on_error(iterator, error: BaseException) -> None:
    """Close ``iterator`` while ``error`` is propagating.

    A failure to close never replaces ``error``: it is logged and recorded as a
    note on ``error``. The caller re-raises ``error`` itself.
    """
    logger.debug("closing %r after %s", iterator, type(error).__name__)
    try:
        await close_async_iterator(iterator)
    except Exception as close_error:
        logger.warning(
            "failed to close %r while handling %s",
            iterator,
            type(error).__name__,
            exc_info=close_error,
        )
        error.add_note(f"closing the iterator also failed: {close_error!r}")
