from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _dist_version

from .runtime import AsyncIteratorHelpers, install_helpers, register_helper
from .runtime.closing import close_async_iterator
from .runtime.equality import same_value_zero
from .runtime.errors import ArgumentTypeError, ReceiverTypeError
from .runtime.filter_map import FilterMap, filter_map
from .runtime.for_each import for_each
from .runtime.guards import Step, bind_iterator, validate_arg
from .runtime.identity import arity, mimic


try:
    __version__ = _dist_version("aiterx")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0"


__all__ = [
    "for_each",
    "filter_map",
    "FilterMap",
    "close_async_iterator",
    "same_value_zero",
    "bind_iterator",
    "validate_arg",
    "mimic",
    "arity",
    "Step",
    "ArgumentTypeError",
    "ReceiverTypeError",
    "AsyncIteratorHelpers",
    "install_helpers",
    "register_helper",
    "__version__",
]
