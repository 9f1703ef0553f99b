from __future__ import annotations

import importlib
from typing import Any, Callable, Iterable, Optional

__all__ = [
    "install_helpers",
    "register_helper",
    "load_helper",
    "AsyncIteratorHelpers",
    "helper_names",
]

# Helper name -> (module, attribute). Modules are imported on first use.
_HELPER_REGISTRY: dict[str, tuple[str, str]] = {
    "for_each": (".for_each", "for_each"),
    "filter_map": (".filter_map", "filter_map"),
}

_HELPER_CACHE: dict[str, Callable[..., Any]] = {}


def register_helper(name: str, module_name: str, attr_name: str) -> None:
    """Make another helper available to :func:`install_helpers`.

    ``module_name`` may be relative to this package.
    """
    _HELPER_REGISTRY[name] = (module_name, attr_name)
    _HELPER_CACHE.pop(name, None)


def helper_names() -> tuple[str, ...]:
    return tuple(_HELPER_REGISTRY)


def load_helper(name: str) -> Callable[..., Any]:
    helper = _HELPER_CACHE.get(name)
    if helper is None:
        try:
            module_name, attr_name = _HELPER_REGISTRY[name]
        except KeyError as exc:
            raise LookupError(f"unknown helper: {name}") from exc
        module = importlib.import_module(module_name, package=__name__)
        helper = getattr(module, attr_name)
        _HELPER_CACHE[name] = helper
    return helper


def install_helpers(target, names: Optional[Iterable[str]] = None) -> None:
    """Attach helpers to a class (as methods) or to a namespace dict.

    Built-in types cannot take new attributes and are rejected up front.
    """
    selected = list(_HELPER_REGISTRY) if names is None else list(names)
    if isinstance(target, dict):
        for name in selected:
            target[name] = load_helper(name)
        return
    if not isinstance(target, type):
        raise TypeError(
            f"helpers can only be installed on a class or dict, got {type(target).__name__}"
        )
    if target.__module__ == "builtins":
        raise TypeError(f"cannot install helpers on built-in type {target.__name__}")
    for name in selected:
        setattr(target, name, load_helper(name))


class AsyncIteratorHelpers:
    """Mixin giving an async iterator class ``for_each`` and ``filter_map``."""

    __slots__ = ()


install_helpers(AsyncIteratorHelpers)
