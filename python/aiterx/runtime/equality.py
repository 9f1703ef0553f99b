from __future__ import annotations

import math
import numbers

_VALUE_TYPES = (str, bytes)


def _is_nan(value) -> bool:
    try:
        return isinstance(value, numbers.Number) and math.isnan(value)
    except (TypeError, ValueError):
        return False


def same_value_zero(left, right) -> bool:
    """Compare two values the way a suppression sentinel is matched.

    NaN is equal to itself and ``0.0`` is equal to ``-0.0``. Numbers, strings
    and bytes compare by value (booleans only against booleans); every other
    object compares by identity.
    """
    if left is right:
        return True
    if isinstance(left, bool) or isinstance(right, bool):
        return False
    if isinstance(left, numbers.Number) and isinstance(right, numbers.Number):
        if _is_nan(left) and _is_nan(right):
            return True
        return left == right
    for value_type in _VALUE_TYPES:
        if isinstance(left, value_type) and isinstance(right, value_type):
            return left == right
    return False
