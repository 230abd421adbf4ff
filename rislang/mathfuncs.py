"""Numeric functions of the math module: rounding, logarithms, powers and reductions."""

from __future__ import annotations

import math
from typing import Iterable, Union

Number = Union[int, float]

PI = math.pi
E = math.e


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: object) -> bool:
    return _is_int(value) or isinstance(value, float)


def _type_name(value: object) -> str:
    return type(value).__name__


def _as_float(value: object) -> float:
    if _is_number(value):
        return float(value)
    raise TypeError(f"type error: expected a number (got {_type_name(value)})")


def _require_number(value: object, fn: str) -> None:
    if not _is_number(value):
        raise TypeError(
            f"type error: argument to math.{fn} not supported, got={_type_name(value)}"
        )


def _items(values: Iterable[object]) -> list[object]:
    if isinstance(values, (list, tuple, set, frozenset)):
        return list(values)
    raise TypeError(f"type error: {_type_name(values)} object is not iterable")


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


def absolute(x: Number) -> Number:
    """Absolute value; ints stay ints and floats stay floats."""
    _require_number(x, "abs")
    return -x if x < 0 else x


def sqrt(x: Number) -> float:
    """Square root; negative input gives NaN."""
    _require_number(x, "sqrt")
    value = float(x)
    if value < 0:
        return math.nan
    return math.sqrt(value)


def maximum(values: Iterable[Number]) -> float:
    """Largest number in a list or set, as a float."""
    items = _items(values)
    if not items:
        raise ValueError("value error: math.max argument is an empty sequence")
    best_int: int | None = None
    best_float: float | None = None
    for value in items:
        if _is_int(value):
            if best_int is None or value > best_int:
                best_int = value
        elif isinstance(value, float):
            if best_float is None or value > best_float:
                best_float = value
        else:
            raise TypeError(f"type error: invalid array item for math.max: {_type_name(value)}")
    if best_float is not None:
        if best_int is not None and float(best_int) > best_float:
            return float(best_int)
        return best_float
    return float(best_int)


def minimum(values: Iterable[Number]) -> float:
    """Smallest number in a list or set, as a float."""
    items = _items(values)
    if not items:
        raise ValueError("value error: math.min argument is an empty sequence")
    best_int: int | None = None
    best_float: float | None = None
    for value in items:
        if _is_int(value):
            if best_int is None or value < best_int:
                best_int = value
        elif isinstance(value, float):
            if best_float is None or value < best_float:
                best_float = value
        else:
            raise TypeError(f"type error: invalid array item for math.min: {_type_name(value)}")
    if best_float is not None:
        if best_int is not None and float(best_int) < best_float:
            return float(best_int)
        return best_float
    return float(best_int)


def total(values: Iterable[Number]) -> float:
    """Sum of a list or set of numbers, as a float."""
    result = 0.0
    for value in _items(values):
        if not _is_number(value):
            raise ValueError(f"value error: invalid input for math.sum: {_type_name(value)}")
        result += float(value)
    return result


def ceil(x: Number) -> Number:
    """Smallest integral value not less than ``x``; ints are returned unchanged."""
    _require_number(x, "ceil")
    if _is_int(x) or not math.isfinite(x):
        return x
    return math.copysign(float(math.ceil(x)), x)


def floor(x: Number) -> Number:
    """Largest integral value not greater than ``x``; ints are returned unchanged."""
    _require_number(x, "floor")
    if _is_int(x) or not math.isfinite(x):
        return x
    return math.copysign(float(math.floor(x)), x)


def sin(x: Number) -> float:
    _require_number(x, "sin")
    value = float(x)
    return math.nan if math.isinf(value) else math.sin(value)


def cos(x: Number) -> float:
    _require_number(x, "cos")
    value = float(x)
    return math.nan if math.isinf(value) else math.cos(value)


def tan(x: Number) -> float:
    value = _as_float(x)
    return math.nan if math.isinf(value) else math.tan(value)


def mod(x: Number, y: Number) -> float:
    """Floating-point remainder of x / y with the sign of ``x``."""
    a, b = _as_float(x), _as_float(y)
    if math.isnan(a) or math.isnan(b) or math.isinf(a) or b == 0:
        return math.nan
    if math.isinf(b):
        return a
    return math.fmod(a, b)


def _logarithm(fn, x: Number) -> float:
    value = _as_float(x)
    if value == 0:
        return -math.inf
    if value < 0:
        return math.nan
    return fn(value)


def log(x: Number) -> float:
    """Natural logarithm; zero gives -inf and negatives give NaN."""
    return _logarithm(math.log, x)


def log10(x: Number) -> float:
    return _logarithm(math.log10, x)


def log2(x: Number) -> float:
    return _logarithm(math.log2, x)


def power(x: Number, y: Number) -> float:
    """x raised to y; domain errors give NaN or infinity instead of raising."""
    a, b = _as_float(x), _as_float(y)
    try:
        return math.pow(a, b)
    except ValueError:
        if a == 0:
            return math.copysign(math.inf, a) if _is_odd_integer(b) else math.inf
        return math.nan
    except OverflowError:
        if a < 0 and _is_odd_integer(b):
            return -math.inf
        return math.inf


def pow10(x: Number) -> float:
    """10 to the integer part of ``x``."""
    n = int(_as_float(x))
    if n > 308:
        return math.inf
    if n < -323:
        return 0.0
    if n >= 0:
        return float(10**n)
    return 10.0**n


def is_inf(x: Number) -> bool:
    return math.isinf(_as_float(x))


def round_half_away(x: Number) -> float:
    """Round to the nearest integer, halves away from zero."""
    value = _as_float(x)
    if not math.isfinite(value):
        return value
    whole = math.trunc(value)
    if abs(value - whole) >= 0.5:
        whole += 1 if value > 0 else -1
    return math.copysign(float(whole), value)