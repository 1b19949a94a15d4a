"""
Null-safe ordering.

All functions return a negative number, zero or a positive number, like a
three-way ``compareTo``.

Two null conventions live side by side here:

- ``compare`` and ``compare_with`` sort None FIRST.
- ``compare_bytes`` sorts None LAST.

The byte-sequence convention has always been the odd one out. Callers may
depend on either order, so do not unify them.
"""

import functools
import math
from typing import Any, Callable, Optional

import numpy as np

from .kinds import SupportsCompareTo

Comparator = Callable[[Any, Any], int]


def _sign(value: Any) -> int:
    return (value > 0) - (value < 0)


def compare_bool(a: bool, b: bool) -> int:
    """Order booleans with False before True."""
    if a == b:
        return 0
    return 1 if a else -1


def _compare_integral(a: int, b: int, dtype: type) -> int:
    info = np.iinfo(dtype)
    for value in (a, b):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise TypeError(f"Expected an integer, got {type(value).__name__}")
        if not info.min <= value <= info.max:
            raise ValueError(f"{value} is out of range for {info.dtype}")
    return _sign(int(a) - int(b))


def compare_byte(a: int, b: int) -> int:
    """Compare two signed 8-bit integers."""
    return _compare_integral(a, b, np.int8)


def compare_int(a: int, b: int) -> int:
    """Compare two signed 32-bit integers."""
    return _compare_integral(a, b, np.int32)


def compare_long(a: int, b: int) -> int:
    """Compare two signed 64-bit integers."""
    return _compare_integral(a, b, np.int64)


def compare_double(a: float, b: float) -> int:
    """
    Total order over doubles.

    -0.0 sorts before 0.0, and NaN equals itself and sorts above +inf.
    """
    a = float(a)
    b = float(b)
    if a < b:
        return -1
    if a > b:
        return 1

    a_nan = math.isnan(a)
    b_nan = math.isnan(b)
    if a_nan or b_nan:
        return int(a_nan) - int(b_nan)

    # Equal by value; only the sign of zero can still differ
    return _sign(math.copysign(1.0, a) - math.copysign(1.0, b))


def _as_signed_bytes(seq: Any) -> np.ndarray:
    if isinstance(seq, (bytes, bytearray, memoryview)):
        return np.frombuffer(bytes(seq), dtype=np.int8)
    values = np.asarray(seq)
    if values.size == 0:
        return np.empty(0, dtype=np.int8)
    if values.dtype.kind not in "iu":
        raise TypeError(f"Byte values must be integers, got {values.dtype}")
    if values.min() < -128 or values.max() > 255:
        raise ValueError("Byte values must be in the range -128..255")
    # 128..255 wrap to their signed value
    return values.astype(np.int64).astype(np.int8)


def compare_bytes(b1: Optional[Any], b2: Optional[Any]) -> int:
    """
    Order byte sequences by length, then by signed byte value.

    None sorts AFTER every present sequence, unlike ``compare``. Bytes are
    read as signed (0x80 is -128), so b"\\x80" sorts before b"\\x01".

    Args:
        b1: bytes, bytearray, memoryview, a sequence of ints or None
        b2: Same as b1

    Returns:
        -1, 0 or 1

    Raises:
        TypeError: If an int sequence holds non-integer values
        ValueError: If an int sequence holds values outside -128..255
    """
    if b1 is b2:
        return 0
    if b1 is None:
        return 1
    if b2 is None:
        return -1

    arr1 = _as_signed_bytes(b1)
    arr2 = _as_signed_bytes(b2)
    if len(arr1) != len(arr2):
        return 1 if len(arr1) > len(arr2) else -1

    diff = np.flatnonzero(arr1 != arr2)
    if len(diff) == 0:
        return 0
    i = diff[0]
    return 1 if arr1[i] > arr2[i] else -1


def compare(a: Any, b: Any) -> int:
    """
    Compare two values by their natural order, None first.

    Values implementing ``compare_to`` are ordered by it; anything else by
    ``<`` and ``>``. A TypeError from unorderable values is not caught.
    """
    if a is b:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    if isinstance(a, SupportsCompareTo):
        return _sign(a.compare_to(b))
    return (a > b) - (a < b)


def compare_with(a: Any, b: Any, comparator: Comparator) -> int:
    """Compare two values with ``comparator``, None first."""
    if a is b:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    return comparator(a, b)


def null_first_key(comparator: Optional[Comparator] = None):
    """
    Build a sort key applying the None-first order.

    >>> sorted([3, None, 1], key=null_first_key())
    [None, 1, 3]
    """
    if comparator is None:
        return functools.cmp_to_key(compare)
    return functools.cmp_to_key(
        lambda a, b: compare_with(a, b, comparator)
    )
