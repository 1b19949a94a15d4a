"""
Null-safe equality.

None is the missing value: two missing values are equal, a missing value is
never equal to a present one.
"""

from typing import Any, Iterable, Optional, Sequence

import numpy as np

from .casefold import chars_equal_ignore_case, chars_equal_upper_then_lower
from .kinds import Kind, classify


def as_elements(seq: Iterable) -> Sequence:
    """Turn an ndarray into (nested) Python lists, pass anything else through."""
    if isinstance(seq, np.ndarray):
        return seq.tolist() if seq.ndim else [seq.item()]
    return seq


def _elements_equal(a: Iterable, b: Iterable) -> bool:
    a_elems = as_elements(a)
    b_elems = as_elements(b)
    if len(a_elems) != len(b_elems):
        return False
    return all(equal(x, y) for x, y in zip(a_elems, b_elems))


def equal(a: Any, b: Any) -> bool:
    """
    Generic null-safe equality.

    Ordered sequences (lists, tuples, ndarrays) are compared element by
    element, character sequences case-sensitively; anything else falls back to
    the value's own ``==``.
    """
    if a is b:
        return True
    if a is None or b is None:
        return False

    kind_a = classify(a)
    kind_b = classify(b)
    if kind_a is Kind.ORDERED and kind_b is Kind.ORDERED:
        return _elements_equal(a, b)
    if kind_a is Kind.ORDERED or kind_b is Kind.ORDERED:
        return False
    if kind_a is Kind.CHARS and kind_b is Kind.CHARS:
        return equal_chars(a, b, case_sensitive=True)
    return bool(a == b)


def equal_arrays(a: Optional[Sequence], b: Optional[Sequence]) -> bool:
    """Element-wise equality of two arrays; a missing array only equals itself."""
    if a is None or b is None:
        return a is b
    return _elements_equal(a, b)


def equal_chars(s1: Any, s2: Any, case_sensitive: bool = True) -> bool:
    """
    Compare two character sequences character by character.

    Args:
        s1: First sequence (str, UserString, or None)
        s2: Second sequence
        case_sensitive: When False, characters that agree after upper- or
            lower-casing are considered equal

    Returns:
        True if both are None, or both have the same length and every
        character pair matches
    """
    if s1 is s2:
        return True
    if s1 is None or s2 is None:
        return False
    if len(s1) != len(s2):
        return False

    # UserString iterates as UserString characters
    for c1, c2 in zip(str(s1), str(s2)):
        if c1 == c2:
            continue
        if not case_sensitive and chars_equal_ignore_case(c1, c2):
            continue
        return False

    return True


def equal_str(
    s1: Optional[str], s2: Optional[str], case_sensitive: bool = True
) -> bool:
    """
    Null-safe string equality, optionally ignoring case.

    Ignoring case compares the uppercased characters, then the lowercase of
    those uppercased forms, which is not quite the rule ``equal_chars`` uses.
    """
    if s1 is None or s2 is None:
        return s1 is None and s2 is None
    if case_sensitive:
        return s1 == s2
    if len(s1) != len(s2):
        return False
    return all(
        chars_equal_upper_then_lower(c1, c2) for c1, c2 in zip(str(s1), str(s2))
    )


def str_equal(
    s1: Optional[str], s2: Optional[str], case_sensitive: bool = True
) -> bool:
    """String equality where None is treated as the empty string."""
    return equal_str(
        "" if s1 is None else s1,
        "" if s2 is None else s2,
        case_sensitive,
    )


def _contains_all(a_elems: Iterable, b_elems: Iterable) -> bool:
    try:
        distinct = set(a_elems)
        return all(t in distinct for t in b_elems)
    except TypeError:
        # Unhashable elements: linear scan
        candidates = list(a_elems)
        return all(any(equal(s, t) for s in candidates) for t in b_elems)


def have_equal_elements(a: Optional[Iterable], b: Optional[Iterable]) -> bool:
    """
    Check that two containers hold the same distinct elements.

    The sizes must match and every element of ``b`` must occur in ``a``.
    Duplicate counts are not checked, so ``[1, 1, 2]`` and ``[1, 2, 2]``
    compare equal. A missing container only equals another missing one.
    """
    if a is None or b is None:
        return a is b

    a_elems = as_elements(a)
    b_elems = as_elements(b)
    if len(a_elems) != len(b_elems):
        return False

    return _contains_all(a_elems, b_elems)
