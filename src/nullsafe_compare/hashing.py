"""Null-safe hash codes."""

from typing import Any

from .equality import as_elements
from .kinds import Kind, classify


def hashcode(obj: Any) -> int:
    """
    Hash code of a value, 0 for None.

    Ordered sequences hash by their elements so that values considered equal
    by ``equal`` (a list and a tuple, or an ndarray and a list) share a hash.
    """
    kind = classify(obj)
    if kind is Kind.MISSING:
        return 0
    if kind is Kind.ORDERED:
        return hash(tuple(hashcode(e) for e in as_elements(obj)))
    if kind is Kind.CHARS:
        return hash(str(obj))
    if kind is Kind.COLLECTION:
        return hash(frozenset(obj))
    return hash(obj)


def hashcode_pair(obj1: Any, obj2: Any) -> int:
    """
    Combine two hash codes with XOR.

    Symmetric in its arguments and weak: equal hashes cancel out to 0.
    """
    return hashcode(obj1) ^ hashcode(obj2)
