"""
Comparison kinds.

Every value handed to the equality and hashing functions is classified into
one of a small, closed set of kinds, and the functions dispatch on the kind
rather than on the concrete type.
"""

from collections import UserString
from collections.abc import KeysView, ItemsView
from enum import Enum
from typing import Any, Protocol, runtime_checkable

import numpy as np


class Kind(Enum):
    """Closed set of comparison kinds."""

    MISSING = "missing"
    CHARS = "chars"
    ORDERED = "ordered"
    COLLECTION = "collection"
    SCALAR = "scalar"


@runtime_checkable
class SupportsCompareTo(Protocol):
    """A value that defines a total order with values of its own type."""

    def compare_to(self, other: Any) -> int:
        ...


CHAR_TYPES = (str, UserString)
ORDERED_TYPES = (list, tuple, np.ndarray)
COLLECTION_TYPES = (set, frozenset, KeysView, ItemsView)


def classify(value: Any) -> Kind:
    """Return the comparison kind of a value."""
    if value is None:
        return Kind.MISSING
    if isinstance(value, CHAR_TYPES):
        return Kind.CHARS
    if isinstance(value, ORDERED_TYPES):
        return Kind.ORDERED
    if isinstance(value, COLLECTION_TYPES):
        return Kind.COLLECTION
    return Kind.SCALAR
