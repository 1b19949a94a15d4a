"""Tests for comparison kind classification."""

from collections import UserString

import numpy as np
import pytest

from nullsafe_compare.kinds import Kind, SupportsCompareTo, classify


class TestClassify:
    """Each value maps to exactly one kind."""

    @pytest.mark.parametrize(
        "value, kind",
        [
            (None, Kind.MISSING),
            ("abc", Kind.CHARS),
            (UserString("abc"), Kind.CHARS),
            ([1, 2], Kind.ORDERED),
            ((1, 2), Kind.ORDERED),
            (np.array([1, 2]), Kind.ORDERED),
            ({1, 2}, Kind.COLLECTION),
            (frozenset({1}), Kind.COLLECTION),
            ({"a": 1}.keys(), Kind.COLLECTION),
            (42, Kind.SCALAR),
            (3.5, Kind.SCALAR),
            (b"ab", Kind.SCALAR),
            ({"a": 1}, Kind.SCALAR),
        ],
    )
    def test_classify(self, value, kind):
        assert classify(value) is kind


class TestSupportsCompareTo:
    """The capability is detected structurally."""

    def test_has_compare_to(self):
        class Version:
            def compare_to(self, other):
                return 0

        assert isinstance(Version(), SupportsCompareTo)

    def test_plain_value(self):
        assert not isinstance(3, SupportsCompareTo)
