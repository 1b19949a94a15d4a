"""
nullsafe-compare: null-safe equality, ordering and hashing helpers.

None is treated as a first-class missing value throughout, string equality
can ignore case with an ASCII fast path, and containers can be compared for
set-equality.
"""

from .casefold import (
    chars_equal_ignore_case,
    chars_equal_upper_then_lower,
    to_lower_case,
    to_upper_case,
)
from .equality import (
    equal,
    equal_arrays,
    equal_chars,
    equal_str,
    have_equal_elements,
    str_equal,
)
from .hashing import hashcode, hashcode_pair
from .kinds import Kind, SupportsCompareTo, classify
from .ordering import (
    compare,
    compare_bool,
    compare_byte,
    compare_bytes,
    compare_double,
    compare_int,
    compare_long,
    compare_with,
    null_first_key,
)

__version__ = "0.1.0"
__all__ = [
    "equal",
    "equal_arrays",
    "equal_chars",
    "equal_str",
    "str_equal",
    "have_equal_elements",
    "hashcode",
    "hashcode_pair",
    "compare",
    "compare_with",
    "compare_bool",
    "compare_byte",
    "compare_int",
    "compare_long",
    "compare_double",
    "compare_bytes",
    "null_first_key",
    "to_upper_case",
    "to_lower_case",
    "chars_equal_ignore_case",
    "chars_equal_upper_then_lower",
    "Kind",
    "SupportsCompareTo",
    "classify",
]
