"""
Character case mapping with an ASCII fast path.

Letters 'a'..'z' and 'A'..'Z' are mapped by a fixed offset; only characters
outside that range consult the Unicode case tables. Mappings that expand to
more than one character (e.g. 'ß'.upper() == 'SS') leave the character as is.
"""

_UPPER_OFFSET = ord("A") - ord("a")
_LOWER_OFFSET = ord("a") - ord("A")


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"Expected a single character, got {c!r}")


def _single(mapped: str, c: str) -> str:
    return mapped if len(mapped) == 1 else c


def to_upper_case(c: str) -> str:
    """Uppercase a single character."""
    _check_char(c)
    if c < "a":
        return c
    if c <= "z":
        return chr(ord(c) + _UPPER_OFFSET)
    return _single(c.upper(), c)


def to_lower_case(c: str) -> str:
    """Lowercase a single character."""
    _check_char(c)
    if c < "A" or "a" <= c <= "z":
        return c
    if c <= "Z":
        return chr(ord(c) + _LOWER_OFFSET)
    return _single(c.lower(), c)


def chars_equal_ignore_case(a: str, b: str) -> bool:
    """
    Compare two characters ignoring case.

    Both directions are checked since some pairs only agree in one of them:
    'ſ' and 's' share an uppercase form but not a lowercase one.
    """
    return (
        a == b
        or to_upper_case(a) == to_upper_case(b)
        or to_lower_case(a) == to_lower_case(b)
    )


def chars_equal_upper_then_lower(a: str, b: str) -> bool:
    """
    Compare two characters ignoring case, lowercasing the uppercased forms.

    Catches pairs like 'ϑ' and 'ϴ', whose uppercase forms differ but share a
    lowercase.
    """
    if a == b:
        return True
    upper_a = to_upper_case(a)
    upper_b = to_upper_case(b)
    return upper_a == upper_b or to_lower_case(upper_a) == to_lower_case(upper_b)
