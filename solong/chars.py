"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_WHITESPACE = " \n\v\f\r\t"


def _code(c: int | str) -> int:
    """Return the integer code of a character given as an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return c


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0 to 9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII, space included."""
    return 32 <= _code(c) <= 126


def _shift_case(c: int | str, low: str, high: str, delta: int) -> int | str:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII letter; anything else comes back unchanged, in the type given."""
    return _shift_case(c, "a", "z", ord("A") - ord("a"))


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII letter; anything else comes back unchanged, in the type given."""
    return _shift_case(c, "A", "Z", ord("a") - ord("A"))


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first character that is not a digit. Text with no digits
    gives 0.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    number = 0
    for ch in stripped:
        if not ("0" <= ch <= "9"):
            break
        number = number * 10 + (ord(ch) - ord("0"))
    return sign * number


def itoa(n: int) -> str:
    """Format an integer in decimal, with a leading '-' when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    digits = []
    magnitude = abs(n)
    while True:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(chr(ord("0") + digit))
        if magnitude == 0:
            break
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))