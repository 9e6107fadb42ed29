"""String helpers: splitting, searching, bounded copy/compare, mapping and trimming."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_NUL = "\0"


def _single_char(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    _single_char(sep)
    return [word for word in text.split(sep) if word]


def strchr(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``, or None.

    Searching for the NUL character finds the end of the text.
    """
    _single_char(char)
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``, or None.

    Searching for the NUL character finds the end of the text.
    """
    _single_char(char)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters, or None.

    An empty needle is found at index 0.
    """
    _non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(first: str, second: str, length: int) -> int:
    """Compare at most ``length`` characters.

    Returns the code difference of the first pair that differs, where the end
    of a string counts as code 0, or 0 when the compared parts are equal.
    """
    _non_negative("length", length)
    for index in range(length):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``, so truncation
    shows as a copy shorter than the length.
    """
    _non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    have had, counting ``dst`` as at most ``size`` long.
    """
    _non_negative("size", size)
    if size == 0:
        return dst, len(src)
    room = size - 1 - len(dst)
    result = dst + src[:room] if room > 0 else dst
    return result, min(len(dst), size) + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    text: MutableSequence[str], func: Callable[[int, str], str | None]
) -> None:
    """Call ``func(index, char)`` on each character of ``text`` in place.

    A string returned by ``func`` replaces the character; None leaves it.
    """
    for index, ch in enumerate(text):
        replacement = func(index, ch)
        if replacement is not None:
            text[index] = replacement


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty past the end."""
    _non_negative("start", start)
    _non_negative("length", length)
    if start > len(text):
        return ""
    return text[start : start + length]