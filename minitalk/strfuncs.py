"""String and byte-sequence helpers: searching, slicing, joining and comparing."""

from __future__ import annotations

from typing import Callable

__all__ = [
    "split",
    "strchr",
    "strrchr",
    "strjoin",
    "strlcpy",
    "strlcat",
    "strmapi",
    "strncmp",
    "strnstr",
    "strtrim",
    "substr",
    "memchr",
    "memcmp",
]


def _single_char(c: str, name: str) -> str:
    if not isinstance(c, str):
        raise TypeError(f"{name} must be a str, got {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"{name} must be a single character, got {c!r}")
    return c


def _non_negative(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    _single_char(sep, "sep")
    return [word for word in s.split(sep) if word]


def strchr(s: str, c: str) -> int | None:
    """Index of the first ``c`` in ``s``, or None.

    Searching for ``"\\0"`` finds the end of the string, so ``len(s)`` is returned.
    """
    _single_char(c, "c")
    if c == "\0":
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Index of the last ``c`` in ``s``, or None.

    Searching for ``"\\0"`` finds the end of the string, so ``len(s)`` is returned.
    """
    _single_char(c, "c")
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strjoin(a: str, b: str) -> str:
    """Concatenate two strings."""
    return a + b


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text, truncated to ``size - 1`` characters, and the full
    length of ``src`` (the length the caller would have needed).
    """
    _non_negative(size, "size")
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters including the terminator.

    Returns the resulting text and the length that the full concatenation would
    need, counting at most ``size`` characters of ``dst``. When ``dst`` already
    fills the buffer nothing is appended.
    """
    _non_negative(size, "size")
    kept = min(len(dst), size)
    if kept == size:
        return dst, size + len(src)
    room = size - kept - 1
    return dst + src[:room], kept + len(src)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` applied to every character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def _codes(s: str | bytes) -> list[int]:
    return list(s) if isinstance(s, (bytes, bytearray)) else [ord(ch) for ch in s]


def strncmp(s1: str | bytes, s2: str | bytes, n: int) -> int:
    """Compare at most ``n`` characters; the result's sign orders ``s1`` against ``s2``.

    Comparison stops at the first difference or at the end of either string
    (a NUL character also ends a string). Returns the difference of the first
    differing character codes, or 0.
    """
    _non_negative(n, "n")
    a, b = _codes(s1), _codes(s2)
    for i in range(n):
        x = a[i] if i < len(a) else 0
        y = b[i] if i < len(b) else 0
        if x != y or x == 0:
            return x - y
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of the first ``little`` lying wholly within the first ``length`` characters of ``big``.

    An empty ``little`` is found at 0; otherwise None when there is no match.
    """
    _non_negative(length, "length")
    if not little:
        return 0
    if length == 0:
        return None
    end = big.find("\0")
    limit = length if end < 0 else min(length, end)
    index = big.find(little, 0, limit)
    return None if index < 0 else index


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not isinstance(s, str) or not isinstance(charset, str):
        raise TypeError("strtrim expects two strings")
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` starting at ``start``; empty past the end."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start > len(s):
        return ""
    return s[start : start + length]


def _check_span(data: bytes | bytearray | memoryview, n: int, name: str) -> bytes:
    _non_negative(n, "n")
    raw = bytes(data)
    if n > len(raw):
        raise ValueError(f"n ({n}) exceeds the length of {name} ({len(raw)})")
    return raw


def memchr(data: bytes | bytearray | memoryview, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` (modulo 256) in the first ``n`` bytes, or None."""
    raw = _check_span(data, n, "data")
    index = raw.find(c & 0xFF, 0, n)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray | memoryview, b: bytes | bytearray | memoryview, n: int) -> int:
    """Compare the first ``n`` bytes; returns the difference of the first differing bytes, or 0."""
    left = _check_span(a, n, "a")
    right = _check_span(b, n, "b")
    for x, y in zip(left[:n], right[:n]):
        if x != y:
            return x - y
    return 0