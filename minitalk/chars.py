"""Character classification, integer/text conversion and raw descriptor output."""

from __future__ import annotations

import os

__all__ = [
    "atoi",
    "itoa",
    "isalpha",
    "isdigit",
    "isalnum",
    "isascii",
    "isprint",
    "toupper",
    "tolower",
    "putchar_fd",
    "putstr_fd",
    "putendl_fd",
    "putnbr_fd",
]

# Tab, newline, vertical tab, form feed, carriage return and space.
_LEADING_SPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")


def _code(c: int | str) -> int:
    """Return the integer code of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping leading whitespace.

    Parsing stops at the first non-digit; text without digits gives 0.
    """
    rest = text.lstrip("".join(_LEADING_SPACE))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if ch not in _DIGITS:
            break
        digits.append(ch)
    if not digits:
        return 0
    return sign * int("".join(digits))


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def isalpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def isdigit(c: int | str) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def toupper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; other values pass through unchanged."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return chr(code) if isinstance(c, str) else code


def tolower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; other values pass through unchanged."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return chr(code) if isinstance(c, str) else code


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _to_bytes(s: str | bytes) -> bytes:
    return s if isinstance(s, bytes) else s.encode("utf-8")


def putchar_fd(c: int | str, fd: int) -> None:
    """Write one character to a file descriptor.

    An integer is written as a single byte (taken modulo 256).
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    else:
        data = bytes([_code(c) & 0xFF])
    _write_all(fd, data)


def putstr_fd(s: str | bytes, fd: int) -> None:
    """Write a string to a file descriptor."""
    _write_all(fd, _to_bytes(s))


def putendl_fd(s: str | bytes, fd: int) -> None:
    """Write a string followed by a newline to a file descriptor."""
    _write_all(fd, _to_bytes(s) + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal representation of an integer to a file descriptor."""
    _write_all(fd, itoa(n).encode("ascii"))