"""A small printf-style formatter supporting %c %s %d %i %u %p %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator

from minitalk.chars import itoa

__all__ = ["format_message", "print_formatted"]

_INT_BITS = 32
_POINTER_BITS = 64
_UINT_MASK = (1 << _INT_BITS) - 1
_POINTER_MASK = (1 << _POINTER_BITS) - 1
_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"


def _as_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _signed(value: int) -> int:
    """Wrap an integer to the range of a 32-bit signed int."""
    value &= _UINT_MASK
    return value - (1 << _INT_BITS) if value >> (_INT_BITS - 1) else value


def _hex(value: int, digits: str) -> str:
    if value == 0:
        return digits[0]
    out = []
    while value:
        value, rem = divmod(value, 16)
        out.append(digits[rem])
    return "".join(reversed(out))


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = _as_int(value, "p") & _POINTER_MASK
    if address == 0:
        return "(nil)"
    return "0x" + _hex(address, _LOWER_HEX)


def _render(spec: str, value: Any) -> str:
    if spec == "c":
        return _char(value)
    if spec == "s":
        return _string(value)
    if spec in ("d", "i"):
        return itoa(_signed(_as_int(value, spec)))
    if spec == "u":
        return str(_as_int(value, spec) & _UINT_MASK)
    if spec == "p":
        return _pointer(value)
    if spec == "x":
        return _hex(_as_int(value, spec) & _UINT_MASK, _LOWER_HEX)
    return _hex(_as_int(value, spec) & _UINT_MASK, _UPPER_HEX)


_CONSUMING = frozenset("csdiupxX")


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(enumerate(fmt))
    last = len(fmt) - 1
    for index, ch in chars:
        if ch != "%" or index == last:
            yield ch
            continue
        _, spec = next(chars)
        if spec == "%":
            yield "%"
        elif spec in _CONSUMING:
            try:
                value = next(remaining)
            except StopIteration:
                raise TypeError(f"not enough arguments for format string {fmt!r}") from None
            yield _render(spec, value)
        # Any other conversion character produces no output and takes no argument.


def format_message(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    Integers follow 32-bit C semantics: ``%d``/``%i`` wrap to a signed int,
    ``%u``/``%x``/``%X`` to an unsigned int. ``%s`` of None gives ``(null)``
    and ``%p`` of None or 0 gives ``(nil)``. Unknown conversions are dropped,
    and a lone ``%`` at the very end is kept as is. Extra arguments are ignored.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a str, got {type(fmt).__name__}")
    return "".join(_pieces(fmt, args))


def print_formatted(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output.

    Returns the number of characters written.
    """
    text = format_message(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)