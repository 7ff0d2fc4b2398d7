"""Bit-level wire protocol: one signal per bit, most significant bit first."""

from __future__ import annotations

import signal
from typing import Iterator

__all__ = [
    "BIT_SIGNALS",
    "SIGNAL_BITS",
    "ACK_SIGNAL",
    "BITS_PER_BYTE",
    "encode_bits",
    "BitDecoder",
]

BITS_PER_BYTE = 8

# SIGUSR1 carries a one bit, SIGUSR2 a zero bit.
BIT_SIGNALS: dict[int, signal.Signals] = {1: signal.SIGUSR1, 0: signal.SIGUSR2}
SIGNAL_BITS: dict[int, int] = {sig: bit for bit, sig in BIT_SIGNALS.items()}

# Sent back by the acknowledging server once the terminating NUL byte arrives.
ACK_SIGNAL = signal.SIGUSR1


def encode_bits(text: str | bytes, terminate: bool = False) -> Iterator[int]:
    """Yield the bits of ``text`` byte by byte, most significant bit first.

    A str is encoded as UTF-8. With ``terminate`` a NUL byte follows the text,
    marking the end of the message.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    if terminate:
        data += b"\0"
    for byte in data:
        for shift in range(BITS_PER_BYTE - 1, -1, -1):
            yield (byte >> shift) & 1


class BitDecoder:
    """Collects bits, most significant first, into whole bytes."""

    __slots__ = ("_value", "_count")

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    @property
    def pending(self) -> int:
        """Number of bits collected towards the next byte."""
        return self._count

    def push(self, bit: int) -> int | None:
        """Add one bit; return the byte it completes, or None."""
        if bit not in (0, 1) or isinstance(bit, bool):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        self._value |= bit << (BITS_PER_BYTE - 1 - self._count)
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self._value = 0
        self._count = 0
        return byte