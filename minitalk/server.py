"""Receiving side: rebuilds bytes from signals and writes them to standard output."""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO, Callable, Sequence

from minitalk.formatting import print_formatted
from minitalk.protocol import ACK_SIGNAL, SIGNAL_BITS, BitDecoder

__all__ = ["Server", "main", "bonus_main"]


class Server:
    """Decodes one bit per signal and writes every completed byte.

    With ``acknowledge`` the sender is signalled back once a NUL byte,
    the end of a message, has been received.
    """

    def __init__(
        self,
        out: BinaryIO | None = None,
        acknowledge: bool = False,
        notify: Callable[[int, int], None] = os.kill,
    ) -> None:
        self.out = sys.stdout.buffer if out is None else out
        self.acknowledge = acknowledge
        self.notify = notify
        self._decoder = BitDecoder()

    def handle(self, signum: int, sender_pid: int = 0) -> None:
        """Process one received signal; signals other than the bit signals are ignored."""
        bit = SIGNAL_BITS.get(signum)
        if bit is None:
            return
        byte = self._decoder.push(bit)
        if byte is None:
            return
        if self.acknowledge and byte == 0 and sender_pid:
            self.notify(sender_pid, ACK_SIGNAL)
        self.out.write(bytes([byte]))
        self.out.flush()

    def run(self) -> None:
        """Announce the process id and serve incoming signals forever."""
        print_formatted("PID from the server is: %i\n", os.getpid())
        watched = set(SIGNAL_BITS)
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, watched)
        try:
            while True:
                info = signal.sigwaitinfo(watched)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def _serve(acknowledge: bool) -> int:
    try:
        Server(acknowledge=acknowledge).run()
    except KeyboardInterrupt:
        pass
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Start the plain server; it takes no arguments."""
    return _serve(acknowledge=False)


def bonus_main(argv: Sequence[str] | None = None) -> int:
    """Start the server that acknowledges complete messages; it takes no arguments."""
    return _serve(acknowledge=True)