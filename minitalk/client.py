"""Sending side: transmits a message to a server process one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import Sequence

from minitalk.chars import atoi
from minitalk.formatting import print_formatted
from minitalk.protocol import ACK_SIGNAL, BIT_SIGNALS, encode_bits

__all__ = ["DEFAULT_DELAY", "send_message", "main", "bonus_main"]

# Pause between two signals, in seconds.
DEFAULT_DELAY = 0.0005


def send_message(
    pid: int,
    text: str | bytes,
    terminate: bool = False,
    delay: float = DEFAULT_DELAY,
) -> None:
    """Send ``text`` to process ``pid``, one signal per bit, pausing ``delay`` after each.

    With ``terminate`` a NUL byte follows the text.
    """
    if delay < 0:
        raise ValueError(f"delay must not be negative, got {delay}")
    for bit in encode_bits(text, terminate):
        os.kill(pid, BIT_SIGNALS[bit])
        time.sleep(delay)


def _on_acknowledge(signum: int, frame: object) -> None:
    print_formatted("\nServer has received the message!")


def _run(argv: Sequence[str] | None, terminate: bool, bad_pid_status: int) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print_formatted("Something is wrong with arguments! ")
        print_formatted("Make sure you enter both PID and message")
        return 0
    server_pid = atoi(args[0])
    if not server_pid:
        print_formatted("Something is wrong with server's PID")
        return bad_pid_status
    try:
        send_message(server_pid, args[1], terminate)
    except OSError as exc:
        print_formatted("Could not signal the server: %s", exc.strerror or str(exc))
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Send the message given as ``PID MESSAGE``."""
    return _run(argv, terminate=False, bad_pid_status=1)


def bonus_main(argv: Sequence[str] | None = None) -> int:
    """Send a terminated message and report the server's acknowledgement."""
    signal.signal(ACK_SIGNAL, _on_acknowledge)
    return _run(argv, terminate=True, bad_pid_status=0)