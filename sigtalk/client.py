"""Sending side: push a message to a server one bit-signal at a time."""

from __future__ import annotations

import os
import signal
import sys
from contextlib import contextmanager
from typing import Iterator, Union

from sigtalk.output import put_str
from sigtalk.protocol import ONE_SIGNAL, ZERO_SIGNAL, byte_to_bits, encode_message
from sigtalk.textops import atoi

__all__ = [
    "ServerUnavailable",
    "check_server",
    "send_bit",
    "send_byte",
    "send_message",
    "main",
]

_ACK_SIGNALS = frozenset({signal.SIGUSR1, signal.SIGUSR2})
_USAGE = "Usage: client <PID> <MESSAGE>\n"


class ServerUnavailable(Exception):
    """The given process id does not name a reachable server."""


@contextmanager
def _acks_held() -> Iterator[None]:
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, _ACK_SIGNALS)
    try:
        yield
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def check_server(pid: int) -> None:
    """Raise ``ServerUnavailable`` unless ``pid`` is a process we may signal."""
    if pid <= 0:
        raise ServerUnavailable("Invalid PID or Server Not On")
    try:
        os.kill(pid, 0)
    except OSError as exc:
        raise ServerUnavailable("Invalid PID or Server Not On") from exc


def send_bit(pid: int, bit: int) -> signal.Signals:
    """Send one bit and wait for the acknowledgement; return the signal received."""
    with _acks_held():
        os.kill(pid, ONE_SIGNAL if bit else ZERO_SIGNAL)
        return signal.Signals(signal.sigwait(_ACK_SIGNALS))


def send_byte(pid: int, value: int) -> None:
    """Send the eight bits of ``value``, most significant first."""
    with _acks_held():
        for bit in byte_to_bits(value):
            send_bit(pid, bit)


def send_message(pid: int, message: Union[str, bytes]) -> int:
    """Send ``message`` and its closing NUL; return the number of bytes sent."""
    sent_bits = 0
    with _acks_held():
        for bit in encode_message(message):
            send_bit(pid, bit)
            sent_bits += 1
    return sent_bits // 8


def main(argv=None) -> int:
    """Command entry point: ``client <PID> <MESSAGE>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        put_str(_USAGE, sys.stderr)
        return 1
    pid = atoi(args[0])
    try:
        check_server(pid)
    except ServerUnavailable as exc:
        put_str(f"{exc}\n", sys.stderr)
        return 0
    send_message(pid, os.fsencode(args[1]))
    return 0


if __name__ == "__main__":
    sys.exit(main())