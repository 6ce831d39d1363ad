"""Receiving side: rebuild bytes from signals and print them."""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO, Callable, Optional

from sigtalk.protocol import ACK_SIGNAL, BIT_SIGNALS, ONE_SIGNAL, ByteAssembler

__all__ = ["Server", "main"]

Notifier = Callable[[int, int], None]


class Server:
    """Turns bit signals into bytes written to ``stream``.

    Every received bit is acknowledged to its sender through ``notify``, which
    is called as ``notify(pid, signum)`` and defaults to ``os.kill``.
    """

    def __init__(self, stream: Optional[BinaryIO] = None, notify: Optional[Notifier] = None) -> None:
        self.stream = sys.stdout.buffer if stream is None else stream
        self.notify = os.kill if notify is None else notify
        self._assembler = ByteAssembler()

    def _write(self, data: bytes) -> None:
        self.stream.write(data)
        self.stream.flush()

    def handle(self, signum: int, sender_pid: int) -> Optional[int]:
        """Take one bit signal from ``sender_pid`` and acknowledge it.

        Returns the byte completed by this bit, if any.  A completed NUL ends a
        message and is printed as a newline.
        """
        value = self._assembler.push(1 if signum == ONE_SIGNAL else 0)
        if value is not None:
            self._write(b"\n" if value == 0 else bytes([value]))
        self.notify(sender_pid, ACK_SIGNAL)
        return value

    def serve_forever(self) -> None:
        """Announce the process id, then handle bit signals until interrupted."""
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, BIT_SIGNALS)
        try:
            self._write(f"Server Pid:{os.getpid()}\n".encode("ascii"))
            while True:
                info = signal.sigwaitinfo(BIT_SIGNALS)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv=None) -> int:
    """Run the server; command-line arguments are ignored."""
    try:
        Server().serve_forever()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())