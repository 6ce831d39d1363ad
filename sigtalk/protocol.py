"""Bit-level wire format shared by the client and the server.

Each byte travels as eight signals, most significant bit first: ``SIGUSR1``
carries a 1 and ``SIGUSR2`` a 0.  A message ends with a NUL byte.  The server
answers every bit with ``SIGUSR1``.
"""

from __future__ import annotations

import signal
from typing import Iterator, Optional, Tuple, Union

__all__ = [
    "ONE_SIGNAL",
    "ZERO_SIGNAL",
    "ACK_SIGNAL",
    "BIT_SIGNALS",
    "BITS_PER_BYTE",
    "byte_to_bits",
    "encode_message",
    "ByteAssembler",
]

ONE_SIGNAL = signal.SIGUSR1
ZERO_SIGNAL = signal.SIGUSR2
ACK_SIGNAL = signal.SIGUSR1
BIT_SIGNALS = frozenset({ONE_SIGNAL, ZERO_SIGNAL})
BITS_PER_BYTE = 8


def byte_to_bits(value: int) -> Tuple[int, ...]:
    """The eight bits of ``value``, most significant first."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return tuple((value >> shift) & 1 for shift in reversed(range(BITS_PER_BYTE)))


def encode_message(message: Union[str, bytes]) -> Iterator[int]:
    """Yield the bits of ``message`` followed by the bits of a closing NUL.

    A ``str`` is encoded as UTF-8.  Anything after an embedded NUL is not sent,
    since the NUL already ends the message.
    """
    if isinstance(message, str):
        data = message.encode("utf-8", "surrogateescape")
    else:
        data = bytes(message)
    data = data.split(b"\0", 1)[0] + b"\0"
    for value in data:
        yield from byte_to_bits(value)


class ByteAssembler:
    """Collects incoming bits and hands back each byte once it is complete."""

    def __init__(self) -> None:
        self._current = 0
        self._count = 0

    @property
    def pending(self) -> int:
        """Number of bits received towards the next byte."""
        return self._count

    def push(self, bit: int) -> Optional[int]:
        """Add one bit; return the finished byte after every eighth bit."""
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        self._current = ((self._current << 1) | bit) & 0xFF
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        value = self._current
        self.reset()
        return value

    def reset(self) -> None:
        """Drop any partially received byte."""
        self._current = 0
        self._count = 0