"""The one-bit-per-signal wire protocol shared by client and server.

Each byte travels most significant bit first. SIGUSR1 carries a 0 bit,
SIGUSR2 a 1 bit, and the receiver answers every bit with SIGUSR1.
"""

from __future__ import annotations

import signal
from typing import Iterator, List, Optional, Union

BITS_PER_BYTE = 8

ZERO_SIGNAL = signal.SIGUSR1
ONE_SIGNAL = signal.SIGUSR2
ACK_SIGNAL = signal.SIGUSR1


def _check_bit(bit: int) -> int:
    if isinstance(bit, (int,)) and bit in (0, 1):
        return int(bit)
    raise ValueError(f"a bit must be 0 or 1, got {bit!r}")


def byte_to_bits(value: int) -> List[int]:
    """Return the eight bits of a byte, most significant first.

    Signed byte values from -128 are accepted and taken as their unsigned
    bit pattern.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, not {type(value).__name__}")
    if not -128 <= value <= 255:
        raise ValueError(f"{value} does not fit in a byte")
    value &= 0xFF
    return [(value >> shift) & 1 for shift in reversed(range(BITS_PER_BYTE))]


def message_to_bits(message: Union[str, bytes]) -> Iterator[int]:
    """Yield the bits of every byte of ``message`` in sending order.

    Text is encoded the way the file system encodes command-line arguments.
    """
    data = message.encode("utf-8", "surrogateescape") if isinstance(message, str) else bytes(message)
    for byte in data:
        yield from byte_to_bits(byte)


def signal_for_bit(bit: int) -> int:
    """The signal that carries ``bit``."""
    return ONE_SIGNAL if _check_bit(bit) else ZERO_SIGNAL


def bit_for_signal(signum: int) -> int:
    """The bit a received signal stands for: 1 for SIGUSR2, else 0."""
    received = int(signum)
    if received == int(ONE_SIGNAL):
        return 1
    return 0


class BitAssembler:
    """Collect bits, most significant first, into bytes."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    @property
    def pending(self) -> int:
        """Number of bits received towards the current byte."""
        return self._count

    def feed(self, bit: int) -> Optional[int]:
        """Add one bit; return the finished byte after every eighth bit."""
        self._value = (self._value << 1) | _check_bit(bit)
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self._value = 0
        self._count = 0
        return byte