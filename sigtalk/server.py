"""Receive messages one bit per signal and write them to standard output."""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO, Callable, NoReturn, Optional, Sequence

from .printf import printf
from .protocol import ACK_SIGNAL, ONE_SIGNAL, ZERO_SIGNAL, BitAssembler, bit_for_signal


def _send_ack(pid: int) -> None:
    os.kill(pid, ACK_SIGNAL)


class Server:
    """Assemble bits from incoming signals into bytes and write them out.

    ``output`` is a binary stream, standard output by default.
    ``acknowledge`` is called with the sender's pid after every bit; by
    default it signals the sender.
    """

    def __init__(
        self,
        output: Optional[BinaryIO] = None,
        acknowledge: Optional[Callable[[int], None]] = None,
    ) -> None:
        self._output = output if output is not None else sys.stdout.buffer
        self._acknowledge = acknowledge if acknowledge is not None else _send_ack
        self._assembler = BitAssembler()

    def handle(self, signum: int, sender_pid: int) -> Optional[int]:
        """Take one bit-carrying signal; return the byte it completes, if any."""
        byte = self._assembler.feed(bit_for_signal(signum))
        if byte is not None:
            self._output.write(bytes((byte,)))
            self._output.flush()
        self._acknowledge(sender_pid)
        return byte

    def serve_forever(self) -> NoReturn:
        """Wait for signals and handle each one until an exception stops it."""
        signals = {ZERO_SIGNAL, ONE_SIGNAL}
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, signals)
        try:
            while True:
                info = signal.sigwaitinfo(signals)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: print the pid, then serve until interrupted."""
    server = Server()
    printf("Server PID: %i\n\n", os.getpid())
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())