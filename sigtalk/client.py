"""Send a text message to a server process one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
from typing import Optional, Sequence, Tuple, Union

from .chars import atoi, isdigit
from .printf import printf
from .protocol import ACK_SIGNAL, message_to_bits, signal_for_bit

WRONG_COUNT = "Wrong number of arguments."
WRONG_PID = "Wrong PID."


class ArgumentError(ValueError):
    """The command line does not name a server and a message."""


def validate_arguments(argv: Sequence[str]) -> Tuple[int, str]:
    """Check ``[pid, message]`` and return the server pid and the message."""
    argv = list(argv)
    if len(argv) != 2:
        raise ArgumentError(WRONG_COUNT)
    pid_text, message = argv
    if not all(isdigit(ch) for ch in pid_text):
        raise ArgumentError(WRONG_PID)
    return atoi(pid_text), message


def send_message(server_pid: int, message: Union[str, bytes]) -> int:
    """Send ``message`` to ``server_pid``, waiting for an answer after each bit.

    Returns the number of bytes sent.
    """
    data = os.fsencode(message) if isinstance(message, str) else bytes(message)
    ack = {ACK_SIGNAL}
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, ack)
    try:
        for bit in message_to_bits(data):
            os.kill(server_pid, signal_for_bit(bit))
            signal.sigwait(ack)
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)
    return len(data)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``client <server pid> <message>``."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        server_pid, message = validate_arguments(argv)
    except ArgumentError as error:
        printf("%s\n", str(error))
        return 1
    send_message(server_pid, message)
    return 0


if __name__ == "__main__":
    sys.exit(main())