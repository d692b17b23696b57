"""Send a text message to a process, one signal per bit."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import Optional, Sequence

from pushtalk.libft.output import print_info
from pushtalk.libft.text import atoi
from pushtalk.minitalk.protocol import MessageLike, encode_bits

DEFAULT_DELAY = 50e-6

USAGE_MESSAGE = "E necessario o PID do servico e a Mensagem!"
INVALID_PID_MESSAGE = "Error. Argumento invalido!"
EMPTY_MESSAGE = "Upps!tens que escrever alguma mensagem: ex.:abc"


def send_message(pid: int, message: MessageLike, delay: float = DEFAULT_DELAY) -> int:
    """Signal *message* to *pid*: SIGUSR1 for a 0 bit, SIGUSR2 for a 1 bit.

    Pauses *delay* seconds after each signal and returns how many were sent.
    Errors from the operating system propagate as ``OSError``.
    """
    if pid == 0:
        raise ValueError("pid must not be zero")
    sent = 0
    for bit in encode_bits(message):
        os.kill(pid, signal.SIGUSR2 if bit else signal.SIGUSR1)
        time.sleep(delay)
        sent += 1
    return sent


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``client PID MESSAGE``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print_info(USAGE_MESSAGE)
        return 0
    pid = atoi(args[0])
    if pid == 0:
        print_info(INVALID_PID_MESSAGE)
        return 0
    message = args[1]
    if not message or message[0] == "\0":
        print_info(EMPTY_MESSAGE)
        return 0
    try:
        send_message(pid, message)
    except (OSError, OverflowError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())