"""Receive messages sent one signal per bit and print them."""

from __future__ import annotations

import os
import signal
import sys
from types import FrameType
from typing import BinaryIO, Optional, Sequence

from pushtalk.libft.output import putchar_fd, putnbr_fd, putstr_fd
from pushtalk.minitalk.protocol import Decoder


class SignalServer:
    """Turn SIGUSR1/SIGUSR2 into bits and write each finished message.

    Messages go to *output*, a binary stream; standard output when None.
    """

    def __init__(self, output: Optional[BinaryIO] = None) -> None:
        self.output = output
        self.decoder = Decoder()

    def _write(self, message: bytes) -> None:
        if self.output is None:
            sys.stdout.flush()
            out = sys.stdout.buffer
        else:
            out = self.output
        out.write(message)
        out.flush()

    def handle(self, signum: int, frame: Optional[FrameType] = None) -> None:
        """Signal handler: SIGUSR2 is a 1 bit, any other signal a 0 bit."""
        message = self.decoder.push(1 if signum == signal.SIGUSR2 else 0)
        if message is not None:
            self._write(message)

    def install(self) -> None:
        """Make this server the handler of SIGUSR1 and SIGUSR2."""
        signal.signal(signal.SIGUSR1, self.handle)
        signal.signal(signal.SIGUSR2, self.handle)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: print the PID, then receive messages until interrupted."""
    putstr_fd("Server's PID: ")
    putnbr_fd(os.getpid())
    putchar_fd("\n")
    sys.stdout.flush()
    server = SignalServer()
    server.install()
    try:
        while True:
            signal.pause()
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())