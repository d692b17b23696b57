"""Bit-level wire format for sending text one signal per bit.

Each byte of the message is sent most significant bit first; the message
ends with a NUL byte (eight zero bits).
"""

from __future__ import annotations

from typing import Iterator, Optional, Union

BITS_PER_BYTE = 8

MessageLike = Union[str, bytes, bytearray]


def _payload(message: MessageLike) -> bytes:
    """Return the bytes of *message* up to, not including, its first NUL."""
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    return data.partition(b"\0")[0]


def encode_bits(message: MessageLike) -> Iterator[int]:
    """Yield the bits of *message* followed by a terminating NUL byte.

    Text is encoded as UTF-8; anything after an embedded NUL is not sent.
    """
    for byte in _payload(message) + b"\0":
        for shift in range(BITS_PER_BYTE - 1, -1, -1):
            yield (byte >> shift) & 1


class Decoder:
    """Reassemble messages from a stream of bits."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0
        self._buffer = bytearray()

    @property
    def pending(self) -> bytes:
        """Bytes received so far for the message not yet terminated."""
        return bytes(self._buffer)

    def push(self, bit: int) -> Optional[bytes]:
        """Take one bit; return the finished message when a NUL byte completes it."""
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        self._value = (self._value << 1) | int(bit)
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self._value = 0
        self._count = 0
        if byte == 0:
            message = bytes(self._buffer)
            self._buffer.clear()
            return message
        self._buffer.append(byte)
        return None