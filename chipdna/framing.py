"""Framing of messages exchanged with the payment server.

Every message travels as its XML text wrapped between an STX byte and an ETX byte.
"""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["STX", "ETX", "encode_frame", "FrameDecoder"]

STX = b"\x02"
ETX = b"\x03"

_STX_BYTE = STX[0]
_ETX_BYTE = ETX[0]


def encode_frame(payload: str | bytes) -> bytes:
    """Wrap ``payload`` between STX and ETX; text is encoded as UTF-8."""
    body = payload.encode("utf-8") if isinstance(payload, str) else bytes(payload)
    return STX + body + ETX


def _index_of_any(data: bytes, wanted: Iterable[int], start: int) -> int:
    """Index of the first byte at or after ``start`` that is in ``wanted``, or -1."""
    targets = frozenset(wanted)
    if not data or not targets or start < 0 or start > len(data):
        return -1
    return next(
        (index for index in range(start, len(data)) if data[index] in targets),
        -1,
    )


class FrameDecoder:
    """Collects incoming bytes and yields the messages framed within them.

    A message starts at an STX and ends at the next ETX. An STX met before the
    ETX abandons the partial message started earlier. Bytes that cannot belong
    to any message are dropped.
    """

    def __init__(self) -> None:
        self._buffer = bytearray()

    def feed(self, data: bytes) -> list[str]:
        """Add ``data`` to the buffer and return every message completed by it."""
        if not data:
            return []
        self._buffer.extend(data)
        buffered = bytes(self._buffer)
        messages: list[str] = []

        stx_index = buffered.find(STX)
        etx_index = -1
        while stx_index >= 0:
            etx_index = _index_of_any(buffered, (_STX_BYTE, _ETX_BYTE), stx_index + 1)
            if etx_index == -1:
                break
            if buffered[etx_index] == _ETX_BYTE:
                body = buffered[stx_index + 1 : etx_index]
                messages.append(body.decode("utf-8", errors="replace"))
            stx_index = _index_of_any(buffered, (_STX_BYTE,), etx_index)

        if stx_index == -1 and etx_index == -1:
            self._buffer.clear()
        elif etx_index >= 0:
            del self._buffer[: etx_index + 1]
        elif stx_index > 0:
            del self._buffer[:stx_index]

        return messages

    def pending(self) -> bytes:
        """The bytes held back while waiting for the rest of a message."""
        return bytes(self._buffer)