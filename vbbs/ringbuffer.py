"""A fixed-size byte FIFO that overwrites the oldest byte when full."""

from __future__ import annotations

from collections import deque


class RingBuffer:
    """Byte queue of limited size; pushing into a full buffer drops the oldest byte."""

    def __init__(self, max_size: int) -> None:
        if max_size <= 0:
            raise ValueError("ring buffer size must be positive")
        self.max_size = max_size
        self._bytes: deque[int] = deque(maxlen=max_size)

    def push(self, byte: int) -> None:
        """Append one byte, overwriting the oldest when full."""
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"byte out of range: {byte}")
        self._bytes.append(byte)

    def pop(self) -> int:
        """Remove and return the oldest byte, or 0 when empty."""
        return self._bytes.popleft() if self._bytes else 0

    def peek(self) -> int:
        """Return the oldest byte without removing it, or 0 when empty."""
        return self._bytes[0] if self._bytes else 0

    def write(self, data: bytes) -> None:
        """Push every byte of data in order."""
        for byte in bytes(data):
            self.push(byte)

    def read(self, size: int) -> bytes:
        """Pop size bytes; positions past the stored data read as 0."""
        return bytes(self.pop() for _ in range(size))

    def write_string(self, text: str) -> None:
        """Write text as UTF-8, stopping at the first NUL character."""
        self.write(text.split("\0", 1)[0].encode("utf-8"))

    def clear(self) -> None:
        """Discard all stored bytes."""
        self._bytes.clear()

    def is_empty(self) -> bool:
        """True when no bytes are stored."""
        return not self._bytes

    def is_full(self) -> bool:
        """True when the buffer holds max_size bytes."""
        return len(self._bytes) == self.max_size

    def __len__(self) -> int:
        return len(self._bytes)