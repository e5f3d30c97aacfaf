"""SHA-1 message digest, incremental and one-shot."""

from __future__ import annotations

import struct

_MASK = 0xFFFFFFFF
_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)
_BLOCK_SIZE = 64


def _rol(value: int, bits: int) -> int:
    return ((value << bits) | (value >> (32 - bits))) & _MASK


def _compress(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    """Hash a single 512-bit block into the running state."""
    w = list(struct.unpack(">16I", block))
    for i in range(16, 80):
        w.append(_rol(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1))

    a, b, c, d, e = state
    for i, word in enumerate(w):
        if i < 20:
            f = (b & (c ^ d)) ^ d
            k = 0x5A827999
        elif i < 40:
            f = b ^ c ^ d
            k = 0x6ED9EBA1
        elif i < 60:
            f = ((b | c) & d) | (b & c)
            k = 0x8F1BBCDC
        else:
            f = b ^ c ^ d
            k = 0xCA62C1D6
        temp = (_rol(a, 5) + f + e + k + word) & _MASK
        a, b, c, d, e = temp, a, _rol(b, 30), c, d

    return tuple((s + v) & _MASK for s, v in zip(state, (a, b, c, d, e)))


class Sha1:
    """Incremental SHA-1 hasher with a hashlib-like interface."""

    name = "sha1"
    digest_size = 20
    block_size = _BLOCK_SIZE

    def __init__(self, data: bytes = b"") -> None:
        self._state: tuple[int, ...] = _INITIAL_STATE
        self._pending = b""
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        if isinstance(data, str):
            raise TypeError("strings must be encoded before hashing")
        chunk = bytes(data)
        self._length += len(chunk)
        pending = self._pending + chunk
        full = len(pending) - len(pending) % _BLOCK_SIZE
        state = self._state
        for start in range(0, full, _BLOCK_SIZE):
            state = _compress(state, pending[start:start + _BLOCK_SIZE])
        self._state = state
        self._pending = pending[full:]

    def digest(self) -> bytes:
        """Return the 20-byte digest of everything fed so far."""
        bit_length = (self._length * 8) & 0xFFFFFFFFFFFFFFFF
        padding = b"\x80" + b"\x00" * ((55 - self._length) % _BLOCK_SIZE)
        tail = self._pending + padding + struct.pack(">Q", bit_length)
        state = self._state
        for start in range(0, len(tail), _BLOCK_SIZE):
            state = _compress(state, tail[start:start + _BLOCK_SIZE])
        return struct.pack(">5I", *state)

    def hexdigest(self) -> str:
        """Return the digest as lower-case hexadecimal text."""
        return self.digest().hex()

    def copy(self) -> "Sha1":
        """Return an independent hasher with the same state."""
        clone = Sha1()
        clone._state = self._state
        clone._pending = self._pending
        clone._length = self._length
        return clone


def sha1(data: bytes) -> bytes:
    """Return the SHA-1 digest of data."""
    return Sha1(data).digest()