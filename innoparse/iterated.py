"""Block-based hash framework shared by the MD5 and SHA-1 implementations."""

from __future__ import annotations

import abc
import struct
from typing import ClassVar, Sequence

from innoparse.checksum import ChecksumBase

_MASK64 = 0xFFFFFFFFFFFFFFFF
_MASK32 = 0xFFFFFFFF


class IteratedHash(ChecksumBase):
    """Merkle-Damgard hash over 64-byte blocks of 32-bit words.

    Subclasses set the digest size, word byte order, the position of the low
    length word in the final block and the initial state, and implement
    :meth:`transform`, which mixes one block of words into ``self._state``.
    """

    block_size: ClassVar[int] = 64
    digest_size: ClassVar[int] = 0
    byte_order: ClassVar[str] = "<"
    #: 0 if the low half of the bit count is stored first, 1 if it is stored last.
    offset: ClassVar[int] = 0
    initial_state: ClassVar[Sequence[int]] = ()

    def __init__(self) -> None:
        self._state = list(self.initial_state)
        self._buffer = bytearray()
        self._count = 0
        self._block = struct.Struct(f"{self.byte_order}{self.block_size // 4}I")

    @abc.abstractmethod
    def transform(self, block: Sequence[int]) -> None:
        """Mix one block of 32-bit words into the hash state."""

    def _hash_blocks(self, data: bytes) -> None:
        for words in self._block.iter_unpack(data):
            self.transform(words)

    def update(self, data: bytes) -> None:
        self._count += len(data)
        self._buffer += data
        whole = len(self._buffer) - len(self._buffer) % self.block_size
        if whole:
            self._hash_blocks(bytes(self._buffer[:whole]))
            del self._buffer[:whole]

    def finalize(self) -> bytes:
        """Return the digest of all data so far; the hash can still be updated."""
        saved_state = list(self._state)
        size = self.block_size - 8
        tail = bytearray(self._buffer)
        tail.append(0x80)
        if len(tail) > size:
            tail += bytes(self.block_size - len(tail))
            self._hash_blocks(bytes(tail))
            tail = bytearray()
        tail += bytes(size - len(tail))

        bits = (self._count * 8) & _MASK64
        word = struct.Struct(f"{self.byte_order}I")
        counts = bytearray(8)
        position = self.offset * word.size
        word.pack_into(counts, position, bits & _MASK32)
        word.pack_into(counts, word.size - position, bits >> 32)
        self._hash_blocks(bytes(tail + counts))

        words = self.digest_size // 4
        digest = struct.pack(f"{self.byte_order}{words}I", *self._state[:words])
        self._state = saved_state
        return digest