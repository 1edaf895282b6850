"""Alleged RC4 stream cipher."""

from __future__ import annotations


class Arc4:
    """RC4 keystream generator; encryption and decryption are the same operation."""

    def __init__(self, key: bytes) -> None:
        if not key:
            raise ValueError("ARC4 key must not be empty")
        self._a = 0
        self._b = 0
        state = list(range(256))
        j = 0
        for i in range(256):
            j = (j + state[i] + key[i % len(key)]) % 256
            state[i], state[j] = state[j], state[i]
        self._state = state

    def _step(self) -> int:
        state = self._state
        self._a = (self._a + 1) % 256
        self._b = (self._b + state[self._a]) % 256
        state[self._a], state[self._b] = state[self._b], state[self._a]
        return state[(state[self._a] + state[self._b]) % 256]

    def discard(self, length: int) -> None:
        """Skip the given number of keystream bytes."""
        for _ in range(length):
            self._step()

    def crypt(self, data: bytes) -> bytes:
        """XOR data with the next keystream bytes."""
        return bytes(byte ^ self._step() for byte in data)