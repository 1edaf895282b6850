"""SHA-1 message digest."""

from __future__ import annotations

from typing import Sequence

from innoparse.iterated import IteratedHash

_MASK = 0xFFFFFFFF


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & _MASK


def _round(step: int, b: int, c: int, d: int) -> tuple[int, int]:
    """Return the round function value and additive constant for a step."""
    if step < 20:
        return d ^ (b & (c ^ d)), 0x5A827999
    if step < 40:
        return b ^ c ^ d, 0x6ED9EBA1
    if step < 60:
        return (b & c) | (d & (b | c)), 0x8F1BBCDC
    return b ^ c ^ d, 0xCA62C1D6


class Sha1(IteratedHash):
    """Incremental SHA-1 hash; :meth:`finalize` returns the 20-byte digest."""

    digest_size = 20
    byte_order = ">"
    offset = 1
    initial_state = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

    def transform(self, block: Sequence[int]) -> None:
        schedule = list(block)
        for i in range(16, 80):
            schedule.append(
                _rotl(schedule[i - 3] ^ schedule[i - 8] ^ schedule[i - 14] ^ schedule[i - 16], 1)
            )
        a, b, c, d, e = self._state
        for step, word in enumerate(schedule):
            value, constant = _round(step, b, c, d)
            temp = (_rotl(a, 5) + value + e + constant + word) & _MASK
            a, b, c, d, e = temp, a, _rotl(b, 30), c, d
        self._state = [(x + y) & _MASK for x, y in zip(self._state, (a, b, c, d, e))]