"""MD5 message digest."""

from __future__ import annotations

from typing import Sequence

from innoparse.iterated import IteratedHash

_MASK = 0xFFFFFFFF

_CONSTANTS = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE,
    0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
    0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA,
    0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED,
    0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
    0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05,
    0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039,
    0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
    0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

_SHIFTS = (
    (7, 12, 17, 22),
    (5, 9, 14, 20),
    (4, 11, 16, 23),
    (6, 10, 15, 21),
)


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & _MASK


def _mix(step: int, b: int, c: int, d: int) -> tuple[int, int]:
    """Return the round function value and message word index for a step."""
    round_ = step // 16
    if round_ == 0:
        return d ^ (b & (c ^ d)), step
    if round_ == 1:
        return c ^ (d & (b ^ c)), (1 + 5 * step) % 16
    if round_ == 2:
        return b ^ c ^ d, (5 + 3 * step) % 16
    return c ^ (b | (~d & _MASK)), (7 * step) % 16


class Md5(IteratedHash):
    """Incremental MD5 hash; :meth:`finalize` returns the 16-byte digest."""

    digest_size = 16
    byte_order = "<"
    offset = 0
    initial_state = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

    def transform(self, block: Sequence[int]) -> None:
        a, b, c, d = self._state
        for step, constant in enumerate(_CONSTANTS):
            value, index = _mix(step, b, c, d)
            shift = _SHIFTS[step // 16][step % 4]
            rotated = _rotl((a + value + block[index] + constant) & _MASK, shift)
            a, b, c, d = d, (rotated + b) & _MASK, b, c
        self._state = [(x + y) & _MASK for x, y in zip(self._state, (a, b, c, d))]