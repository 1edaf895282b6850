"""Adler-32 checksum calculation."""

from __future__ import annotations

import zlib

from innoparse.checksum import ChecksumBase


class Adler32(ChecksumBase):
    """Incremental Adler-32 checksum."""

    def __init__(self) -> None:
        self._state = 1

    def update(self, data: bytes) -> None:
        self._state = zlib.adler32(data, self._state)

    def finalize(self) -> int:
        return self._state