"""CRC32 checksum calculation."""

from __future__ import annotations

import zlib

from innoparse.checksum import ChecksumBase


class Crc32(ChecksumBase):
    """Incremental CRC32 checksum (the reflected 0xEDB88320 polynomial)."""

    def __init__(self) -> None:
        self._crc = 0

    def update(self, data: bytes) -> None:
        self._crc = zlib.crc32(data, self._crc)

    def finalize(self) -> int:
        return self._crc