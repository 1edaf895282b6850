"""Checksum values and the common base for incremental checksum calculators."""

from __future__ import annotations

import abc
import enum
import struct
from dataclasses import dataclass
from typing import BinaryIO, Union


class ChecksumType(enum.Enum):
    """Kinds of checksums stored in setup files."""

    NONE = "None"
    ADLER32 = "Adler32"
    CRC32 = "CRC32"
    MD5 = "MD5"
    SHA1 = "SHA-1"

    def __str__(self) -> str:
        return self.value


_DIGEST_SIZES = {ChecksumType.MD5: 16, ChecksumType.SHA1: 20}


@dataclass(frozen=True, eq=False)
class Checksum:
    """A checksum value tagged with its type.

    Adler-32 and CRC32 values are integers; MD5 and SHA-1 values are digests.
    """

    type: ChecksumType = ChecksumType.NONE
    value: Union[int, bytes, None] = None

    def __post_init__(self) -> None:
        if self.type in (ChecksumType.ADLER32, ChecksumType.CRC32):
            if not isinstance(self.value, int) or not 0 <= self.value <= 0xFFFFFFFF:
                raise ValueError(f"{self.type} checksum must be a 32-bit unsigned integer")
        elif self.type in _DIGEST_SIZES:
            size = _DIGEST_SIZES[self.type]
            if not isinstance(self.value, (bytes, bytearray)) or len(self.value) != size:
                raise ValueError(f"{self.type} checksum must be {size} bytes long")
            object.__setattr__(self, "value", bytes(self.value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Checksum):
            return NotImplemented
        if other.type is not self.type:
            return False
        if self.type is ChecksumType.NONE:
            return True
        return self.value == other.value

    def __hash__(self) -> int:
        if self.type is ChecksumType.NONE:
            return hash(self.type)
        return hash((self.type, self.value))

    def __str__(self) -> str:
        if self.type is ChecksumType.NONE:
            body = "(no checksum)"
        elif self.type in (ChecksumType.ADLER32, ChecksumType.CRC32):
            body = f"0x{self.value:8x}"
        else:
            body = self.value.hex()
        return f"{self.type} {body}"


class ChecksumBase(abc.ABC):
    """Incremental checksum calculator that can also read values it checksums."""

    @abc.abstractmethod
    def update(self, data: bytes) -> None:
        """Feed more data into the checksum."""

    def load(self, stream: BinaryIO, fmt: str = "<I"):
        """Read one value of the given struct format, checksum its raw bytes and return it.

        Raises EOFError if the stream ends before the value is complete.
        """
        size = struct.calcsize(fmt)
        raw = stream.read(size)
        if len(raw) != size:
            raise EOFError(f"expected {size} bytes, got {len(raw)}")
        self.update(raw)
        (value,) = struct.unpack(fmt, raw)
        return value