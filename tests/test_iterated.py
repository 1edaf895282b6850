import hashlib
import io

import pytest

from innoparse.iterated import IteratedHash
from innoparse.md5 import Md5
from innoparse.sha1 import Sha1


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        IteratedHash()


@pytest.mark.parametrize("cls, reference", [(Md5, hashlib.md5), (Sha1, hashlib.sha1)])
def test_partial_block_is_buffered(cls, reference):
    hasher = cls()
    hasher.update(bytes(range(63)))
    hasher.update(b"\xff")
    assert hasher.finalize() == reference(bytes(range(63)) + b"\xff").digest()


@pytest.mark.parametrize(
    "cls, expected",
    [
        (Md5, "d41d8cd98f00b204e9800998ecf8427e"),
        (Sha1, "da39a3ee5e6b4b0d3255bfef95601890afd80709"),
    ],
)
def test_empty_message_padding_block(cls, expected):
    assert cls().finalize().hex() == expected


def test_length_position_little_endian():
    hasher = Md5()
    hasher.update(b"a")
    assert hasher.finalize().hex() == "0cc175b9c0f1b6a831c399e269772661"


@pytest.mark.parametrize("cls, reference", [(Md5, hashlib.md5), (Sha1, hashlib.sha1)])
@pytest.mark.parametrize("size", [55, 56, 63, 64, 120])
def test_padding_spills_into_extra_block(cls, reference, size):
    hasher = cls()
    hasher.update(bytes(size))
    assert hasher.finalize() == reference(bytes(size)).digest()


@pytest.mark.parametrize("cls, reference", [(Md5, hashlib.md5), (Sha1, hashlib.sha1)])
@pytest.mark.parametrize("chunk", [1, 3, 7, 63, 64, 65, 200])
def test_chunked_updates_match_single_update(cls, reference, chunk):
    data = bytes(i * 7 % 256 for i in range(517))
    hasher = cls()
    for start in range(0, len(data), chunk):
        hasher.update(data[start:start + chunk])
    assert hasher.finalize() == reference(data).digest()


@pytest.mark.parametrize("cls", [Md5, Sha1])
def test_finalize_does_not_consume_state(cls):
    hasher = cls()
    hasher.update(b"hello")
    first = hasher.finalize()
    assert hasher.finalize() == first
    hasher.update(b" world")
    fresh = cls()
    fresh.update(b"hello world")
    assert hasher.finalize() == fresh.finalize()


@pytest.mark.parametrize("cls, reference", [(Md5, hashlib.md5), (Sha1, hashlib.sha1)])
def test_load_hashes_raw_bytes(cls, reference):
    hasher = cls()
    value = hasher.load(io.BytesIO(b"\x01\x02\x03\x04"))
    assert value == 0x04030201
    assert hasher.finalize() == reference(b"\x01\x02\x03\x04").digest()


def test_load_short_stream_raises():
    with pytest.raises(EOFError):
        Md5().load(io.BytesIO(b"\x01\x02"))