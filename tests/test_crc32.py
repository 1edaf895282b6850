import io

from innoparse.crc32 import Crc32


def test_empty_is_zero():
    assert Crc32().finalize() == 0


def test_check_value():
    h = Crc32()
    h.update(b"123456789")
    assert h.finalize() == 0xCBF43926


def test_incremental_matches_one_shot():
    data = bytes(range(256)) * 50
    whole = Crc32()
    whole.update(data)
    parts = Crc32()
    for start in range(0, len(data), 13):
        parts.update(data[start:start + 13])
    assert parts.finalize() == whole.finalize()


def test_finalize_does_not_reset():
    h = Crc32()
    h.update(b"1234")
    h.finalize()
    h.update(b"56789")
    assert h.finalize() == 0xCBF43926


def test_load_returns_value_and_updates():
    h = Crc32()
    stream = io.BytesIO(b"\x78\x56\x34\x12")
    assert h.load(stream) == 0x12345678
    direct = Crc32()
    direct.update(b"\x78\x56\x34\x12")
    assert h.finalize() == direct.finalize()