import pytest

from innoparse.arc4 import Arc4


def test_known_vector():
    assert Arc4(b"Key").crypt(b"Plaintext") == bytes.fromhex("bbf316e8d940af0ad3")


def test_round_trip():
    data = b"some setup chunk data" * 10
    encrypted = Arc4(b"chunk-key").crypt(data)
    assert encrypted != data
    assert Arc4(b"chunk-key").crypt(encrypted) == data


def test_crypt_is_streaming():
    data = bytes(range(200))
    whole = Arc4(b"k").crypt(data)
    cipher = Arc4(b"k")
    assert cipher.crypt(data[:77]) + cipher.crypt(data[77:]) == whole


def test_discard_skips_keystream():
    data = bytes(100)
    full = Arc4(b"key").crypt(data)
    cipher = Arc4(b"key")
    cipher.discard(40)
    assert cipher.crypt(data[40:]) == full[40:]


def test_empty_input():
    assert Arc4(b"key").crypt(b"") == b""


def test_empty_key_rejected():
    with pytest.raises(ValueError):
        Arc4(b"")