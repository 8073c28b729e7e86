import random
import pytest

from tdes.core.blocks import InvalidLength
from tdes.core.hygiene import check_odd_parity, check_weak, set_odd_parity, split_key
from tdes.core.tables import ODD_PARITY_TABLE, WEAK_KEY_TABLE


def test_parity_table_entries_are_odd():
    for i, value in enumerate(ODD_PARITY_TABLE):
        assert bin(value).count("1") % 2 == 1
        assert value >> 1 == i


def test_set_parity_then_check():
    rng = random.Random(1)
    for _ in range(64):
        key = rng.randbytes(8)
        assert check_odd_parity(set_odd_parity(key))


def test_set_parity_keeps_odd_keys():
    key = bytes.fromhex("133457799BBCDFF1")
    assert check_odd_parity(key)
    assert set_odd_parity(key) == key


def test_set_parity_only_touches_low_bit():
    key = bytes(range(0, 256, 32))
    fixed = set_odd_parity(key)
    assert [b >> 1 for b in fixed] == [b >> 1 for b in key]


def test_check_parity_rejects_even_byte():
    assert not check_odd_parity(bytes(8))
    assert not check_odd_parity(bytes.fromhex("0101010101010100"))


def test_set_parity_returns_new_bytes():
    key = bytearray(8)
    fixed = set_odd_parity(key)
    assert isinstance(fixed, bytes)
    assert key == bytearray(8)


def test_all_published_weak_keys_detected():
    assert len(WEAK_KEY_TABLE) == 16
    for key in WEAK_KEY_TABLE:
        assert check_weak(key)
        assert check_weak(bytearray(key))


def test_one_byte_off_is_not_weak():
    for key in WEAK_KEY_TABLE:
        altered = bytearray(key)
        altered[3] ^= 0x10
        assert not check_weak(bytes(altered))


def test_weak_check_is_exact_match():
    # Same key bits, different parity bits: not in the table.
    assert not check_weak(bytes(8))
    assert check_weak(set_odd_parity(bytes(8)))


def test_wrong_length_fails():
    with pytest.raises(InvalidLength):
        set_odd_parity(bytes(16))
    with pytest.raises(InvalidLength):
        check_odd_parity(bytes(7))
    with pytest.raises(InvalidLength):
        check_weak(b"")


def test_split_key():
    material = bytes(range(24))
    assert split_key(material) == [bytes(range(0, 8)), bytes(range(8, 16)), bytes(range(16, 24))]
    assert split_key(material[:16]) == [bytes(range(0, 8)), bytes(range(8, 16))]
    with pytest.raises(InvalidLength):
        split_key(material[:12])
