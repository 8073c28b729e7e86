"""
Key hygiene checks: odd parity and weak / semi-weak key detection.

These are advisory. The cipher itself runs on any key; it is up to the
caller to reject keys these helpers flag.
"""

from typing import List

from tdes.core.blocks import DES3_2KEY_SIZE, DES3_3KEY_SIZE, DES_KEY_SIZE, InvalidLength, check_length
from tdes.core.tables import ODD_PARITY_TABLE, WEAK_KEY_TABLE


def set_odd_parity(key) -> bytes:
    """Return a copy of ``key`` with every byte's low bit set for odd parity."""
    check_length(key, DES_KEY_SIZE, "DES key")
    return bytes(ODD_PARITY_TABLE[b >> 1] for b in bytes(key))


def check_odd_parity(key) -> bool:
    check_length(key, DES_KEY_SIZE, "DES key")
    return all(b == ODD_PARITY_TABLE[b >> 1] for b in bytes(key))


def check_weak(key) -> bool:
    """True if ``key`` is byte-for-byte one of the 16 weak or semi-weak keys."""
    check_length(key, DES_KEY_SIZE, "DES key")
    return bytes(key) in WEAK_KEY_TABLE


def split_key(key) -> List[bytes]:
    """Split 8, 16 or 24 bytes of key material into its 8-byte DES keys."""
    if len(key) not in (DES_KEY_SIZE, DES3_2KEY_SIZE, DES3_3KEY_SIZE):
        raise InvalidLength(
            f"key must be {DES_KEY_SIZE}, {DES3_2KEY_SIZE} or {DES3_3KEY_SIZE} bytes long, got {len(key)}"
        )
    key = bytes(key)
    return [key[i:i + DES_KEY_SIZE] for i in range(0, len(key), DES_KEY_SIZE)]
