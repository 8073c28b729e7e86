import struct
from typing import Tuple

BLOCK_SIZE = 8
DES_KEY_SIZE = 8
DES3_2KEY_SIZE = 16
DES3_3KEY_SIZE = 24

_BE_PAIR = struct.Struct(">II")


class CipherError(Exception):
    """Base class for cipher errors."""
    pass


class InvalidLength(CipherError, ValueError):
    """A key, block, schedule or buffer has the wrong size."""
    pass


def check_length(value, expected: int, what: str, unit: str = "bytes") -> None:
    """Raise InvalidLength unless ``len(value) == expected``."""
    if len(value) != expected:
        raise InvalidLength(f"{what} must be {expected} {unit} long, got {len(value)}")


def load_block(block) -> Tuple[int, int]:
    """Split an 8-byte block into its big-endian (high, low) 32-bit words."""
    check_length(block, BLOCK_SIZE, "block")
    return _BE_PAIR.unpack(bytes(block))


def store_block(high: int, low: int) -> bytes:
    return _BE_PAIR.pack(high, low)
