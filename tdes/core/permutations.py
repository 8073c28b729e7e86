"""
Initial and final permutations of DES, written as XOR/shift/mask swaps
over the two 32-bit halves of a block instead of a 64-entry bit table.
"""

from dataclasses import dataclass

MASK32 = 0xFFFFFFFF


@dataclass(frozen=True)
class HalfPair:
    left: int
    right: int


def _rol32(value: int, bits: int) -> int:
    return ((value << bits) | (value >> (32 - bits))) & MASK32


def initial_permutation(pair: HalfPair) -> HalfPair:
    """
    Apply IP to a (left, right) pair.

    The result leaves both halves rotated left by one bit, which is the
    layout the expanded S-boxes and the round function expect.
    """
    x, y = pair.left, pair.right

    t = ((x >> 4) ^ y) & 0x0F0F0F0F
    y ^= t
    x ^= t << 4
    t = ((x >> 16) ^ y) & 0x0000FFFF
    y ^= t
    x ^= t << 16
    t = ((y >> 2) ^ x) & 0x33333333
    x ^= t
    y ^= t << 2
    t = ((y >> 8) ^ x) & 0x00FF00FF
    x ^= t
    y ^= t << 8
    y = _rol32(y, 1)
    t = (x ^ y) & 0xAAAAAAAA
    y ^= t
    x ^= t
    x = _rol32(x, 1)

    return HalfPair(x, y)


def final_permutation(pair: HalfPair) -> HalfPair:
    """Apply FP, the exact inverse of :func:`initial_permutation`."""
    x, y = pair.left, pair.right

    x = _rol32(x, 31)
    t = (x ^ y) & 0xAAAAAAAA
    x ^= t
    y ^= t
    y = _rol32(y, 31)
    t = ((y >> 8) ^ x) & 0x00FF00FF
    x ^= t
    y ^= t << 8
    t = ((y >> 2) ^ x) & 0x33333333
    x ^= t
    y ^= t << 2
    t = ((x >> 16) ^ y) & 0x0000FFFF
    y ^= t
    x ^= t << 16
    t = ((x >> 4) ^ y) & 0x0F0F0F0F
    y ^= t
    x ^= t << 4

    return HalfPair(x, y)
