"""
DES key schedule: PC1, per-round rotation, PC2.

A schedule is a tuple of 32 words, two per round. The pair for round ``i``
lives at indices ``2*i`` and ``2*i + 1``.
"""

import struct
from typing import List, Sequence, Tuple

from tdes.core.blocks import DES_KEY_SIZE, check_length
from tdes.core.tables import LHS, RHS

Schedule = Tuple[int, ...]

ROUNDS = 16
SCHEDULE_WORDS = 2 * ROUNDS

MASK28 = 0x0FFFFFFF

# Rounds (0-based) that rotate by a single bit; every other round rotates by two.
_SINGLE_SHIFT_ROUNDS = frozenset((0, 1, 8, 15))


def _permuted_choice_1(x: int, y: int) -> Tuple[int, int]:
    """Scatter the 56 key bits of (x, y) into the 28-bit C and D registers."""
    t = ((y >> 4) ^ x) & 0x0F0F0F0F
    x ^= t
    y ^= t << 4
    t = (y ^ x) & 0x10101010
    x ^= t
    y ^= t

    c = ((LHS[x & 0xF] << 3) | (LHS[(x >> 8) & 0xF] << 2)
         | (LHS[(x >> 16) & 0xF] << 1) | (LHS[(x >> 24) & 0xF])
         | (LHS[(x >> 5) & 0xF] << 7) | (LHS[(x >> 13) & 0xF] << 6)
         | (LHS[(x >> 21) & 0xF] << 5) | (LHS[(x >> 29) & 0xF] << 4))

    d = ((RHS[(y >> 1) & 0xF] << 3) | (RHS[(y >> 9) & 0xF] << 2)
         | (RHS[(y >> 17) & 0xF] << 1) | (RHS[(y >> 25) & 0xF])
         | (RHS[(y >> 4) & 0xF] << 7) | (RHS[(y >> 12) & 0xF] << 6)
         | (RHS[(y >> 20) & 0xF] << 5) | (RHS[(y >> 28) & 0xF] << 4))

    return c & MASK28, d & MASK28


def _rotate28(value: int, bits: int) -> int:
    return ((value << bits) | (value >> (28 - bits))) & MASK28


def _permuted_choice_2(c: int, d: int) -> Tuple[int, int]:
    """Pack the 48 selected bits of C and D into the two words of one round."""
    k0 = (((c << 4) & 0x24000000) | ((c << 28) & 0x10000000)
          | ((c << 14) & 0x08000000) | ((c << 18) & 0x02080000)
          | ((c << 6) & 0x01000000) | ((c << 9) & 0x00200000)
          | ((c >> 1) & 0x00100000) | ((c << 10) & 0x00040000)
          | ((c << 2) & 0x00020000) | ((c >> 10) & 0x00010000)
          | ((d >> 13) & 0x00002000) | ((d >> 4) & 0x00001000)
          | ((d << 6) & 0x00000800) | ((d >> 1) & 0x00000400)
          | ((d >> 14) & 0x00000200) | ((d) & 0x00000100)
          | ((d >> 5) & 0x00000020) | ((d >> 10) & 0x00000010)
          | ((d >> 3) & 0x00000008) | ((d >> 18) & 0x00000004)
          | ((d >> 26) & 0x00000002) | ((d >> 24) & 0x00000001))

    k1 = (((c << 15) & 0x20000000) | ((c << 17) & 0x10000000)
          | ((c << 10) & 0x08000000) | ((c << 22) & 0x04000000)
          | ((c >> 2) & 0x02000000) | ((c << 1) & 0x01000000)
          | ((c << 16) & 0x00200000) | ((c << 11) & 0x00100000)
          | ((c << 3) & 0x00080000) | ((c >> 6) & 0x00040000)
          | ((c << 15) & 0x00020000) | ((c >> 4) & 0x00010000)
          | ((d >> 2) & 0x00002000) | ((d << 8) & 0x00001000)
          | ((d >> 14) & 0x00000808) | ((d >> 9) & 0x00000400)
          | ((d) & 0x00000200) | ((d << 7) & 0x00000100)
          | ((d >> 7) & 0x00000020) | ((d >> 3) & 0x00000011)
          | ((d << 2) & 0x00000004) | ((d >> 21) & 0x00000002))

    return k0, k1


def expand_key(key) -> List[int]:
    """
    Build the 32-word encryption schedule for an 8-byte key as a mutable list.

    Callers that only need the words transiently (the triple-DES composer)
    hold on to the list so they can wipe it afterwards.
    """
    check_length(key, DES_KEY_SIZE, "DES key")
    x, y = struct.unpack(">II", bytes(key))
    c, d = _permuted_choice_1(x, y)

    words: List[int] = []
    for i in range(ROUNDS):
        shift = 1 if i in _SINGLE_SHIFT_ROUNDS else 2
        c = _rotate28(c, shift)
        d = _rotate28(d, shift)
        words.extend(_permuted_choice_2(c, d))
    return words


def generate_schedule(key) -> Schedule:
    """
    Generate the single-DES encryption schedule for ``key``.

    Any 8-byte value is accepted, weak and bad-parity keys included.

    Raises:
        InvalidLength: If ``key`` is not 8 bytes long.
    """
    return tuple(expand_key(key))


def reverse_rounds(schedule: Sequence[int]) -> List[int]:
    """Swap round pair ``i`` with pair ``15 - i``, keeping order inside each pair."""
    check_length(schedule, SCHEDULE_WORDS, "DES schedule", unit="words")
    reversed_words: List[int] = []
    for i in range(SCHEDULE_WORDS - 2, -1, -2):
        reversed_words.append(schedule[i])
        reversed_words.append(schedule[i + 1])
    return reversed_words


def reverse_schedule(schedule: Sequence[int]) -> Schedule:
    """Turn an encryption schedule into its decryption schedule, and back."""
    return tuple(reverse_rounds(schedule))


def generate_decrypt_schedule(key) -> Schedule:
    return reverse_schedule(expand_key(key))
