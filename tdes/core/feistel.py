"""
One single-DES pass over a 64-bit block: IP, 16 Feistel rounds, FP.
"""

from typing import Sequence

from tdes.core.blocks import check_length, load_block, store_block
from tdes.core.key_schedule import SCHEDULE_WORDS
from tdes.core.permutations import MASK32, HalfPair, final_permutation, initial_permutation
from tdes.core.tables import SB1, SB2, SB3, SB4, SB5, SB6, SB7, SB8


def round_function(half: int, k0: int, k1: int) -> int:
    """
    Return the 32-bit mask that one round XORs into the opposite half.

    ``k0`` keys S-boxes 2/4/6/8 on ``half`` directly; ``k1`` keys S-boxes
    1/3/5/7 on ``half`` rotated right by four bits.
    """
    t = k0 ^ half
    out = (SB8[t & 0x3F] ^ SB6[(t >> 8) & 0x3F]
           ^ SB4[(t >> 16) & 0x3F] ^ SB2[(t >> 24) & 0x3F])

    t = k1 ^ (((half << 28) | (half >> 4)) & MASK32)
    out ^= (SB7[t & 0x3F] ^ SB5[(t >> 8) & 0x3F]
            ^ SB3[(t >> 16) & 0x3F] ^ SB1[(t >> 24) & 0x3F])
    return out


def process_block(segment: Sequence[int], block) -> bytes:
    """
    Run one DES pass over ``block`` using 32 schedule words.

    Encryption or decryption is decided entirely by the schedule's order.

    Raises:
        InvalidLength: If ``segment`` is not 32 words or ``block`` not 8 bytes.
    """
    check_length(segment, SCHEDULE_WORDS, "schedule segment", unit="words")
    high, low = load_block(block)

    pair = initial_permutation(HalfPair(high, low))
    left, right = pair.left, pair.right

    for i in range(0, SCHEDULE_WORDS, 4):
        left ^= round_function(right, segment[i], segment[i + 1])
        right ^= round_function(left, segment[i + 2], segment[i + 3])

    # Halves go back in swapped, undoing the swap after the last round.
    out = final_permutation(HalfPair(right, left))
    return store_block(out.left, out.right)
