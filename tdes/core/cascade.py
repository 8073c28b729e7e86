"""
Triple-DES (EDE) schedule composition.

Encryption runs E(K1) -> D(K2) -> E(K3); decryption runs the exact inverse.
Both directions are laid out up front as 96-word schedules so the block
path never branches on direction.
"""

import logging
from dataclasses import dataclass
from itertools import chain
from typing import List

from tdes.core.blocks import DES3_2KEY_SIZE, DES3_3KEY_SIZE, InvalidLength, check_length
from tdes.core.key_schedule import Schedule, expand_key, reverse_rounds

logger = logging.getLogger(__name__)

CASCADE_WORDS = 96


@dataclass(frozen=True)
class CascadeSchedules:
    encrypt: Schedule
    decrypt: Schedule


class ScratchSchedule:
    """
    Holds transient subkey words and zeroes them when the ``with`` block exits.

    Usage:
        with ScratchSchedule(expand_key(key)) as words:
            ...
    """

    def __init__(self, words: List[int]):
        self.words = words

    def __enter__(self) -> List[int]:
        return self.words

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.wipe()
        return False

    def wipe(self) -> None:
        for i in range(len(self.words)):
            self.words[i] = 0


def compose_2key(key) -> CascadeSchedules:
    """
    Compose 112-bit triple-DES schedules (K3 = K1) from 16 bytes of key material.

    encrypt = [S1 | rev(S2) | S1], decrypt = [rev(S1) | S2 | rev(S1)]
    """
    check_length(key, DES3_2KEY_SIZE, "two-key triple-DES key")
    key = bytes(key)

    with ScratchSchedule(expand_key(key[:8])) as s1, \
            ScratchSchedule(expand_key(key[8:16])) as s2, \
            ScratchSchedule(reverse_rounds(s1)) as s1_rev, \
            ScratchSchedule(reverse_rounds(s2)) as s2_rev:
        encrypt = tuple(chain(s1, s2_rev, s1))
        decrypt = tuple(chain(s1_rev, s2, s1_rev))

    logger.debug("Composed two-key triple-DES schedules")
    return CascadeSchedules(encrypt, decrypt)


def compose_3key(key) -> CascadeSchedules:
    """
    Compose 168-bit triple-DES schedules from 24 bytes of key material.

    encrypt = [S1 | rev(S2) | S3], decrypt = [rev(S3) | S2 | rev(S1)]
    """
    check_length(key, DES3_3KEY_SIZE, "three-key triple-DES key")
    key = bytes(key)

    with ScratchSchedule(expand_key(key[:8])) as s1, \
            ScratchSchedule(expand_key(key[8:16])) as s2, \
            ScratchSchedule(expand_key(key[16:24])) as s3, \
            ScratchSchedule(reverse_rounds(s1)) as s1_rev, \
            ScratchSchedule(reverse_rounds(s2)) as s2_rev, \
            ScratchSchedule(reverse_rounds(s3)) as s3_rev:
        encrypt = tuple(chain(s1, s2_rev, s3))
        decrypt = tuple(chain(s3_rev, s2, s1_rev))

    logger.debug("Composed three-key triple-DES schedules")
    return CascadeSchedules(encrypt, decrypt)


def compose_cascade(key) -> CascadeSchedules:
    """Dispatch on key length: 16 bytes -> two-key, 24 bytes -> three-key."""
    if len(key) == DES3_2KEY_SIZE:
        return compose_2key(key)
    if len(key) == DES3_3KEY_SIZE:
        return compose_3key(key)
    raise InvalidLength(
        f"triple-DES key must be {DES3_2KEY_SIZE} or {DES3_3KEY_SIZE} bytes long, got {len(key)}"
    )
