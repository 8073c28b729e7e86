"""
ECB entry points for DES and triple DES, plus the cipher contexts that own
a schedule for one direction.

A context is built once and then only read, so one instance can serve
block operations from any number of threads. To change keys, build a new
context.
"""

import logging
from typing import Sequence

from tdes.core.blocks import check_length
from tdes.core.cascade import CASCADE_WORDS, compose_cascade
from tdes.core.feistel import process_block
from tdes.core.key_schedule import SCHEDULE_WORDS, Schedule, generate_decrypt_schedule, generate_schedule

logger = logging.getLogger(__name__)


def des_encrypt(schedule: Sequence[int], block) -> bytes:
    """Encrypt one 8-byte block under a 32-word encryption schedule."""
    return process_block(schedule, block)


def des_decrypt(schedule: Sequence[int], block) -> bytes:
    """Decrypt one 8-byte block; ``schedule`` must be the decryption schedule."""
    return process_block(schedule, block)


def des3_encrypt(schedule: Sequence[int], block) -> bytes:
    """
    Run three chained DES passes over ``block``, one per 32-word segment
    of the 96-word cascade schedule.
    """
    check_length(schedule, CASCADE_WORDS, "triple-DES schedule", unit="words")
    out = process_block(schedule[0:32], block)
    out = process_block(schedule[32:64], out)
    return process_block(schedule[64:96], out)


def des3_decrypt(schedule: Sequence[int], block) -> bytes:
    """Same pass structure as :func:`des3_encrypt`, fed the decryption schedule."""
    return des3_encrypt(schedule, block)


class DESContext:
    """Single-DES context holding one 32-word schedule."""

    __slots__ = ("schedule",)

    def __init__(self, schedule: Sequence[int]):
        check_length(schedule, SCHEDULE_WORDS, "DES schedule", unit="words")
        self.schedule: Schedule = tuple(schedule)

    @classmethod
    def for_encryption(cls, key) -> "DESContext":
        logger.debug("Building DES encryption context")
        return cls(generate_schedule(key))

    @classmethod
    def for_decryption(cls, key) -> "DESContext":
        logger.debug("Building DES decryption context")
        return cls(generate_decrypt_schedule(key))

    def crypt_ecb(self, block) -> bytes:
        return process_block(self.schedule, block)


class TripleDESContext:
    """Triple-DES (EDE) context holding one 96-word schedule."""

    __slots__ = ("schedule",)

    def __init__(self, schedule: Sequence[int]):
        check_length(schedule, CASCADE_WORDS, "triple-DES schedule", unit="words")
        self.schedule: Schedule = tuple(schedule)

    @classmethod
    def for_encryption(cls, key) -> "TripleDESContext":
        """Build from 16 bytes (two-key) or 24 bytes (three-key) of key material."""
        schedules = compose_cascade(key)
        logger.debug(f"Built triple-DES encryption context ({len(key) * 8}-bit key material)")
        return cls(schedules.encrypt)

    @classmethod
    def for_decryption(cls, key) -> "TripleDESContext":
        schedules = compose_cascade(key)
        logger.debug(f"Built triple-DES decryption context ({len(key) * 8}-bit key material)")
        return cls(schedules.decrypt)

    def crypt_ecb(self, block) -> bytes:
        return des3_encrypt(self.schedule, block)
