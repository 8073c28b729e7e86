"""
tdes - FIPS-46-3 DES and Triple-DES (EDE) block cipher core.
"""

from tdes.core.blocks import BLOCK_SIZE, CipherError, InvalidLength
from tdes.core.cascade import CascadeSchedules, compose_2key, compose_3key, compose_cascade
from tdes.core.ecb import DESContext, TripleDESContext, des3_decrypt, des3_encrypt, des_decrypt, des_encrypt
from tdes.core.hygiene import check_odd_parity, check_weak, set_odd_parity, split_key
from tdes.core.key_schedule import generate_decrypt_schedule, generate_schedule, reverse_schedule

__version__ = "1.0.0"

__all__ = [
    "BLOCK_SIZE",
    "CipherError",
    "InvalidLength",
    "CascadeSchedules",
    "compose_2key",
    "compose_3key",
    "compose_cascade",
    "DESContext",
    "TripleDESContext",
    "des_encrypt",
    "des_decrypt",
    "des3_encrypt",
    "des3_decrypt",
    "set_odd_parity",
    "check_odd_parity",
    "check_weak",
    "split_key",
    "generate_schedule",
    "generate_decrypt_schedule",
    "reverse_schedule",
]
