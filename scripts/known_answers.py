# -*- coding: utf-8 -*-
"""
Known-answer check for the DES / Triple-DES core.
Runs the published vectors through the library and prints one line per case.
"""
import logging
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from tdes.core.ecb import DESContext, TripleDESContext
from tdes.core.hygiene import check_weak, set_odd_parity

logging.basicConfig(level=logging.INFO)

TEST_CASES = [
    {"name": "DES zero key", "key": "0101010101010101", "plain": "0000000000000000", "cipher": "8CA64DE9C1B123A7"},
    {"name": "DES classic", "key": "133457799BBCDFF1", "plain": "0123456789ABCDEF", "cipher": "85E813540F0AB405"},
    {"name": "DES 'Now is t'", "key": "0123456789ABCDEF", "plain": "4E6F772069732074", "cipher": "3FA40E8A984D4815"},
    {"name": "3DES three-key", "key": "0123456789ABCDEF23456789ABCDEF01456789ABCDEF0123",
     "plain": "5468652071756663", "cipher": "A826FD8CE53B855F"},
]


def run_case(case) -> bool:
    key = bytes.fromhex(case["key"])
    plain = bytes.fromhex(case["plain"])
    cls = DESContext if len(key) == 8 else TripleDESContext

    encrypted = cls.for_encryption(key).crypt_ecb(plain)
    decrypted = cls.for_decryption(key).crypt_ecb(encrypted)

    ok = encrypted.hex().upper() == case["cipher"] and decrypted == plain
    status = "✅" if ok else "❌"
    print(f"   {status} {case['name']:<16} {encrypted.hex().upper()} (expected {case['cipher']})")
    return ok


def main():
    print("\n--- DES / 3DES known answers ---")
    results = [run_case(case) for case in TEST_CASES]

    zero_key = set_odd_parity(bytes(8))
    weak_ok = check_weak(zero_key)
    print(f"   {'✅' if weak_ok else '❌'} zero key {zero_key.hex().upper()} flagged weak: {weak_ok}")
    results.append(weak_ok)

    passed = sum(results)
    print(f"\n{passed}/{len(results)} checks passed")
    return 0 if passed == len(results) else 1


if __name__ == "__main__":
    sys.exit(main())
