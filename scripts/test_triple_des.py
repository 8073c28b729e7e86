import logging
import random
import pytest
from Crypto.Cipher import DES3

from tdes.core.blocks import InvalidLength
from tdes.core.ecb import DESContext, TripleDESContext, des3_decrypt, des3_encrypt
from tdes.core.cascade import compose_2key, compose_3key

K1 = bytes.fromhex("0123456789ABCDEF")
K2 = bytes.fromhex("23456789ABCDEF01")
K3 = bytes.fromhex("456789ABCDEF0123")


def test_three_key_known_answer():
    # NIST SP 800-67 example; "qufck" is the typo carried in the published vector
    plain = b"The qufck brown fox jump"
    expected = "A826FD8CE53B855FCCE21C8112256FE668D5C05DD9B6B900"

    schedules = compose_3key(K1 + K2 + K3)
    out = b"".join(des3_encrypt(schedules.encrypt, plain[i:i + 8]) for i in range(0, len(plain), 8))
    assert out.hex().upper() == expected

    back = b"".join(des3_decrypt(schedules.decrypt, out[i:i + 8]) for i in range(0, len(out), 8))
    assert back == plain


@pytest.mark.parametrize("key_hex,plain_hex,cipher_hex", [
    # Published single-DES answers; two-key EDE with K1 == K2 reduces to E(K1).
    ("0123456789ABCDEF0123456789ABCDEF", "4E6F772069732074", "3FA40E8A984D4815"),
    ("133457799BBCDFF1133457799BBCDFF1", "0123456789ABCDEF", "85E813540F0AB405"),
    ("01010101010101010101010101010101", "0000000000000000", "8CA64DE9C1B123A7"),
])
def test_two_key_known_answers(key_hex, plain_hex, cipher_hex):
    key = bytes.fromhex(key_hex)
    plain = bytes.fromhex(plain_hex)
    schedules = compose_2key(key)

    encrypted = des3_encrypt(schedules.encrypt, plain)
    assert encrypted.hex().upper() == cipher_hex
    assert des3_decrypt(schedules.decrypt, encrypted) == plain


def test_context_logs_only_after_schedule_is_built(caplog):
    with caplog.at_level(logging.DEBUG, logger="tdes.core.ecb"):
        with pytest.raises(InvalidLength):
            TripleDESContext.for_encryption(bytes(20))
        with pytest.raises(InvalidLength):
            TripleDESContext.for_decryption(bytes(8))
        assert "triple-DES" not in caplog.text

        TripleDESContext.for_decryption(K1 + K2 + K3)
    assert "192-bit key material" in caplog.text


def test_three_key_matches_pycryptodome():
    rng = random.Random(3)
    key = K1 + K2 + K3
    reference = DES3.new(key, DES3.MODE_ECB)
    enc = TripleDESContext.for_encryption(key)
    dec = TripleDESContext.for_decryption(key)

    for _ in range(16):
        block = rng.randbytes(8)
        encrypted = enc.crypt_ecb(block)
        assert encrypted == reference.encrypt(block)
        assert dec.crypt_ecb(encrypted) == block


def test_two_key_matches_pycryptodome():
    rng = random.Random(2)
    key = K1 + K2
    reference = DES3.new(key, DES3.MODE_ECB)
    enc = TripleDESContext.for_encryption(key)
    dec = TripleDESContext.for_decryption(key)

    for _ in range(16):
        block = rng.randbytes(8)
        encrypted = enc.crypt_ecb(block)
        assert encrypted == reference.encrypt(block)
        assert dec.crypt_ecb(encrypted) == block


def test_two_key_equals_three_key_with_k3_equal_k1():
    two = compose_2key(K1 + K2)
    three = compose_3key(K1 + K2 + K1)
    assert two.encrypt == three.encrypt
    assert two.decrypt == three.decrypt


def test_round_trip_random_keys():
    rng = random.Random(7)
    for size in (16, 24):
        for _ in range(8):
            key = rng.randbytes(size)
            block = rng.randbytes(8)
            enc = TripleDESContext.for_encryption(key)
            dec = TripleDESContext.for_decryption(key)
            assert dec.crypt_ecb(enc.crypt_ecb(block)) == block


def test_equal_keys_collapse_to_single_des():
    rng = random.Random(11)
    for _ in range(8):
        key = rng.randbytes(8)
        block = rng.randbytes(8)
        single = DESContext.for_encryption(key).crypt_ecb(block)
        assert TripleDESContext.for_encryption(key * 3).crypt_ecb(block) == single
        assert TripleDESContext.for_encryption(key * 2).crypt_ecb(block) == single
        assert TripleDESContext.for_decryption(key * 3).crypt_ecb(single) == block


def test_wrong_lengths_fail():
    with pytest.raises(InvalidLength):
        TripleDESContext.for_encryption(bytes(8))
    with pytest.raises(InvalidLength):
        TripleDESContext.for_encryption(bytes(20))
    with pytest.raises(InvalidLength):
        des3_encrypt(tuple(range(64)), bytes(8))

    context = TripleDESContext.for_encryption(K1 + K2)
    with pytest.raises(InvalidLength):
        context.crypt_ecb(b"short")
