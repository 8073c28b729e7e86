import logging
from typing import Optional, Union

from tdes.core.blocks import BLOCK_SIZE, DES_KEY_SIZE, DES3_2KEY_SIZE, DES3_3KEY_SIZE, CipherError, InvalidLength
from tdes.core.ecb import DESContext, TripleDESContext
from tdes.core.hygiene import check_odd_parity, check_weak, split_key
from tdes.schemas.models import CipherSettings, KeyComponentReport, KeyReport

logger = logging.getLogger(__name__)

Context = Union[DESContext, TripleDESContext]

_MODES = {
    DES_KEY_SIZE: "des",
    DES3_2KEY_SIZE: "3des-2key",
    DES3_3KEY_SIZE: "3des-3key",
}


class KeyPolicyError(CipherError):
    """Base class for keys refused by the configured policy."""
    pass

class WeakKeyError(KeyPolicyError):
    pass

class ParityError(KeyPolicyError):
    pass


class CipherService:
    """
    Applies the key policy from CipherSettings and drives ECB over
    block-aligned data.
    Coordinators:
    - Key checks -> via tdes.core.hygiene
    - Schedules / block passes -> via tdes.core.ecb
    """

    def __init__(self, settings: Optional[CipherSettings] = None):
        self.settings = settings or CipherSettings.from_env()

    def inspect_key(self, key) -> KeyReport:
        """
        Report parity and weak-key status for each 8-byte component of ``key``.

        Raises:
            InvalidLength: If ``key`` is not 8, 16 or 24 bytes long.
        """
        components = [
            KeyComponentReport(index=i, parity_ok=check_odd_parity(part), weak=check_weak(part))
            for i, part in enumerate(split_key(key))
        ]
        return KeyReport(
            length=len(key),
            mode=_MODES[len(key)],
            components=components,
        )

    def vet_key(self, key) -> KeyReport:
        """Inspect ``key`` and enforce the configured policy on the result."""
        report = self.inspect_key(key)

        weak = [c.index for c in report.components if c.weak]
        if weak:
            if self.settings.reject_weak_keys:
                raise WeakKeyError(f"Weak or semi-weak DES key at component(s) {weak}")
            logger.warning(f"Key material contains weak or semi-weak DES key at component(s) {weak}")

        bad_parity = [c.index for c in report.components if not c.parity_ok]
        if bad_parity:
            if self.settings.enforce_parity:
                raise ParityError(f"Odd parity check failed at component(s) {bad_parity}")
            logger.warning(f"Odd parity check failed at component(s) {bad_parity}")

        return report

    def new_context(self, key, decrypt: bool = False) -> Context:
        """
        Vet ``key`` and build a context for it.

        8-byte keys give a DESContext, 16/24-byte keys a TripleDESContext.
        """
        report = self.vet_key(key)
        logger.info(f"Creating {report.mode} {'decryption' if decrypt else 'encryption'} context")

        cls = DESContext if report.mode == "des" else TripleDESContext
        return cls.for_decryption(key) if decrypt else cls.for_encryption(key)

    def _run_ecb(self, context: Context, data) -> bytes:
        if not data or len(data) % BLOCK_SIZE:
            raise InvalidLength(
                f"data must be a non-empty multiple of {BLOCK_SIZE} bytes, got {len(data)}"
            )
        data = bytes(data)
        out = bytearray()
        for i in range(0, len(data), BLOCK_SIZE):
            out.extend(context.crypt_ecb(data[i:i + BLOCK_SIZE]))
        return bytes(out)

    def encrypt_ecb(self, key, data) -> bytes:
        """Encrypt block-aligned ``data`` in ECB mode. No padding is applied."""
        return self._run_ecb(self.new_context(key), data)

    def decrypt_ecb(self, key, data) -> bytes:
        return self._run_ecb(self.new_context(key, decrypt=True), data)
