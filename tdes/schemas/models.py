import os
from typing import List
from pydantic import BaseModel, ConfigDict, Field


def _is_enabled(env_var: str, default: bool = False) -> bool:
    """Check if a flag is enabled via environment variable."""
    value = os.getenv(env_var, str(default)).lower()
    return value in ("true", "1", "yes", "on")


class CipherSettings(BaseModel):
    reject_weak_keys: bool = False # Raise WeakKeyError instead of logging a warning
    enforce_parity: bool = False # Raise ParityError instead of logging a warning

    model_config = ConfigDict(extra='forbid')

    @classmethod
    def from_env(cls) -> "CipherSettings":
        """Read settings from TDES_REJECT_WEAK_KEYS / TDES_ENFORCE_PARITY."""
        return cls(
            reject_weak_keys=_is_enabled("TDES_REJECT_WEAK_KEYS"),
            enforce_parity=_is_enabled("TDES_ENFORCE_PARITY"),
        )

class KeyComponentReport(BaseModel):
    index: int = Field(..., description="Position of the 8-byte DES key within the key material")
    parity_ok: bool
    weak: bool

class KeyReport(BaseModel):
    length: int
    mode: str # des, 3des-2key, 3des-3key
    components: List[KeyComponentReport]

    @property
    def has_weak_component(self) -> bool:
        return any(c.weak for c in self.components)

    @property
    def parity_ok(self) -> bool:
        return all(c.parity_ok for c in self.components)
