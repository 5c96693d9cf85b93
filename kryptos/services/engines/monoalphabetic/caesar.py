from dataclasses import dataclass
from typing import Any, ClassVar

from kryptos.core.exceptions import InvalidKeyError
from kryptos.models.schemas import CipherFamily, CipherType
from kryptos.services.engines.base import Cipher, parse_int_key
from kryptos.services.engines.registry import CipherRegistry
from kryptos.services.preprocessing.alphabet import ALPHABET_SIZE, shift_text


@CipherRegistry.register
@dataclass(frozen=True)
class Caesar(Cipher):
    """
    Caesar cipher.

    The Caesar cipher is a simple substitution cipher that shifts each letter
    by a fixed amount. Case is kept and anything that is not an ASCII letter
    passes through unchanged.
    """

    rotation: int

    name: ClassVar[str] = "Caesar Cipher"
    cipher_type: ClassVar[CipherType] = CipherType.CAESAR
    cipher_family: ClassVar[CipherFamily] = CipherFamily.MONOALPHABETIC
    description: ClassVar[str] = (
        "A substitution cipher where each letter is shifted by a fixed amount. "
        "Named after Julius Caesar who used it for military communications."
    )
    key_name: ClassVar[str] = "rotation"

    def __post_init__(self) -> None:
        if isinstance(self.rotation, bool) or not isinstance(self.rotation, int):
            raise InvalidKeyError("Rotation must be an integer", self.rotation)
        if not 1 <= self.rotation <= ALPHABET_SIZE:
            raise InvalidKeyError("Rotation must be between 1 through 26", self.rotation)

    @classmethod
    def parse_key(cls, key: Any) -> int:
        return parse_int_key(key, "rotation")

    def encipher(self, plaintext: str) -> str:
        return shift_text(plaintext, self.rotation)

    def decipher(self, ciphertext: str) -> str:
        return shift_text(ciphertext, ALPHABET_SIZE - self.rotation)
