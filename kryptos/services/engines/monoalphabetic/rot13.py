from dataclasses import dataclass
from typing import ClassVar

from kryptos.models.schemas import CipherFamily, CipherType
from kryptos.services.engines.base import Cipher
from kryptos.services.engines.registry import CipherRegistry
from kryptos.services.preprocessing.alphabet import shift_text


@CipherRegistry.register
@dataclass(frozen=True)
class Rot13(Cipher):
    """
    ROT13 cipher.

    A Caesar shift fixed at 13. Half of the alphabet, so the same shift
    both enciphers and deciphers.
    """

    name: ClassVar[str] = "ROT13 Cipher"
    cipher_type: ClassVar[CipherType] = CipherType.ROT13
    cipher_family: ClassVar[CipherFamily] = CipherFamily.MONOALPHABETIC
    description: ClassVar[str] = (
        "Caesar cipher with its shift fixed at 13, so enciphering twice "
        "gives back the original text. Long used to hide spoilers."
    )

    SHIFT: ClassVar[int] = 13

    def encipher(self, plaintext: str) -> str:
        return shift_text(plaintext, self.SHIFT)

    def decipher(self, ciphertext: str) -> str:
        return shift_text(ciphertext, self.SHIFT)
