from dataclasses import dataclass, field
from typing import ClassVar

from kryptos.core.exceptions import InvalidKeyError
from kryptos.models.schemas import CipherFamily, CipherType
from kryptos.services.engines.base import Cipher
from kryptos.services.engines.registry import CipherRegistry
from kryptos.services.preprocessing.alphabet import ALPHABET, ALPHABET_SIZE, is_ascii_letter


@CipherRegistry.register
@dataclass(frozen=True)
class Substitution(Cipher):
    """
    Monoalphabetic substitution cipher.

    Each letter is replaced with another letter according to a fixed permutation
    of the alphabet: the n-th letter of A-Z becomes the n-th letter of the key.
    Lowercase letters map through the same key and stay lowercase.
    """

    alphabet: str
    _encipher_table: dict[int, str] = field(init=False, repr=False, compare=False)
    _decipher_table: dict[int, str] = field(init=False, repr=False, compare=False)

    name: ClassVar[str] = "Substitution Cipher"
    cipher_type: ClassVar[CipherType] = CipherType.SUBSTITUTION
    cipher_family: ClassVar[CipherFamily] = CipherFamily.MONOALPHABETIC
    description: ClassVar[str] = (
        "Each letter is mapped to a different letter using a permutation of "
        "the alphabet. With 26! (about 4 x 10^26) possible keys, brute force "
        "is impossible."
    )
    key_name: ClassVar[str] = "alphabet"

    def __post_init__(self) -> None:
        key = self._validate(self.alphabet)

        forward = str.maketrans(ALPHABET + ALPHABET.lower(), key + key.lower())
        backward = str.maketrans(key + key.lower(), ALPHABET + ALPHABET.lower())

        # Frozen dataclass: derived tables are set once here
        object.__setattr__(self, "_encipher_table", forward)
        object.__setattr__(self, "_decipher_table", backward)

    @staticmethod
    def _validate(alphabet: str) -> str:
        """Check the key alphabet and return it uppercased."""
        if not isinstance(alphabet, str):
            raise InvalidKeyError("Key must be a string", alphabet)
        if len(alphabet) != ALPHABET_SIZE:
            raise InvalidKeyError("Key is not the correct length", alphabet)
        if not all(is_ascii_letter(c) for c in alphabet):
            raise InvalidKeyError("Key must be alphabetic", alphabet)

        key = alphabet.upper()
        if len(set(key)) != ALPHABET_SIZE:
            raise InvalidKeyError("Key alphabet must be unique", alphabet)

        return key

    def encipher(self, plaintext: str) -> str:
        return plaintext.translate(self._encipher_table)

    def decipher(self, ciphertext: str) -> str:
        return ciphertext.translate(self._decipher_table)
