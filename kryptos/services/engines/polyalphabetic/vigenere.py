from dataclasses import dataclass, field
from typing import ClassVar

from kryptos.core.exceptions import InvalidKeyError
from kryptos.models.schemas import CipherFamily, CipherType
from kryptos.services.engines.base import Cipher
from kryptos.services.engines.registry import CipherRegistry
from kryptos.services.preprocessing.alphabet import (
    ALPHABET_SIZE,
    is_ascii_letter,
    letter_index,
    shift_letter,
)


@CipherRegistry.register
@dataclass(frozen=True)
class Vigenere(Cipher):
    """
    Vigenère cipher.

    A polyalphabetic substitution using a keyword. Each letter of the
    keyword gives the shift (A=0, B=1, ...) for the next letter of the
    text. Characters that are not letters are copied over and do not use
    up a key letter.

    Example with keyword "LEMON":
    Plaintext:  ATTACKATDAWN
    Key:        LEMONLEMONLE
    Ciphertext: LXFOPVEFRNHR
    """

    keyword: str
    _shifts: tuple[int, ...] = field(init=False, repr=False, compare=False)

    name: ClassVar[str] = "Vigenère Cipher"
    cipher_type: ClassVar[CipherType] = CipherType.VIGENERE
    cipher_family: ClassVar[CipherFamily] = CipherFamily.POLYALPHABETIC
    description: ClassVar[str] = (
        "A polyalphabetic substitution cipher using a keyword. Each letter "
        "of the keyword determines a different Caesar shift."
    )
    key_name: ClassVar[str] = "keyword"

    def __post_init__(self) -> None:
        if not isinstance(self.keyword, str) or not self.keyword:
            raise InvalidKeyError("Key must be a non-empty string", self.keyword)
        if not all(is_ascii_letter(c) for c in self.keyword):
            raise InvalidKeyError("Key must be alphabetic", self.keyword)

        object.__setattr__(self, "_shifts", tuple(letter_index(c) for c in self.keyword))

    @property
    def shifts(self) -> tuple[int, ...]:
        """Shift amount of each keyword letter."""
        return self._shifts

    def encipher(self, plaintext: str) -> str:
        return self._apply(plaintext, self._shifts)

    def decipher(self, ciphertext: str) -> str:
        inverse = tuple((ALPHABET_SIZE - s) % ALPHABET_SIZE for s in self._shifts)
        return self._apply(ciphertext, inverse)

    @staticmethod
    def _apply(text: str, shifts: tuple[int, ...]) -> str:
        result = []
        key_index = 0

        for char in text:
            if is_ascii_letter(char):
                result.append(shift_letter(char, shifts[key_index % len(shifts)]))
                key_index += 1
            else:
                result.append(char)

        return "".join(result)
