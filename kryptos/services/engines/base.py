from abc import ABC, abstractmethod
from typing import Any, ClassVar

from kryptos.core.exceptions import InvalidKeyError
from kryptos.models.schemas import CipherFamily, CipherInfo, CipherKey, CipherType


def validate_positive_key(value: Any, key_name: str) -> int:
    """
    Check that a key is a positive integer.

    Args:
        value: The key value
        key_name: Name of the key, used in the error message

    Returns:
        The key unchanged

    Raises:
        InvalidKeyError: If the key is not an integer or is less than 1
    """
    # bool is an int subclass but never a meaningful key
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidKeyError(f"The {key_name} must be an integer", value)
    if value < 1:
        raise InvalidKeyError(f"The {key_name} must be 1 or greater", value)
    return value


def parse_int_key(value: Any, key_name: str) -> int:
    """Accept an int or a numeric string as an integer key."""
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise InvalidKeyError(f"The {key_name} must be an integer", value) from None
    return value


class Cipher(ABC):
    """
    Abstract base class for all ciphers.

    Each cipher implementation must provide:
    - encipher(): Turn plaintext into ciphertext
    - decipher(): Turn ciphertext back into plaintext

    Concrete ciphers are frozen dataclasses holding only their key, so an
    instance can be shared freely between calls and threads.
    """

    # Cipher metadata
    name: ClassVar[str]
    cipher_type: ClassVar[CipherType]
    cipher_family: ClassVar[CipherFamily]
    description: ClassVar[str]

    # Name of the constructor argument holding the key, None for keyless ciphers
    key_name: ClassVar[str | None] = None

    @abstractmethod
    def encipher(self, plaintext: str) -> str:
        """
        Encipher plaintext with this cipher's key.

        Args:
            plaintext: The text to encipher

        Returns:
            Ciphertext
        """
        pass

    @abstractmethod
    def decipher(self, ciphertext: str) -> str:
        """
        Decipher ciphertext with this cipher's key.

        Args:
            ciphertext: The text to decipher

        Returns:
            Plaintext
        """
        pass

    @classmethod
    def from_key(cls, key: CipherKey) -> "Cipher":
        """
        Build a cipher from a loosely typed key.

        Dict keys are looked up under the cipher's key name, then "key":
            RailFence.from_key({"rows": 3})
            RailFence.from_key("3")

        Raises:
            InvalidKeyError: If a required key is missing or invalid
        """
        if cls.key_name is None:
            return cls()

        if isinstance(key, dict):
            key = key.get(cls.key_name, key.get("key"))
        if key is None:
            raise InvalidKeyError(f"A {cls.key_name} is required for {cls.name}", key)

        return cls(cls.parse_key(key))

    @classmethod
    def parse_key(cls, key: Any) -> Any:
        """Convert a raw key into the constructor argument."""
        return key

    @classmethod
    def info(cls) -> CipherInfo:
        """Describe this cipher."""
        return CipherInfo(
            name=cls.name,
            cipher_type=cls.cipher_type,
            cipher_family=cls.cipher_family,
            description=cls.description,
            key_name=cls.key_name,
        )

    @property
    def key(self) -> Any:
        """The key this cipher was built with."""
        return getattr(self, self.key_name) if self.key_name else None
