import logging
from typing import Type

from kryptos.core.exceptions import CipherNotFoundError
from kryptos.models.schemas import CipherFamily, CipherInfo, CipherKey, CipherType
from kryptos.services.engines.base import Cipher

logger = logging.getLogger(__name__)


class CipherRegistry:
    """
    Registry for cipher classes.

    Maps cipher types to their implementing classes and builds keyed
    instances on request.
    """

    _ciphers: dict[CipherType, Type[Cipher]] = {}

    @classmethod
    def register(cls, cipher_class: Type[Cipher]) -> Type[Cipher]:
        """
        Register a cipher class.

        Can be used as a decorator:
            @CipherRegistry.register
            @dataclass(frozen=True)
            class Caesar(Cipher):
                ...

        Args:
            cipher_class: The cipher class to register

        Returns:
            The cipher class (for decorator usage)
        """
        cls._ciphers[cipher_class.cipher_type] = cipher_class
        logger.debug(f"Registered cipher {cipher_class.cipher_type.value}: {cipher_class.__name__}")
        return cipher_class

    @classmethod
    def get_cipher_class(cls, cipher_type: CipherType | str) -> Type[Cipher]:
        """
        Look up the class registered for a cipher type.

        Args:
            cipher_type: The type of cipher, as an enum member or its value

        Returns:
            The cipher class

        Raises:
            CipherNotFoundError: If nothing is registered under that type
        """
        try:
            cipher_type = CipherType(cipher_type)
        except ValueError:
            raise CipherNotFoundError(str(cipher_type)) from None

        if cipher_type not in cls._ciphers:
            raise CipherNotFoundError(cipher_type.value)

        return cls._ciphers[cipher_type]

    @classmethod
    def create(cls, cipher_type: CipherType | str, key: CipherKey = None) -> Cipher:
        """
        Build a cipher instance for the given type and key.

        Args:
            cipher_type: The type of cipher
            key: The key, as accepted by the cipher's from_key()

        Returns:
            A ready-to-use cipher

        Raises:
            CipherNotFoundError: If the cipher type is unknown
            InvalidKeyError: If the key is rejected by the cipher
        """
        cipher_class = cls.get_cipher_class(cipher_type)
        return cipher_class.from_key(key)

    @classmethod
    def get_ciphers_by_family(cls, family: CipherFamily) -> list[Type[Cipher]]:
        """
        Get all cipher classes belonging to a family.

        Args:
            family: The cipher family

        Returns:
            List of cipher classes
        """
        return [
            cipher_class
            for cipher_class in cls._ciphers.values()
            if cipher_class.cipher_family == family
        ]

    @classmethod
    def describe_all(cls) -> list[CipherInfo]:
        """Metadata for every registered cipher."""
        return [cipher_class.info() for cipher_class in cls._ciphers.values()]

    @classmethod
    def list_registered(cls) -> list[CipherType]:
        """
        List all registered cipher types.

        Returns:
            List of registered cipher types
        """
        return list(cls._ciphers.keys())

    @classmethod
    def is_registered(cls, cipher_type: CipherType) -> bool:
        """
        Check if a cipher type is registered.

        Args:
            cipher_type: The cipher type to check

        Returns:
            True if registered
        """
        return cipher_type in cls._ciphers


# Import ciphers to trigger registration
def _load_ciphers() -> None:
    """Load all cipher modules to trigger registration."""
    from kryptos.services.engines import monoalphabetic  # noqa: F401
    from kryptos.services.engines import polyalphabetic  # noqa: F401
    from kryptos.services.engines import transposition  # noqa: F401


# Load ciphers when module is imported
_load_ciphers()
