"""Classical substitution and transposition ciphers for teaching cryptography."""

# The registry import loads and registers every cipher
from kryptos.services.engines.registry import CipherRegistry
from kryptos.services.engines.base import Cipher
from kryptos.services.engines.monoalphabetic import Caesar, Rot13, Substitution
from kryptos.services.engines.polyalphabetic import Vigenere
from kryptos.services.engines.transposition import RailFence, Scytale
from kryptos.services.cipher_service import CipherService
from kryptos.services.preprocessing.alphabet import shift_letter
from kryptos.core.exceptions import (
    CipherNotFoundError,
    InvalidKeyError,
    KeyTooLargeError,
    KryptosError,
    TextTooLongError,
)

__version__ = "0.1.0"

__all__ = [
    "Caesar",
    "Cipher",
    "CipherNotFoundError",
    "CipherRegistry",
    "CipherService",
    "InvalidKeyError",
    "KeyTooLargeError",
    "KryptosError",
    "RailFence",
    "Rot13",
    "Scytale",
    "Substitution",
    "TextTooLongError",
    "Vigenere",
    "shift_letter",
]
