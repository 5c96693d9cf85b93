"""Monoalphabetic ciphers."""

from kryptos.services.engines.monoalphabetic.caesar import Caesar
from kryptos.services.engines.monoalphabetic.rot13 import Rot13
from kryptos.services.engines.monoalphabetic.substitution import Substitution

__all__ = [
    "Caesar",
    "Rot13",
    "Substitution",
]
