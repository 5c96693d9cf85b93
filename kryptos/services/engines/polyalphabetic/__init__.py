"""Polyalphabetic ciphers."""

from kryptos.services.engines.polyalphabetic.vigenere import Vigenere

__all__ = [
    "Vigenere",
]
