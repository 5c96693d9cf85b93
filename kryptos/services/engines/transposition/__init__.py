"""Transposition ciphers."""

from kryptos.services.engines.transposition.rail_fence import RailFence
from kryptos.services.engines.transposition.scytale import Scytale

__all__ = [
    "RailFence",
    "Scytale",
]
