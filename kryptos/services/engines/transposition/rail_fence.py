from dataclasses import dataclass
from functools import lru_cache
from typing import Any, ClassVar

from kryptos.models.schemas import CipherFamily, CipherType
from kryptos.services.engines.base import Cipher, parse_int_key, validate_positive_key
from kryptos.services.engines.registry import CipherRegistry


def zigzag_row(rows: int, position: int) -> int:
    """
    Row of the fence a text position falls on.

    The pattern bounces between row 0 and row rows - 1 with a period of
    2 * rows - 2. A single rail puts everything on row 0.
    """
    if rows == 1:
        return 0

    period = 2 * rows - 2
    offset = position % period

    if offset <= period // 2:
        return offset
    return period - offset


@lru_cache(maxsize=32)
def zigzag_order(rows: int, length: int) -> tuple[int, ...]:
    """
    Positions of a text of the given length, read rail by rail.

    Sorted by (row, original position). The result is a permutation of
    range(length) and depends only on its arguments, so it is cached.
    """
    return tuple(sorted(range(length), key=lambda p: (zigzag_row(rows, p), p)))


@CipherRegistry.register
@dataclass(frozen=True)
class RailFence(Cipher):
    """
    Rail Fence cipher.

    The Rail Fence cipher writes the plaintext in a zigzag pattern across
    a number of "rails" (rows), then reads off each rail in order to
    produce the ciphertext. Every character, spaces and punctuation
    included, takes up a position on the fence.

    Example with 3 rails:
    Plaintext: WEAREDISCOVERED

    W . . . E . . . C . . . R . .
    . E . R . D . S . O . E . E .
    . . A . . . I . . . V . . . D

    Read off rows: WECR + ERDSOEE + AIVD
    """

    rows: int

    name: ClassVar[str] = "Rail Fence Cipher"
    cipher_type: ClassVar[CipherType] = CipherType.RAIL_FENCE
    cipher_family: ClassVar[CipherFamily] = CipherFamily.TRANSPOSITION
    description: ClassVar[str] = (
        "Writes the message diagonally down and up across a set of rails, "
        "then reads the rails off one after another. The rail count is the key."
    )
    key_name: ClassVar[str] = "rows"

    def __post_init__(self) -> None:
        validate_positive_key(self.rows, "rows")

    @classmethod
    def parse_key(cls, key: Any) -> int:
        return parse_int_key(key, "rows")

    def encipher(self, plaintext: str) -> str:
        """Read the fence off rail by rail."""
        if self.rows == 1:
            return plaintext

        order = self.calculate_order(len(plaintext))
        return "".join(plaintext[p] for p in order)

    def decipher(self, ciphertext: str) -> str:
        """Scatter each ciphertext character back to its fence position."""
        if self.rows == 1:
            return ciphertext

        order = self.calculate_order(len(ciphertext))
        plaintext = [""] * len(ciphertext)
        for i, char in enumerate(ciphertext):
            plaintext[order[i]] = char

        return "".join(plaintext)

    def calculate_row(self, position: int) -> int:
        """Row the given text position is placed on."""
        return zigzag_row(self.rows, position)

    def calculate_order(self, length: int) -> tuple[int, ...]:
        """Original positions in the order they appear in the ciphertext."""
        return zigzag_order(self.rows, length)

    def render(self, text: str, blank: str = ".") -> list[str]:
        """
        Draw the fence for a text, one string per rail.

        Cells off the zigzag are filled with `blank`.
        """
        grid = [[blank] * len(text) for _ in range(self.rows)]
        for position, char in enumerate(text):
            grid[self.calculate_row(position)][position] = char

        return ["".join(row) for row in grid]
