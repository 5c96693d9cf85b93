import logging
import math
from dataclasses import dataclass
from typing import Any, ClassVar

from kryptos.core.exceptions import KeyTooLargeError
from kryptos.models.schemas import CipherFamily, CipherType
from kryptos.services.engines.base import Cipher, parse_int_key, validate_positive_key
from kryptos.services.engines.registry import CipherRegistry

logger = logging.getLogger(__name__)


@CipherRegistry.register
@dataclass(frozen=True)
class Scytale(Cipher):
    """
    Scytale cipher.

    The text is wound down a rod of `height` faces: it is written into a
    grid of `height` rows column by column, then read off row by row.
    The grid is ceil(len / height) columns wide; cells left over in the
    last column hold a blank pad.

    Example with height 3:
    Plaintext: ATTACKATDAWN

    A A A A
    T C T W
    T K D N

    Read off rows: AAAA + TCTW + TKDN

    Padding is kept in the ciphertext and right-trimmed on decipher, so a
    plaintext that ends in blanks does not survive a round trip.
    """

    height: int

    name: ClassVar[str] = "Scytale Cipher"
    cipher_type: ClassVar[CipherType] = CipherType.SCYTALE
    cipher_family: ClassVar[CipherFamily] = CipherFamily.TRANSPOSITION
    description: ClassVar[str] = (
        "An ancient Spartan transposition cipher. A strip wound around a rod "
        "is written along the rod, then unwound. The number of faces of the "
        "rod (the height of the grid) is the key."
    )
    key_name: ClassVar[str] = "height"
    PAD: ClassVar[str] = " "

    def __post_init__(self) -> None:
        validate_positive_key(self.height, "height")

    @classmethod
    def parse_key(cls, key: Any) -> int:
        return parse_int_key(key, "height")

    def encipher(self, plaintext: str) -> str:
        """Write column by column, read row by row."""
        width = self._width(plaintext)
        grid = [self.PAD] * (self.height * width)

        for p, char in enumerate(plaintext):
            row = p % self.height
            col = p // self.height
            grid[row * width + col] = char

        return "".join(grid)

    def decipher(self, ciphertext: str) -> str:
        """Write row by row, read column by column, drop the padding."""
        width = self._width(ciphertext)
        grid = [self.PAD] * (self.height * width)

        for p, char in enumerate(ciphertext):
            row = p // width
            col = p % width
            grid[row * width + col] = char

        plaintext = "".join(
            grid[row * width + col]
            for col in range(width)
            for row in range(self.height)
        )
        trimmed = plaintext.rstrip(self.PAD)

        if len(trimmed) < len(plaintext):
            logger.debug(f"Trimmed {len(plaintext) - len(trimmed)} pad characters")

        return trimmed

    def grid_width(self, length: int) -> int:
        """Number of columns needed to hold a text of the given length."""
        return math.ceil(length / self.height)

    def _width(self, text: str) -> int:
        if self.height >= len(text):
            raise KeyTooLargeError(self.height, len(text))
        return self.grid_width(len(text))
