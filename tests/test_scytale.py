"""Tests for the Scytale cipher."""

import logging

import pytest

from kryptos.core.exceptions import InvalidKeyError, KeyTooLargeError
from kryptos.services.engines.transposition.scytale import Scytale


class TestScytaleConstruction:
    """Key validation for the Scytale cipher."""

    def test_valid_height(self):
        assert Scytale(4).height == 4

    def test_zero_height_rejected(self):
        with pytest.raises(InvalidKeyError):
            Scytale(0)

    @pytest.mark.parametrize("height", [-3, 2.0, "6", False])
    def test_non_positive_integer_rejected(self, height):
        with pytest.raises(InvalidKeyError):
            Scytale(height)


class TestScytaleCipher:
    """Test suite for Scytale encipher/decipher."""

    @pytest.fixture
    def scytale(self):
        return Scytale(6)

    def test_encipher(self, scytale):
        """The ciphertext keeps the trailing pad of the uneven grid."""
        assert scytale.encipher("I have a secret") == "I r aeh tas ve ec "

    def test_decipher(self, scytale):
        assert scytale.decipher("I r aeh tas ve ec ") == "I have a secret"

    def test_even_grid_needs_no_padding(self):
        scytale = Scytale(3)

        assert scytale.encipher("ATTACKATDAWN") == "AAAATCTWTKDN"
        assert scytale.decipher("AAAATCTWTKDN") == "ATTACKATDAWN"

    def test_ciphertext_fills_grid(self, scytale):
        """Ciphertext is height * width long, at least the plaintext length."""
        text = "I have a secret"
        width = scytale.grid_width(len(text))

        ciphertext = scytale.encipher(text)

        assert width == 3
        assert len(ciphertext) == scytale.height * width
        assert len(ciphertext) >= len(text)
        assert len(scytale.decipher(ciphertext)) == len(text)

    def test_height_one(self):
        scytale = Scytale(1)

        assert scytale.encipher("hello") == "hello"
        assert scytale.decipher("hello") == "hello"

    @pytest.mark.parametrize("height", [2, 3, 4, 7, 11])
    def test_roundtrip(self, height):
        scytale = Scytale(height)
        text = "Meet me by the old oak tree at 10:30, bring 2 maps."

        assert scytale.decipher(scytale.encipher(text)) == text

    def test_leading_spaces_preserved(self):
        scytale = Scytale(2)
        text = "   indented"

        assert scytale.decipher(scytale.encipher(text)) == text

    def test_unicode_characters_are_single_positions(self):
        scytale = Scytale(3)
        text = "I 🖤 crÿptögraphy"

        ciphertext = scytale.encipher(text)

        # 16 characters on a 3 x 6 grid leave two pad cells
        assert len(ciphertext) == 18
        assert sorted(ciphertext) == sorted(text + "  ")
        assert scytale.decipher(ciphertext) == text

    def test_trailing_spaces_are_lost(self):
        """Known lossy contract: the pad blank cannot be told apart from a real one."""
        scytale = Scytale(2)

        assert scytale.decipher(scytale.encipher("abc  ")) == "abc"

    def test_trim_is_logged(self, scytale, caplog):
        caplog.set_level(logging.DEBUG, logger="kryptos")

        scytale.decipher("I r aeh tas ve ec ")

        assert "Trimmed 3 pad characters" in caplog.text


class TestScytaleKeyTooLarge:
    """A scytale with as many rotations as characters is rejected."""

    def test_encipher_rejects_height_above_length(self):
        with pytest.raises(KeyTooLargeError) as exc_info:
            Scytale(10).encipher("abc")

        assert exc_info.value.details == {"height": 10, "length": 3}

    def test_height_equal_to_length(self):
        with pytest.raises(KeyTooLargeError):
            Scytale(3).encipher("abc")

    def test_decipher_rejects_height_above_length(self):
        with pytest.raises(KeyTooLargeError):
            Scytale(10).decipher("abc")

    def test_empty_text(self):
        with pytest.raises(KeyTooLargeError):
            Scytale(1).encipher("")
