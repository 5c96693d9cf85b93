"""Tests for the Rail Fence cipher."""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import FrozenInstanceError

import pytest

from kryptos.core.exceptions import InvalidKeyError
from kryptos.services.engines.transposition.rail_fence import (
    RailFence,
    zigzag_order,
    zigzag_row,
)


class TestRailFenceConstruction:
    """Key validation for the Rail Fence cipher."""

    def test_valid_rows(self):
        assert RailFence(4).rows == 4

    def test_zero_rows_rejected(self):
        """A fence needs at least one rail."""
        with pytest.raises(InvalidKeyError) as exc_info:
            RailFence(0)

        assert exc_info.value.details == {"key": 0}

    @pytest.mark.parametrize("rows", [-1, 1.5, "3", True, None])
    def test_non_positive_integer_rejected(self, rows):
        with pytest.raises(InvalidKeyError):
            RailFence(rows)

    def test_no_upper_bound(self):
        assert RailFence(10_000).encipher("short") == "short"

    def test_immutable(self):
        fence = RailFence(3)

        with pytest.raises(FrozenInstanceError):
            fence.rows = 4


class TestRailFenceCipher:
    """Test suite for Rail Fence encipher/decipher."""

    @pytest.fixture
    def fence(self):
        return RailFence(7)

    def test_encipher(self, fence):
        assert fence.encipher("I can't keep a secret") == "I  pace aesnket' cetr"

    def test_decipher(self, fence):
        assert fence.decipher("I  pace aesnket' cetr") == "I can't keep a secret"

    def test_classic_three_rails(self):
        """The textbook WE ARE DISCOVERED example."""
        fence = RailFence(3)
        assert fence.encipher("WEAREDISCOVEREDFLEEATONCE") == "WECRLTEERDSOEEFEAOCAIVDEN"

    def test_one_rail_is_identity(self):
        fence = RailFence(1)
        text = "I can't keep a secret"

        assert fence.encipher(text) == text
        assert fence.decipher("I  pace aesnket' cetr") == "I  pace aesnket' cetr"

    def test_text_shorter_than_rows(self):
        """Short text still follows the zigzag; here it is a single descent."""
        fence = RailFence(10)

        assert fence.encipher("abc") == "abc"
        assert fence.decipher("abc") == "abc"

    def test_empty_text(self, fence):
        assert fence.encipher("") == ""
        assert fence.decipher("") == ""

    def test_length_preserved(self, fence):
        text = "Attack at dawn, hold the bridge!"
        assert len(fence.encipher(text)) == len(text)

    @pytest.mark.parametrize("rows", [1, 2, 3, 5, 8, 50])
    def test_roundtrip(self, rows):
        """Deciphering the ciphertext gives back the plaintext."""
        fence = RailFence(rows)
        text = "Meet me by the old oak tree at 10:30, bring 2 maps."

        assert fence.decipher(fence.encipher(text)) == text

    def test_non_letters_are_positions(self):
        """Spaces, punctuation and digits move like any other character."""
        fence = RailFence(2)

        assert fence.encipher("a b!1") == "ab1 !"

    def test_unicode_characters_are_single_positions(self):
        fence = RailFence(3)
        text = "I 🖤 crÿptögraphy"

        ciphertext = fence.encipher(text)

        assert len(ciphertext) == len(text)
        assert sorted(ciphertext) == sorted(text)
        assert fence.decipher(ciphertext) == text

    def test_shared_between_threads(self, fence):
        texts = [f"message number {i} for the fence" for i in range(50)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda t: fence.decipher(fence.encipher(t)), texts))

        assert results == texts


class TestZigzagGeometry:
    """Row assignment and order derivation."""

    def test_row_of_position(self):
        """Rows 3: period 4, 10 mod 4 = 2, on the bottom rail."""
        fence = RailFence(3)
        assert fence.calculate_row(10) == 2

    def test_rows_bounce(self):
        rows = [zigzag_row(4, p) for p in range(13)]
        assert rows == [0, 1, 2, 3, 2, 1, 0, 1, 2, 3, 2, 1, 0]

    def test_single_rail_row(self):
        assert all(zigzag_row(1, p) == 0 for p in range(20))

    def test_order_is_rows_then_positions(self):
        assert RailFence(3).calculate_order(7) == (0, 4, 1, 3, 5, 2, 6)

    @pytest.mark.parametrize("rows", range(1, 9))
    def test_order_is_permutation(self, rows):
        """Every index appears exactly once for any length."""
        for length in range(0, 40):
            order = zigzag_order(rows, length)
            assert sorted(order) == list(range(length))

    def test_order_is_cached(self):
        assert zigzag_order(5, 30) is zigzag_order(5, 30)

    def test_order_cache_is_bounded(self):
        assert zigzag_order.cache_info().maxsize == 32

    def test_render(self):
        fence = RailFence(3)

        assert fence.render("WEAREDISCOVERED") == [
            "W...E...C...R..",
            ".E.R.D.S.O.E.E.",
            "..A...I...V...D",
        ]
