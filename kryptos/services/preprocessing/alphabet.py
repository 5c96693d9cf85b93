"""
Alphabet shifting shared by the substitution-family ciphers.

Only the 26 ASCII letters are rotated, each within its own case. Every other
character (digits, punctuation, whitespace, non-Latin symbols) is passed
through untouched.
"""
import string

ALPHABET = string.ascii_uppercase
ALPHABET_SIZE = len(ALPHABET)
ASCII_LETTERS = frozenset(string.ascii_letters)


def is_ascii_letter(char: str) -> bool:
    """Check whether a character is one of A-Z or a-z."""
    return char in ASCII_LETTERS


def letter_index(char: str) -> int:
    """
    Position of an ASCII letter in the alphabet, ignoring case.

    Raises:
        ValueError: If the character is not an ASCII letter.
    """
    if not is_ascii_letter(char):
        raise ValueError(f"'{char}' is not an ASCII letter")
    return ALPHABET.index(char.upper())


def shift_letter(char: str, offset: int) -> str:
    """
    Rotate a single letter by an offset, preserving its case.

    Args:
        char: A single character
        offset: Number of positions to rotate; taken modulo 26, so negative
            values rotate backwards

    Returns:
        The rotated letter, or the character unchanged if it is not A-Z/a-z
    """
    if len(char) != 1:
        raise ValueError(f"Expected a single character, got {len(char)}")

    if char in string.ascii_uppercase:
        base = ord("A")
    elif char in string.ascii_lowercase:
        base = ord("a")
    else:
        return char

    return chr((ord(char) - base + offset) % ALPHABET_SIZE + base)


def shift_text(text: str, offset: int) -> str:
    """Apply shift_letter with the same offset to every character."""
    return "".join(shift_letter(char, offset) for char in text)
