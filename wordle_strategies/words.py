"""
Encoding of five-letter words as integers.

Each letter occupies a 5-bit field, the first letter in the lowest bits, and
holds ``letter - 'a' + 1``. Zero means "no letter", which lets the scorer
blank out letters it has already accounted for.
"""

from functools import lru_cache

from wordle_strategies.constants import (
    BITS_PER_LETTER,
    LETTER_FIELD,
    WORD_REGEX,
    WORDLEN,
)
from wordle_strategies.errors import InvalidWordError

_ORD_A_MINUS_1 = ord("a") - 1


def is_valid_word(word: str) -> bool:
    """
    Is this exactly five lowercase ASCII letters?
    """
    return bool(WORD_REGEX.fullmatch(word))


def encode(word: str) -> int:
    """
    Encodes a word. Raises :exc:`InvalidWordError` for anything that is not
    five lowercase ASCII letters.
    """
    if not is_valid_word(word):
        raise InvalidWordError(
            f"Not a {WORDLEN}-letter lowercase word: {word!r}"
        )
    code = 0
    for i, c in enumerate(word):
        code |= (ord(c) - _ORD_A_MINUS_1) << (i * BITS_PER_LETTER)
    return code


def decode(code: int) -> str:
    """
    Inverse of :func:`encode`.
    """
    return "".join(
        chr(((code >> (i * BITS_PER_LETTER)) & LETTER_FIELD) + _ORD_A_MINUS_1)
        for i in range(WORDLEN)
    )


def letter_at(code: int, pos: int) -> int:
    return (code >> (pos * BITS_PER_LETTER)) & LETTER_FIELD


@lru_cache(maxsize=None)
def letter_bits(code: int) -> int:
    """
    The set of letters used by an encoded word, as a bitmask with bit ``n``
    set for letter code ``n``.
    """
    bits = 0
    for i in range(WORDLEN):
        bits |= 1 << ((code >> (i * BITS_PER_LETTER)) & LETTER_FIELD)
    return bits
