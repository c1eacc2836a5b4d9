import unittest

from wordle_strategies.errors import InvalidWordError
from wordle_strategies.tests.common import WORDS
from wordle_strategies.words import (
    decode,
    encode,
    is_valid_word,
    letter_at,
    letter_bits,
)

ABIDE_CODE = 1 | (2 << 5) | (9 << 10) | (4 << 15) | (5 << 20)


class TestWordCodec(unittest.TestCase):
    def test_encode(self) -> None:
        assert encode("abide") == ABIDE_CODE

    def test_decode(self) -> None:
        assert decode(ABIDE_CODE) == "abide"

    def test_round_trip(self) -> None:
        for word in WORDS + ["aaaaa", "zzzzz", "azazz"]:
            assert decode(encode(word)) == word

    def test_injective(self) -> None:
        words = WORDS + ["aaaaa", "zzzzz", "azazz"]
        assert len(set(encode(w) for w in words)) == len(set(words))

    def test_fields(self) -> None:
        code = encode("azbyc")
        assert [letter_at(code, i) for i in range(5)] == [1, 26, 2, 25, 3]
        assert code < (1 << 25)

    def test_invalid(self) -> None:
        for word in ["Abide", "abid", "abides", "ab1de", "", "abide\n",
                     "ab de"]:
            assert not is_valid_word(word)
            with self.assertRaises(InvalidWordError):
                encode(word)
        # It's also a ValueError.
        with self.assertRaises(ValueError):
            encode("ABIDE")

    def test_letter_bits(self) -> None:
        assert letter_bits(encode("aaaaa")) == 1 << 1
        assert letter_bits(encode("abide")) == (
            (1 << 1) | (1 << 2) | (1 << 9) | (1 << 4) | (1 << 5)
        )
        assert not letter_bits(encode("plaid")) & letter_bits(encode("tuner"))
