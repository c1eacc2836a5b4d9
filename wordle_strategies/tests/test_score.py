import unittest

from wordle_strategies.errors import FormatError
from wordle_strategies.score import SOLVED, Colour, Score, score_code
from wordle_strategies.tests.common import WORDS
from wordle_strategies.words import encode

ALL_FIELDS = (1 << 25) - 1


class TestScore(unittest.TestCase):
    @staticmethod
    def _testscore(attempt: str, actual: str, expected: str) -> None:
        score = Score.of_words(attempt, actual)
        assert str(score) == expected, (
            f"For attempt {attempt} against {actual}, we produce {score}, "
            f"but the correct feedback is {expected}"
        )
        assert score == Score.parse(expected)

    def test_exact(self) -> None:
        self._testscore("atone", "atone", "+++++")

    def test_anagram(self) -> None:
        self._testscore("enota", "atone", "//+//")
        self._testscore("atone", "eaton", "/////")

    def test_duplicate_letters(self) -> None:
        self._testscore("natty", "tangy", "/+/-+")
        self._testscore("natty", "tanay", "/+/-+")
        self._testscore("natay", "tangy", "/+/-+")
        self._testscore("natty", "tanny", "/+/-+")
        self._testscore("natty", "tanty", "/+/++")
        self._testscore("natty", "natyt", "+++//")
        self._testscore("aahed", "drama", "//--/")
        # The first O is grey, since the only O in HUMOR is accounted for.
        self._testscore("honor", "humor", "+--++")
        # Three Es, one of them right.
        self._testscore("eerie", "pause", "----+")
        # Two Es, both in the wrong place: only the first gets ochre.
        self._testscore("leper", "pause", "-//--")

    def test_no_common_letters(self) -> None:
        assert score_code(encode("plaid"), encode("tuner")) == 0
        self._testscore("plaid", "tuner", "-----")

    def test_solved(self) -> None:
        for word in WORDS:
            assert Score.of_words(word, word) == SOLVED
        assert str(SOLVED) == "+++++"

    def test_parse(self) -> None:
        for text in ["-----", "+++++", "/////", "-/+-/", "+/-/+"]:
            assert str(Score.parse(text)) == text
        for text in ["", "++++", "++++++", "+++x+", "==_==", "+++ +"]:
            with self.assertRaises(FormatError):
                Score.parse(text)

    def test_equality(self) -> None:
        a = Score.parse("-/+--")
        b = Score.of_words("otter", "tapir")
        assert a != Score.parse("-/---")
        assert len({a, Score.parse("-/+--")}) == 1
        assert a != "-/+--"
        assert str(b) == "-/--+"

    def test_colours(self) -> None:
        score = Score.parse("-/+-+")
        assert score.colours() == [
            Colour.GREY, Colour.OCHRE, Colour.GREEN, Colour.GREY,
            Colour.GREEN,
        ]
        assert score.matches() == 3
        assert score.exact_matches() == 2
        assert Score.parse("-----").matches() == 0

    def test_masks(self) -> None:
        solved = Score.of_words("atone", "atone")
        assert solved.green_mask == ALL_FIELDS
        assert solved.ochre_mask == 0

        anagram = Score.of_words("atone", "eaton")
        assert anagram.ochre_mask == ALL_FIELDS
        assert anagram.green_mask == 0

        mixed = Score.of_words("natty", "tangy")  # /+/-+
        assert mixed.green_mask == (31 << 5) | (31 << 20)
        assert mixed.ochre_mask == 31 | (31 << 10)

    def test_colourful_str(self) -> None:
        text = Score.parse("+/-++").colourful_str(encode("crane"))
        assert "\x1b[" in text
        for letter in "crane":
            assert letter in text
