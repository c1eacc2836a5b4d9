import os
import tempfile
import unittest

from wordle_strategies.dictionary import Dictionary, make_wordlist, read_words
from wordle_strategies.errors import ConfigurationError
from wordle_strategies.words import decode, encode


class TestReadWords(unittest.TestCase):
    def test_filtering(self) -> None:
        lines = [
            "apple\n", "Hello\n", "abc\n", "abcdef\n", "ab1de\n", "\n",
            "zebra", "apple\n", "crane\r\n", " tapir\n",
        ]
        words = read_words(lines)
        assert [decode(w) for w in words] == ["apple", "zebra", "crane"]

    def test_empty(self) -> None:
        assert read_words([]) == []


class TestDictionary(unittest.TestCase):
    def test_create(self) -> None:
        d = Dictionary.create(
            ["crane\n", "noise\n", "slate\n", "crane\n", "CRANE\n"],
            ["slate\n", "crane\n"],
        )
        assert [decode(w) for w in d.guess_words] == [
            "crane", "noise", "slate"
        ]
        assert [decode(w) for w in d.solution_words] == ["slate", "crane"]
        assert d.is_guess_word(encode("noise"))
        assert not d.is_solution_word(encode("noise"))
        assert d.is_solution_word(encode("slate"))
        assert str(d) == "Dictionary of 3 guess words and 2 solution words"

    def test_missing_solution(self) -> None:
        with self.assertRaises(ConfigurationError) as cm:
            Dictionary.create(["crane\n"], ["crane\n", "zebra\n", "apple\n"])
        assert "Missing words: apple, zebra" in str(cm.exception)

    def test_from_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            guess_filename = os.path.join(tmpdir, "guesses.txt")
            solution_filename = os.path.join(tmpdir, "solutions.txt")
            with open(guess_filename, "wt") as f:
                f.write("# comment\ncrane\nslate\nnoise\n")
            with open(solution_filename, "wt") as f:
                f.write("slate\n")
            d = Dictionary.from_files(guess_filename, solution_filename)
        assert len(d.guess_words) == 3
        assert d.solution_words == (encode("slate"),)

    def test_make_wordlist(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            source = os.path.join(tmpdir, "words")
            target = os.path.join(tmpdir, "five_letter_words.txt")
            with open(source, "wt") as f:
                f.write("Apple\nzebra\nzebras\nZebra\nit's\ncafé\nbrand\n")
            make_wordlist(source, target)
            with open(target) as f:
                assert f.read() == "apple\nzebra\nbrand\n"
