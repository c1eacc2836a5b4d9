import unittest
from typing import List

from wordle_strategies.candidates import CandidateSet, Mode
from wordle_strategies.constants import N_GUESSES
from wordle_strategies.errors import (
    GuessLimitError,
    InvalidWordError,
    RepeatedGuessError,
)
from wordle_strategies.guessers import (
    GUESSERS,
    entropy_guesses,
    minimax_guesses,
    sum_of_squares_guesses,
)
from wordle_strategies.history import ScoreList
from wordle_strategies.score import Score
from wordle_strategies.score_cache import ScoreCache
from wordle_strategies.solver import solve, solve_from
from wordle_strategies.tests.common import (
    ABC_WORDS,
    CRANE_ENTROPY_COUNTS,
    CRANE_MINIMAX_COUNTS,
    CRANE_SUM_OF_SQUARES_COUNTS,
    make_abc_dictionary,
    make_word_dictionary,
)
from wordle_strategies.words import encode


def stubborn_guesses(candidates: CandidateSet) -> List[int]:
    return [candidates.allowed_guesses[0]]


class TestSolveAbc(unittest.TestCase):
    def setUp(self) -> None:
        self.dictionary = make_abc_dictionary()

    def test_paths(self) -> None:
        opener = encode("abcde")
        # Minimax takes the last of equally good guesses; the others, the
        # first.
        expected = {
            minimax_guesses: {"abcde": 1, "abcdf": 3, "abcdg": 2},
            sum_of_squares_guesses: {"abcde": 1, "abcdf": 2, "abcdg": 3},
            entropy_guesses: {"abcde": 1, "abcdf": 2, "abcdg": 3},
        }
        for guesser, counts in expected.items():
            for word, n in counts.items():
                scores = solve(self.dictionary, guesser, encode(word),
                               opener=opener)
                assert scores.solved()
                assert scores.size() == n

    def test_history(self) -> None:
        scores = solve(self.dictionary, sum_of_squares_guesses,
                       encode("abcdg"), opener=encode("abcde"))
        assert str(scores) == "abcde:++++- abcdf:++++- abcdg:+++++"

    def test_every_opener(self) -> None:
        for guesser in GUESSERS.values():
            for opener in ABC_WORDS:
                sizes = [
                    solve(self.dictionary, guesser, encode(actual),
                          opener=encode(opener)).size()
                    for actual in ABC_WORDS
                ]
                assert sum(sizes) == 6
                assert max(sizes) == 3

    def test_solve_from(self) -> None:
        scores = ScoreList.EMPTY.plus(encode("abcdf"), Score.parse("++++-"))
        result = solve_from(self.dictionary, minimax_guesses,
                            encode("abcdg"), scores)
        assert str(result) == "abcdf:++++- abcdg:+++++"
        # The starting history is untouched.
        assert scores.size() == 1

    def test_invalid_words(self) -> None:
        with self.assertRaises(InvalidWordError):
            solve(self.dictionary, minimax_guesses, encode("abcde"),
                  opener=encode("zzzzz"))
        with self.assertRaises(InvalidWordError):
            solve(self.dictionary, minimax_guesses, encode("zzzzz"),
                  opener=encode("abcde"))

    def test_guess_limit(self) -> None:
        with self.assertRaises(GuessLimitError):
            solve(self.dictionary, sum_of_squares_guesses, encode("abcdg"),
                  opener=encode("abcde"), guess_limit=2)
        scores = solve(self.dictionary, sum_of_squares_guesses,
                       encode("abcdg"), opener=encode("abcde"),
                       guess_limit=3)
        assert scores.size() == 3

    def test_repeated_guess(self) -> None:
        with self.assertRaises(RepeatedGuessError):
            solve(self.dictionary, stubborn_guesses, encode("abcdf"),
                  opener=encode("abcde"), mode=Mode.NORMAL)


class TestSolveWords(unittest.TestCase):
    def test_all_strategies(self) -> None:
        dictionary = make_word_dictionary()
        cache = ScoreCache(dictionary)
        for mode in Mode:
            for guesser in GUESSERS.values():
                for actual in dictionary.solution_words:
                    scores = solve(dictionary, guesser, actual,
                                   opener=encode("crane"), mode=mode,
                                   scorer=cache, guess_limit=N_GUESSES)
                    assert scores.solved()
                    assert scores.guesses()[-1] == actual
                    guesses = scores.guesses()
                    assert len(set(guesses)) == len(guesses)
                    assert scores.size() <= N_GUESSES

    def test_hard_mode_counts(self) -> None:
        dictionary = make_word_dictionary()
        expected = {
            minimax_guesses: CRANE_MINIMAX_COUNTS,
            sum_of_squares_guesses: CRANE_SUM_OF_SQUARES_COUNTS,
            entropy_guesses: CRANE_ENTROPY_COUNTS,
        }
        for guesser, counts in expected.items():
            actual_counts = {
                word: solve(dictionary, guesser, encode(word),
                            opener=encode("crane"), mode=Mode.HARD).size()
                for word in counts
            }
            assert actual_counts == counts
        assert solve(dictionary, minimax_guesses, encode("tawny"),
                     opener=encode("crane")).guesses() == \
            [encode(w) for w in ["crane", "taunt", "tawny"]]
        assert solve(dictionary, sum_of_squares_guesses, encode("aunty"),
                     opener=encode("crane")).guesses() == \
            [encode(w) for w in ["crane", "tangy", "aunty"]]
