"""
Analysis tools: advice for a game in progress, head-to-head comparison of
strategies, and the opener a human might like best.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from wordle_strategies.candidates import (
    DEFAULT_MODE,
    DEFAULT_SCORER,
    CandidateSet,
    Mode,
)
from wordle_strategies.constants import DEFAULT_OPENER, DEFAULT_SHOW_THRESHOLD
from wordle_strategies.dictionary import Dictionary
from wordle_strategies.errors import FormatError, InvalidWordError
from wordle_strategies.guessers import Guesser
from wordle_strategies.helpers import prettylist
from wordle_strategies.history import ScoreList
from wordle_strategies.score import Score
from wordle_strategies.score_cache import Scorer
from wordle_strategies.solver import solve
from wordle_strategies.words import decode, encode

rootlog = logging.getLogger(__name__)


# =============================================================================
# Advice for a game in progress
# =============================================================================

def history_from_strings(dictionary: Dictionary,
                         args: Sequence[str]) -> ScoreList:
    """
    Builds a history from alternating words and feedback strings, e.g.
    ``["plaid", "-/---", "tuner", "--+-/"]``.
    """
    if len(args) % 2 == 1:
        raise FormatError("Arguments must alternate word and score")
    scores = ScoreList.EMPTY
    for i in range(0, len(args), 2):
        guess = encode(args[i])
        if not dictionary.is_guess_word(guess):
            raise InvalidWordError(
                f"Guess {args[i]} is not in the dictionary"
            )
        scores = scores.plus(guess, Score.parse(args[i + 1]))
    return scores


class Advice:
    """
    What we know, and what we suggest guessing next.
    """
    def __init__(self,
                 scores: ScoreList,
                 possible: Sequence[int],
                 guesses: List[int],
                 show_threshold: int = DEFAULT_SHOW_THRESHOLD) -> None:
        self.scores = scores
        self.possible = possible
        self.guesses = guesses
        self.possible_set = frozenset(possible)
        self.show_threshold = show_threshold

    @property
    def pretty_guesses(self) -> str:
        """
        Suggested guesses, with ``*`` marking those that could be the
        solution.
        """
        return prettylist(
            decode(g) + ("*" if g in self.possible_set else "")
            for g in self.guesses
        )

    def __str__(self) -> str:
        n = len(self.possible)
        plural = "" if n == 1 else "s"
        if n <= self.show_threshold:
            shown = ": " + prettylist(decode(w) for w in self.possible)
        else:
            shown = ""
        return "\n".join([
            f"- Scores so far: {self.scores}",
            f"- {n} possible solution{plural}{shown}",
            f"- Guesses: {self.pretty_guesses}",
        ])


def suggest(dictionary: Dictionary,
            scores: ScoreList,
            guesser: Guesser,
            mode: Mode = DEFAULT_MODE,
            scorer: Optional[Scorer] = None) -> Advice:
    """
    Advice on the next guess, given the scores so far.
    """
    candidates = CandidateSet(dictionary, scores, mode, scorer)
    if candidates.n_possible == 1:
        # Nothing to think about.
        guesses = list(candidates.possible_solutions)
    else:
        guesses = guesser(candidates)
    return Advice(scores, candidates.possible_solutions, guesses)


# =============================================================================
# Comparing strategies
# =============================================================================

class Comparison:
    """
    Tallies of the solutions for which one strategy beat the other.
    "Much better" means by two or more guesses.
    """
    def __init__(self) -> None:
        self.a_better = 0
        self.a_much_better = 0
        self.b_better = 0
        self.b_much_better = 0
        self.n_words = 0

    def __str__(self) -> str:
        return (f"Of {self.n_words} words, "
                f"A better {self.a_better} "
                f"(much better {self.a_much_better}), "
                f"B better {self.b_better} "
                f"(much better {self.b_much_better})")


def compare_guessers(dictionary: Dictionary,
                     guesser_a: Guesser,
                     guesser_b: Guesser,
                     opener: int = encode(DEFAULT_OPENER),
                     mode: Mode = DEFAULT_MODE,
                     scorer: Optional[Scorer] = None) -> Comparison:
    """
    Solves every solution word with each of two strategies, and counts which
    did better.
    """
    scorer = scorer or DEFAULT_SCORER
    comparison = Comparison()
    for actual in dictionary.solution_words:
        scores_a = solve(dictionary, guesser_a, actual, opener=opener,
                         mode=mode, scorer=scorer)
        scores_b = solve(dictionary, guesser_b, actual, opener=opener,
                         mode=mode, scorer=scorer)
        comparison.n_words += 1
        cmp = scores_b.size() - scores_a.size()
        if cmp == 0:
            continue
        rootlog.info(f"For {decode(actual)}:\n"
                     f"  {guesser_a.__name__}: {scores_a}\n"
                     f"  {guesser_b.__name__}: {scores_b}")
        if cmp > 0:
            comparison.a_better += 1
            if cmp > 1:
                comparison.a_much_better += 1
        else:
            comparison.b_better += 1
            if cmp < -1:
                comparison.b_much_better += 1
    return comparison


# =============================================================================
# Best opener for humans
# =============================================================================

def best_human_guess(dictionary: Dictionary) -> Tuple[List[str],
                                                      Tuple[int, int]]:
    """
    What's the opener that gets the most hits on average? Meaning, the most
    letters that are at least ochre, and then the most that are green.

    Returns the (equal) best words, and their (matches, exact matches) totals
    across all solutions.
    """
    best = (0, 0)
    best_words = []  # type: List[str]
    for guess in dictionary.guess_words:
        matches = 0
        exact_matches = 0
        for actual in dictionary.solution_words:
            score = Score.of(guess, actual)
            matches += score.matches()
            exact_matches += score.exact_matches()
        total = (matches, exact_matches)
        if total >= best:
            if total > best:
                best_words.clear()
                best = total
            best_words.append(decode(guess))
    rootlog.info(f"Best words {prettylist(best_words)} with score {best}")
    return best_words, best
