"""
Playing one game automatically, when we know the solution.
"""

import logging
from typing import Optional

from wordle_strategies.candidates import (
    DEFAULT_MODE,
    DEFAULT_SCORER,
    CandidateSet,
    Mode,
)
from wordle_strategies.constants import DEFAULT_OPENER, MAX_SOLVE_GUESSES
from wordle_strategies.dictionary import Dictionary
from wordle_strategies.errors import (
    GuessLimitError,
    InvalidWordError,
    RepeatedGuessError,
)
from wordle_strategies.guessers import Guesser
from wordle_strategies.history import ScoreList
from wordle_strategies.score_cache import Scorer
from wordle_strategies.words import decode, encode

rootlog = logging.getLogger(__name__)


def solve(dictionary: Dictionary,
          guesser: Guesser,
          actual: int,
          opener: int = encode(DEFAULT_OPENER),
          mode: Mode = DEFAULT_MODE,
          scorer: Optional[Scorer] = None,
          guess_limit: int = MAX_SOLVE_GUESSES,
          log: logging.Logger = None) -> ScoreList:
    """
    Solves for the (encoded) word ``actual``, starting with ``opener``, and
    returns the history of guesses including the final correct one.
    """
    scorer = scorer or DEFAULT_SCORER
    if not dictionary.is_guess_word(opener):
        raise InvalidWordError(
            f"Opener {decode(opener)} is not in the guess list"
        )
    if not dictionary.is_solution_word(actual):
        raise InvalidWordError(
            f"{decode(actual)} is not in the solution list"
        )
    initial = ScoreList.EMPTY.plus(opener, scorer.score(opener, actual))
    return solve_from(dictionary, guesser, actual, initial,
                      mode=mode, scorer=scorer, guess_limit=guess_limit,
                      log=log)


def solve_from(dictionary: Dictionary,
               guesser: Guesser,
               actual: int,
               scores: ScoreList,
               mode: Mode = DEFAULT_MODE,
               scorer: Optional[Scorer] = None,
               guess_limit: int = MAX_SOLVE_GUESSES,
               log: logging.Logger = None) -> ScoreList:
    """
    Continues a game from the history ``scores`` until it is solved.

    Raises:
        RepeatedGuessError: if the strategy suggests a word already guessed
        GuessLimitError: if we reach ``guess_limit`` guesses without solving
        NoCandidateError: from the strategy, if it has nothing to suggest
    """
    log = log or rootlog
    scorer = scorer or DEFAULT_SCORER
    while not scores.solved():
        if scores.size() >= guess_limit:
            raise GuessLimitError(
                f"Not solved {decode(actual)} after {scores.size()} guesses: "
                f"{scores}"
            )
        candidates = CandidateSet(dictionary, scores, mode, scorer)
        guess = guesser(candidates)[0]
        if scores.contains_word(guess):
            raise RepeatedGuessError(
                f"With scores {scores}, guessed {decode(guess)}"
            )
        scores = scores.plus(guess, scorer.score(guess, actual))
        log.debug(f"... for word {decode(actual)}: {scores}")
    return scores
