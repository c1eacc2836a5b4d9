"""
Where we stand at a given point in a game: which solutions are still possible,
and which words we may guess next.
"""

from enum import Enum
import logging
from typing import List, Optional

from wordle_strategies.dictionary import Dictionary
from wordle_strategies.history import ScoreList
from wordle_strategies.score_cache import BucketSizer, Scorer

rootlog = logging.getLogger(__name__)


class Mode(Enum):
    """
    Which words may be guessed.

    - NORMAL: the normal Wordle mode, where any guess in the dictionary is
      allowed.

    - HARD: the hard Wordle mode, where any letter that has been revealed
      must be used. A green letter must be reused at the same position; an
      ochre letter must be reused somewhere, and if the same letter was ochre
      twice, it must be used twice.

    - CONSISTENT: guesses must be consistent with all previous scores. This
      is stricter than HARD, because previous scores tell you other things:
      grey letters are not in the word, and ochre letters are not at the
      position where they were ochre. Any valid consistent-mode guess is also
      a valid hard-mode guess, but not vice versa.
    """
    NORMAL = "normal"
    HARD = "hard"
    CONSISTENT = "consistent"


DEFAULT_MODE = Mode.HARD

DEFAULT_SCORER = Scorer()


class CandidateSet:
    """
    The solutions still possible, and the guesses allowed, given a dictionary,
    a history, and a mode.
    """
    def __init__(self,
                 dictionary: Dictionary,
                 scores: ScoreList,
                 mode: Mode = DEFAULT_MODE,
                 scorer: Optional[Scorer] = None) -> None:
        self.dictionary = dictionary
        self.scores = scores
        self.mode = mode
        self.scorer = scorer or DEFAULT_SCORER
        self.possible_solutions = scores.possible(dictionary)
        self.possible_set = frozenset(self.possible_solutions)
        if mode == Mode.NORMAL:
            self.allowed_guesses = dictionary.guess_words
        elif mode == Mode.HARD:
            self.allowed_guesses = tuple(
                w for w in dictionary.guess_words
                if scores.allowed_in_hard_mode(w)
            )
        elif mode == Mode.CONSISTENT:
            self.allowed_guesses = tuple(
                w for w in dictionary.guess_words
                if scores.consistent_with(w)
            )
        else:
            raise AssertionError(f"bug: unknown mode {mode!r}")
        self._bucket_sizer = None  # type: Optional[BucketSizer]
        rootlog.debug(f"After {scores.size()} guess(es): "
                      f"{self.n_possible} possible solution(s), "
                      f"{len(self.allowed_guesses)} allowed guess(es) "
                      f"in {mode.value} mode")

    @property
    def n_possible(self) -> int:
        return len(self.possible_solutions)

    def is_possible(self, word: int) -> bool:
        """
        Is this word one of the remaining possible solutions?
        """
        return word in self.possible_set

    def bucket_sizes(self, guess: int) -> List[int]:
        """
        Sizes of the groups into which ``guess`` would split the possible
        solutions, by the score each would give.
        """
        if self._bucket_sizer is None:
            self._bucket_sizer = self.scorer.partitioner(
                self.possible_solutions
            )
        return self._bucket_sizer(guess)
