"""
Ways of scoring guesses in bulk.

A *scorer* has two jobs:

- ``score(attempt, actual)``: the :class:`Score` for a single pair;
- ``partitioner(actuals)``: a function that, given a guess, returns the sizes
  of the buckets into which that guess splits ``actuals`` (words in the same
  bucket give identical feedback).

:class:`Scorer` computes everything on the fly. :class:`ScoreCache`
precomputes the scores of every (guess, solution) pair into a Numpy matrix,
trading memory (2 bytes per pair) for speed. Build it once and pass it to
whatever needs it; it is read-only thereafter.
"""

from collections import Counter
import logging
from typing import Callable, Dict, List, Sequence

import numpy as np

from wordle_strategies.dictionary import Dictionary
from wordle_strategies.helpers import time_section
from wordle_strategies.score import Score, score_code

rootlog = logging.getLogger(__name__)

BucketSizer = Callable[[int], List[int]]

# Packed scores use 2 bits for each of 5 positions.
N_SCORE_CODES = 1 << 10


class Scorer:
    """
    Scores directly, without caching.
    """
    def score(self, attempt: int, actual: int) -> Score:
        return Score.of(attempt, actual)

    def partitioner(self, actuals: Sequence[int]) -> BucketSizer:
        def bucket_sizes(attempt: int) -> List[int]:
            return list(Counter(
                score_code(attempt, actual) for actual in actuals
            ).values())
        return bucket_sizes


class ScoreCache(Scorer):
    """
    Precomputed scores for every guess word against every solution word of a
    dictionary.
    """
    def __init__(self, dictionary: Dictionary) -> None:
        self.guess_index = {
            w: i for i, w in enumerate(dictionary.guess_words)
        }  # type: Dict[int, int]
        self.solution_index = {
            w: i for i, w in enumerate(dictionary.solution_words)
        }  # type: Dict[int, int]
        n_guesses = len(dictionary.guess_words)
        n_solutions = len(dictionary.solution_words)
        rootlog.info(f"Precomputing score matrix ({n_guesses} guesses x "
                     f"{n_solutions} solutions)")
        with time_section("Score matrix", loglevel=logging.INFO):
            matrix = np.zeros((n_guesses, n_solutions), dtype=np.uint16)
            for i, attempt in enumerate(dictionary.guess_words):
                matrix[i] = [
                    score_code(attempt, actual)
                    for actual in dictionary.solution_words
                ]
        matrix.setflags(write=False)
        self.matrix = matrix

    def score(self, attempt: int, actual: int) -> Score:
        return Score(int(
            self.matrix[self.guess_index[attempt], self.solution_index[actual]]
        ))

    def partitioner(self, actuals: Sequence[int]) -> BucketSizer:
        columns = np.fromiter(
            (self.solution_index[a] for a in actuals),
            dtype=np.intp,
            count=len(actuals),
        )

        def bucket_sizes(attempt: int) -> List[int]:
            row = self.matrix[self.guess_index[attempt], columns]
            counts = np.bincount(row, minlength=N_SCORE_CODES)
            return counts[counts > 0].tolist()

        return bucket_sizes
