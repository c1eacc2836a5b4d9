"""
Strategies for choosing the next guess.

Each strategy looks at every allowed guess, splits the possible solutions
into buckets by the score that guess would get against each of them, and
costs the guess by the shape of those buckets. The strategies differ only in
the cost function (and, slightly, in how they treat ties):

- minimax: the size of the largest bucket, i.e. how many possibilities would
  remain in the worst case. This is Knuth's criterion for Mastermind.
- sum of squares: the sum of squared bucket sizes, proportional to the
  expected number of possibilities remaining. This is Irving's criterion.
- entropy: the information the guess is expected to yield, i.e. Neuwirth's
  criterion.

When two guesses cost the same, a guess that could itself be the solution is
preferred, since it might win outright.

A strategy is a function taking a :class:`CandidateSet` and returning the
best guesses found, best first.
"""

import logging
from math import fsum, log
from typing import Callable, Dict, List

from wordle_strategies.candidates import CandidateSet
from wordle_strategies.constants import MAX_TIED_GUESSES
from wordle_strategies.errors import NoCandidateError
from wordle_strategies.helpers import convert_sf, prettylist
from wordle_strategies.words import decode

rootlog = logging.getLogger(__name__)

Guesser = Callable[[CandidateSet], List[int]]


# =============================================================================
# Cost functions. Lower is better.
# =============================================================================

def largest_bucket(sizes: List[int]) -> int:
    return max(sizes)


def sum_of_squares(sizes: List[int]) -> int:
    return sum(k * k for k in sizes)


def negative_entropy(sizes: List[int]) -> float:
    """
    We want to maximize (Σ -p_i lg p_i) over all distinct scores, where p_i is
    the proportion k_i/N of possible solutions that get score i. But N is the
    same for every guess being compared, and lg is a constant multiple of ln,
    so it's enough to maximize Σ -k_i ln k_i, i.e. to minimize Σ k_i ln k_i.

    ``fsum`` makes the result independent of the order of the buckets, so that
    guesses with the same bucket sizes tie exactly.
    """
    return fsum(k * log(k) for k in sizes)


# =============================================================================
# Searching
# =============================================================================

def _best_guesses(candidates: CandidateSet,
                  cost_function: Callable[[List[int]], float],
                  keep_ties: bool,
                  name: str) -> List[int]:
    """
    Finds the cheapest allowed guess(es).

    Args:
        candidates: where we stand
        cost_function: maps bucket sizes to a cost
        keep_ties: if false, a single guess is returned, and an equally good
            guess found later replaces it unless it would swap a possible
            solution for an impossible one. If true, the first of a set of
            equally good guesses is kept, followed by up to
            :data:`MAX_TIED_GUESSES` - 1 others.
        name: for logging
    """
    if not candidates.allowed_guesses:
        raise NoCandidateError("Could not find a compatible word to guess")
    if not candidates.possible_solutions:
        raise NoCandidateError(
            f"No solution is consistent with {candidates.scores}"
        )
    best_guesses = []  # type: List[int]
    best_cost = None
    best_is_possible = False
    for guess in candidates.allowed_guesses:
        cost = cost_function(candidates.bucket_sizes(guess))
        is_possible = candidates.is_possible(guess)
        if keep_ties:
            better_tie = is_possible and not best_is_possible
        else:
            better_tie = is_possible or not best_is_possible
        if (best_cost is None or cost < best_cost
                or (cost == best_cost and better_tie)):
            best_guesses = [guess]
            best_cost = cost
            best_is_possible = is_possible
        elif (keep_ties and cost == best_cost
                and is_possible == best_is_possible
                and len(best_guesses) < MAX_TIED_GUESSES):
            best_guesses.append(guess)
    rootlog.debug(
        f"{name}: best cost {convert_sf(best_cost)} "
        f"from {prettylist(decode(g) for g in best_guesses)}"
    )
    return best_guesses


def minimax_guesses(candidates: CandidateSet) -> List[int]:
    """
    Minimizes the largest bucket. Returns a single guess: the last of the
    equally good ones, preferring possible solutions.
    """
    return _best_guesses(candidates, largest_bucket, keep_ties=False,
                         name="minimax")


def sum_of_squares_guesses(candidates: CandidateSet) -> List[int]:
    """
    Minimizes the sum of squared bucket sizes. Returns up to
    :data:`MAX_TIED_GUESSES` equally good guesses.
    """
    return _best_guesses(candidates, sum_of_squares, keep_ties=True,
                         name="sum_of_squares")


def entropy_guesses(candidates: CandidateSet) -> List[int]:
    """
    Maximizes the entropy of the bucket sizes. Returns up to
    :data:`MAX_TIED_GUESSES` equally good guesses.
    """
    return _best_guesses(candidates, negative_entropy, keep_ties=True,
                         name="entropy")


GUESSERS = {
    "minimax": minimax_guesses,
    "sum_of_squares": sum_of_squares_guesses,
    "entropy": entropy_guesses,
}  # type: Dict[str, Guesser]

DEFAULT_GUESSER = "sum_of_squares"
