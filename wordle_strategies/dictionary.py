"""
Word lists: the words you may guess, and the (smaller) set of words that may
be the solution. Every solution must also be a valid guess.
"""

import logging
from typing import FrozenSet, Iterable, List, Set

from wordle_strategies.constants import WORDLEN
from wordle_strategies.errors import ConfigurationError
from wordle_strategies.words import decode, encode, is_valid_word

rootlog = logging.getLogger(__name__)


# =============================================================================
# Reading word lists
# =============================================================================

def read_words(lines: Iterable[str]) -> List[int]:
    """
    Reads lines and returns the encoded words, in their original order and
    without duplicates. Lines that are not exactly five lowercase letters are
    silently dropped, since dictionary files tend to contain other things.
    """
    words = []  # type: List[int]
    seen = set()  # type: Set[int]
    n_read = 0
    n_dropped = 0
    for line in lines:
        n_read += 1
        word = line.rstrip("\r\n")
        if not is_valid_word(word):
            n_dropped += 1
            continue
        code = encode(word)
        if code not in seen:
            seen.add(code)
            words.append(code)
    rootlog.debug(f"Read {n_read} lines; dropped {n_dropped}; "
                  f"kept {len(words)} distinct words")
    return words


def make_wordlist(from_filename: str,
                  to_filename: str) -> None:
    """
    Reads a dictionary file and creates a list of 5-letter words.
    """
    rootlog.info(f"Reading from {from_filename}")
    rootlog.info(f"Writing to {to_filename}")
    with open(from_filename, "rt") as f:
        words = read_words(line.strip().lower() for line in f)
    with open(to_filename, "wt") as t:
        for code in words:
            t.write(decode(code) + "\n")
    rootlog.info(f"Wrote {len(words)} ({WORDLEN}-letter) words to "
                 f"{to_filename}")


# =============================================================================
# Dictionary
# =============================================================================

class Dictionary:
    """
    The two word lists, encoded. Immutable once built, so it can be shared
    freely between solves and worker processes.
    """
    def __init__(self,
                 guess_words: Iterable[int],
                 solution_words: Iterable[int]) -> None:
        """
        Args:
            guess_words: encoded words that may be guessed
            solution_words: encoded words that may be the answer
        """
        # Tuples keep the file order. Iteration order decides ties between
        # equally good guesses.
        self.guess_words = tuple(dict.fromkeys(guess_words))
        self.solution_words = tuple(dict.fromkeys(solution_words))
        self.guess_set = frozenset(self.guess_words)  # type: FrozenSet[int]
        self.solution_set = frozenset(self.solution_words)  # type: FrozenSet[int]  # noqa
        missing = self.solution_set - self.guess_set
        if missing:
            missing_str = ", ".join(sorted(decode(w) for w in missing))
            raise ConfigurationError(f"Missing words: {missing_str}")

    @classmethod
    def create(cls,
               guess_source: Iterable[str],
               solution_source: Iterable[str]) -> "Dictionary":
        """
        Creates a dictionary from two sources of lines, e.g. open files.
        """
        return cls(read_words(guess_source), read_words(solution_source))

    @classmethod
    def from_files(cls,
                   guess_filename: str,
                   solution_filename: str) -> "Dictionary":
        rootlog.info(f"Reading guess words from {guess_filename}")
        rootlog.info(f"Reading solution words from {solution_filename}")
        with open(guess_filename) as g, open(solution_filename) as s:
            dictionary = cls.create(g, s)
        rootlog.info(f"{dictionary}")
        return dictionary

    def __str__(self) -> str:
        return (f"Dictionary of {len(self.guess_words)} guess words and "
                f"{len(self.solution_words)} solution words")

    def is_guess_word(self, word: int) -> bool:
        return word in self.guess_set

    def is_solution_word(self, word: int) -> bool:
        return word in self.solution_set
