"""
Small dictionaries for testing, small enough to work out results by hand.
"""

from typing import List

from wordle_strategies.dictionary import Dictionary
from wordle_strategies.words import encode

# Three words differing only in the last letter. From any opener, the total
# number of guesses to solve all three is 1 + 2 + 3 = 6, with a maximum of 3,
# whichever strategy is used.
ABC_WORDS = ["abcde", "abcdf", "abcdg"]

# Real words, with plenty of shared letters.
WORDS = [
    "tangy", "angst", "atone", "lurid", "natty", "tanty", "giant", "aunty",
    "tawny", "otter", "taunt", "tapir", "crane", "cloud", "local", "there",
    "pause", "eerie", "honor", "humor",
]
SOLUTIONS = [
    "tangy", "angst", "atone", "natty", "giant", "aunty", "tawny", "taunt",
    "crane", "cloud", "pause", "humor",
]


def codes(words: List[str]) -> List[int]:
    return [encode(w) for w in words]


def make_abc_dictionary() -> Dictionary:
    return Dictionary(codes(ABC_WORDS), codes(ABC_WORDS))


def make_word_dictionary() -> Dictionary:
    return Dictionary(codes(WORDS), codes(SOLUTIONS))


# Guesses needed for each word of SOLUTIONS, from opener "crane", in hard
# mode. Worked out by hand. Minimax and the others break ties differently
# after "crane" leaves {tangy, angst, natty, aunty} or {tawny, taunt}.
CRANE_MINIMAX_COUNTS = {
    "tangy": 3, "angst": 3, "atone": 2, "natty": 3, "giant": 2, "aunty": 2,
    "tawny": 3, "taunt": 2, "crane": 1, "cloud": 2, "pause": 2, "humor": 2,
}
CRANE_SUM_OF_SQUARES_COUNTS = {
    "tangy": 2, "angst": 3, "atone": 2, "natty": 3, "giant": 2, "aunty": 3,
    "tawny": 2, "taunt": 3, "crane": 1, "cloud": 2, "pause": 2, "humor": 2,
}
CRANE_ENTROPY_COUNTS = CRANE_SUM_OF_SQUARES_COUNTS
