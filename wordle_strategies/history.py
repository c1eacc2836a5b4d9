"""
The history of a game: the guesses made so far and the score each received.

A :class:`ScoreList` is a persistent singly-linked list, newest first. Adding
a guess with :meth:`ScoreList.plus` returns a new list whose tail is the old
one; nothing is ever modified, so several games can branch from a common
prefix (for example, to compare strategies from the same opener).
"""

from typing import Iterator, List, Optional, Tuple

from wordle_strategies.constants import BITS_PER_LETTER, LETTER_FIELD, WORDLEN
from wordle_strategies.dictionary import Dictionary
from wordle_strategies.score import SOLVED, Score, score_code
from wordle_strategies.words import decode, letter_at


class ScoreList:
    """
    Guesses and their scores. Use :data:`ScoreList.EMPTY` to start, and
    :meth:`plus` to extend.
    """
    __slots__ = ("previous", "guess", "score", "_size")

    EMPTY = None  # type: ScoreList  # assigned below

    def __init__(self,
                 previous: Optional["ScoreList"] = None,
                 guess: Optional[int] = None,
                 score: Optional[Score] = None) -> None:
        """
        Args:
            previous: the history before this guess, or ``None`` for the
                empty history
            guess: the encoded word guessed
            score: the score it received
        """
        self.previous = previous
        self.guess = guess
        self.score = score
        self._size = 0 if previous is None else previous._size + 1

    def plus(self, guess: int, score: Score) -> "ScoreList":
        """
        A new history: this one, followed by ``guess`` scoring ``score``.
        """
        return ScoreList(self, guess, score)

    # -------------------------------------------------------------------------
    # Traversal
    # -------------------------------------------------------------------------

    def _newest_first(self) -> Iterator["ScoreList"]:
        node = self
        while node.previous is not None:
            yield node
            node = node.previous

    def entries(self) -> List[Tuple[int, Score]]:
        """
        (guess, score) pairs, oldest first.
        """
        return [(n.guess, n.score) for n in self._newest_first()][::-1]

    def guesses(self) -> List[int]:
        return [guess for guess, _ in self.entries()]

    # -------------------------------------------------------------------------
    # Questions
    # -------------------------------------------------------------------------

    def consistent_with(self, word: int) -> bool:
        """
        Could ``word`` be the solution? That is, would it have produced every
        score we have seen?
        """
        return all(
            score_code(node.guess, word) == node.score.slots
            for node in self._newest_first()
        )

    def allowed_in_hard_mode(self, word: int) -> bool:
        """
        May ``word`` be guessed in hard mode? Any letter that has been
        revealed must be used: a green letter at the same position, and an
        ochre letter somewhere. If the same letter was ochre twice in a
        guess, it must appear twice (in positions not already taken by green
        letters). Grey letters don't matter, nor does it matter if an ochre
        letter is reused at the position where it was ochre; so this is
        weaker than :meth:`consistent_with`.
        """
        return all(
            node._allows_in_hard_mode(word)
            for node in self._newest_first()
        )

    def _allows_in_hard_mode(self, word: int) -> bool:
        green_mask = self.score.green_mask
        if (self.guess & green_mask) != (word & green_mask):
            return False
        scratch = word & ~green_mask
        ochre_mask = self.score.ochre_mask
        for pos in range(WORDLEN):
            if not letter_at(ochre_mask, pos):
                continue
            letter = letter_at(self.guess, pos)
            for other in range(WORDLEN):
                if letter_at(scratch, other) == letter:
                    scratch &= ~(LETTER_FIELD << (other * BITS_PER_LETTER))
                    break
            else:
                return False
        return True

    def solved(self) -> bool:
        """
        Was the most recent guess correct?
        """
        return self.score is not None and self.score == SOLVED

    def size(self) -> int:
        """
        Number of guesses made.
        """
        return self._size

    def __len__(self) -> int:
        return self._size

    def contains_word(self, word: int) -> bool:
        return any(node.guess == word for node in self._newest_first())

    def possible(self, dictionary: Dictionary) -> Tuple[int, ...]:
        """
        The solution words still consistent with everything so far.
        """
        return tuple(
            w for w in dictionary.solution_words if self.consistent_with(w)
        )

    # -------------------------------------------------------------------------
    # Displays and string representations
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        """
        E.g. ``plaid:-/--- tuner:--+-/ ...``
        """
        return " ".join(
            f"{decode(guess)}:{score}" for guess, score in self.entries()
        )

    def __repr__(self) -> str:
        return f"ScoreList({str(self)!r})"

    def colourful_str(self) -> str:
        """
        As for ``str()``, but with colours. (This leaves a colour residue in
        logs.)
        """
        return " ".join(
            score.colourful_str(guess) for guess, score in self.entries()
        )


ScoreList.EMPTY = ScoreList()
