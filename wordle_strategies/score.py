"""
Scoring a guess against a solution, and the feedback ("score") type.

A score holds one colour per position, 2 bits each, the first position in
the lowest bits:

- GREY: the letter does not occur in the word, or every occurrence has
  already been accounted for by an earlier match;
- OCHRE: the letter occurs in the word but not at this position;
- GREEN: the letter occurs in the word at this position.

Text format, as used on the command line and in logs: one character per
position, ``-`` for grey, ``/`` for ochre and ``+`` for green, e.g.
``raise:-+---``.
"""

from enum import Enum
from typing import Dict, List

from colors import color  # pip install ansicolors

from wordle_strategies.constants import (
    BITS_PER_COLOUR,
    BITS_PER_LETTER,
    CHAR_GREEN,
    CHAR_GREY,
    CHAR_OCHRE,
    COLOUR_GREEN,
    COLOUR_GREY,
    COLOUR_OCHRE,
    LETTER_FIELD,
    WORDLEN,
)
from wordle_strategies.errors import FormatError
from wordle_strategies.words import decode, encode, letter_bits


# =============================================================================
# Colours
# =============================================================================

class Colour(Enum):
    """
    Possible types of feedback about each character. The values are the
    2-bit codes stored in a :class:`Score`.
    """
    GREY = 0
    OCHRE = 1
    GREEN = 2

    @property
    def plain_str(self) -> str:
        """
        Plain string representation.
        """
        return _COLOUR_TO_CHAR[self]

    @property
    def ansi_params(self) -> Dict[str, str]:
        return _COLOUR_TO_ANSI[self]


_COLOUR_TO_CHAR = {
    Colour.GREY: CHAR_GREY,
    Colour.OCHRE: CHAR_OCHRE,
    Colour.GREEN: CHAR_GREEN,
}
_CHAR_TO_COLOUR = {c: colour for colour, c in _COLOUR_TO_CHAR.items()}
_COLOUR_TO_ANSI = {
    Colour.GREY: COLOUR_GREY,
    Colour.OCHRE: COLOUR_OCHRE,
    Colour.GREEN: COLOUR_GREEN,
}

_GREEN = Colour.GREEN.value
_OCHRE = Colour.OCHRE.value
_COLOUR_FIELD = (1 << BITS_PER_COLOUR) - 1


# =============================================================================
# Scoring
# =============================================================================

def score_code(attempt: int, actual: int) -> int:
    """
    Scores an encoded guess against an encoded solution, returning the packed
    colours.

    Exact matches are found first, and both copies of the letter are removed
    from further consideration. Then each remaining letter of the attempt, in
    order, is marked ochre if that letter remains anywhere in the actual word,
    consuming one occurrence. So if you guess a word with two Ts against a
    word with one T in some other place, only the first T gets the ochre
    marker.
    """
    if not (letter_bits(attempt) & letter_bits(actual)):
        return 0
    slots = 0
    for i in range(WORDLEN):
        shift = i * BITS_PER_LETTER
        if ((attempt >> shift) & LETTER_FIELD) == \
                ((actual >> shift) & LETTER_FIELD):
            slots |= _GREEN << (i * BITS_PER_COLOUR)
            mask = ~(LETTER_FIELD << shift)
            attempt &= mask
            actual &= mask
    for i in range(WORDLEN):
        if attempt == 0 or actual == 0:
            break
        attempt_shift = i * BITS_PER_LETTER
        attempt_c = (attempt >> attempt_shift) & LETTER_FIELD
        if attempt_c == 0:
            continue
        for j in range(WORDLEN):
            actual_shift = j * BITS_PER_LETTER
            if ((actual >> actual_shift) & LETTER_FIELD) == attempt_c:
                slots |= _OCHRE << (i * BITS_PER_COLOUR)
                attempt &= ~(LETTER_FIELD << attempt_shift)
                actual &= ~(LETTER_FIELD << actual_shift)
                break
    return slots


class Score:
    """
    Feedback for one guess. Immutable; equality and hashing are by the packed
    integer.
    """
    __slots__ = ("slots",)

    def __init__(self, slots: int) -> None:
        self.slots = slots

    # -------------------------------------------------------------------------
    # Creation
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, attempt: int, actual: int) -> "Score":
        """
        Score for an encoded attempt against an encoded solution.
        """
        return cls(score_code(attempt, actual))

    @classmethod
    def of_words(cls, attempt: str, actual: str) -> "Score":
        """
        As for :meth:`of`, but for plain words.
        """
        return cls.of(encode(attempt), encode(actual))

    @classmethod
    def parse(cls, text: str) -> "Score":
        """
        Reads our text format, e.g. ``"-/+--"``. Raises :exc:`FormatError`
        for anything else.
        """
        if len(text) != WORDLEN:
            raise FormatError(
                f"Feedback should have length {WORDLEN}, not {len(text)}: "
                f"{text!r}"
            )
        slots = 0
        for i, c in enumerate(text):
            try:
                colour = _CHAR_TO_COLOUR[c]
            except KeyError:
                raise FormatError(
                    f"Bad character {c!r} in feedback {text!r}; use "
                    f"{CHAR_GREY!r} (absent), {CHAR_OCHRE!r} (present, wrong "
                    f"location), {CHAR_GREEN!r} (correct location)"
                ) from None
            slots |= colour.value << (i * BITS_PER_COLOUR)
        return cls(slots)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Score) and self.slots == other.slots

    def __hash__(self) -> int:
        return self.slots

    # -------------------------------------------------------------------------
    # Per-position information
    # -------------------------------------------------------------------------

    def colour_at(self, pos: int) -> Colour:
        return Colour((self.slots >> (pos * BITS_PER_COLOUR)) & _COLOUR_FIELD)

    def colours(self) -> List[Colour]:
        return [self.colour_at(pos) for pos in range(WORDLEN)]

    def matches(self) -> int:
        """
        Number of positions that are at least ochre.
        """
        return sum(1 for c in self.colours() if c != Colour.GREY)

    def exact_matches(self) -> int:
        """
        Number of green positions.
        """
        return sum(1 for c in self.colours() if c == Colour.GREEN)

    def _mask_for(self, colour: Colour) -> int:
        mask = 0
        for pos in range(WORDLEN):
            if self.colour_at(pos) == colour:
                mask |= LETTER_FIELD << (pos * BITS_PER_LETTER)
        return mask

    @property
    def green_mask(self) -> int:
        """
        Mask over an encoded word selecting the letter fields that were green.
        """
        return self._mask_for(Colour.GREEN)

    @property
    def ochre_mask(self) -> int:
        """
        Mask over an encoded word selecting the letter fields that were ochre.
        """
        return self._mask_for(Colour.OCHRE)

    # -------------------------------------------------------------------------
    # Displays and string representations
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return "".join(c.plain_str for c in self.colours())

    def __repr__(self) -> str:
        return f"Score({str(self)!r})"

    def colourful_str(self, word: int) -> str:
        """
        The (encoded) word that was guessed, with ANSI colours for each
        letter's feedback.
        """
        return "".join(
            color(letter, **colour.ansi_params)
            for letter, colour in zip(decode(word), self.colours())
        )


SOLVED = Score.parse(CHAR_GREEN * WORDLEN)
