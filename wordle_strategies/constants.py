"""
Constants defining the game, our text formats, and defaults.
"""

from multiprocessing import cpu_count
import os
import re

# Paths
THIS_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_OS_DICT = "/usr/share/dict/words"
DEFAULT_GUESS_WORDS = os.path.join(THIS_DIR, "wordledict.txt")
DEFAULT_SOLUTION_WORDS = os.path.join(THIS_DIR, "wordlewords.txt")
DEFAULT_PROGRESS_FILE = os.path.join(
    os.path.expanduser("~"), "wordlestart.txt"
)

# Defining the game
WORDLEN = 5
N_GUESSES = 6
BITS_PER_LETTER = 5
LETTER_FIELD = (1 << BITS_PER_LETTER) - 1  # 31
BITS_PER_COLOUR = 2

# Regular expressions to read from files or the user
WORD_REGEX = re.compile(rf"^[a-z]{{{WORDLEN}}}$")
CHAR_GREY = "-"
CHAR_OCHRE = "/"
CHAR_GREEN = "+"

# Colours and styles for displaying scores, via the ansicolors package
COLOUR_GREY = dict(fg="white", bg="black", style="bold")
COLOUR_OCHRE = dict(fg="white", bg="yellow", style="bold")
COLOUR_GREEN = dict(fg="white", bg="green", style="bold")

# Defaults
DEFAULT_OPENER = "plaid"
MAX_TIED_GUESSES = 10
MAX_SOLVE_GUESSES = 10
DEFAULT_NPROC = cpu_count()
DEFAULT_SIG_FIGURES = 3
DEFAULT_SHOW_THRESHOLD = 20
