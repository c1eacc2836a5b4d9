"""
Formatting and timing helpers.
"""

from contextlib import contextmanager
import logging
from timeit import default_timer as timer
from typing import Any, Generator, Iterable, Optional, Union

from cardinal_pythonlib.maths_py import round_sf

from wordle_strategies.constants import DEFAULT_SIG_FIGURES

rootlog = logging.getLogger(__name__)

NUMBER_TYPE = Union[None, float, int]


# -----------------------------------------------------------------------------
# Formatting
# -----------------------------------------------------------------------------

def prettylist(words: Iterable[Any]) -> str:
    """
    Formats a wordlist.
    """
    return ", ".join(str(x) for x in words)


def convert_sf(x: NUMBER_TYPE,
               sig_fig: Optional[int] = DEFAULT_SIG_FIGURES) -> NUMBER_TYPE:
    """
    Rounds floats to a certain number of significant figures, for display.
    """
    if x is None or sig_fig is None or isinstance(x, int) or x == 0:
        return x
    return round_sf(x, sig_fig)


# -----------------------------------------------------------------------------
# Timing
# -----------------------------------------------------------------------------

@contextmanager
def time_section(name: str,
                 loglevel: int = logging.DEBUG) -> Generator[None, None, None]:
    start = timer()
    try:
        yield
    finally:
        end = timer()
        rootlog.log(loglevel, f"{name} took {convert_sf(end - start)} s")
