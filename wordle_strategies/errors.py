"""
Exceptions raised by the solver.
"""

from typing import Any, Dict, List


class WordleError(Exception):
    """
    Base class for our errors.
    """
    pass


class InvalidWordError(WordleError, ValueError):
    """
    A word is not five lowercase ASCII letters, or is not in the dictionary
    where it needs to be.
    """
    pass


class FormatError(WordleError, ValueError):
    """
    A feedback string is malformed.
    """
    pass


class ConfigurationError(WordleError):
    """
    The word lists are inconsistent: some solution words cannot be guessed.
    """
    pass


class NoCandidateError(WordleError):
    """
    A strategy has nothing to choose from.
    """
    pass


class RepeatedGuessError(WordleError):
    """
    A strategy suggested a word that has already been guessed.
    """
    pass


class GuessLimitError(WordleError):
    """
    A solve went on for longer than we allow.
    """
    pass


class BatchError(WordleError):
    """
    One or more openers failed during a batch run. The others completed.
    """
    def __init__(self,
                 failures: Dict[str, BaseException],
                 results: List[Any] = None) -> None:
        self.failures = failures
        self.results = results or []
        details = "; ".join(
            f"{opener}: {exc!r}" for opener, exc in sorted(failures.items())
        )
        super().__init__(f"{len(failures)} opener(s) failed: {details}")
