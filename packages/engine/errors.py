"""
Exception types shared by the engine and the solvers.

An empty candidate set is NOT an error: sessions report it as the
CONTRADICTION state so callers can show "answer not in dictionary".
"""


class WordleError(Exception):
    """Base class for every error raised by this project."""


class MalformedWord(WordleError, ValueError):
    """A word is not exactly N letters a–z."""


class MalformedPattern(WordleError, ValueError):
    """A feedback pattern has the wrong length or an unknown tag."""


class InvalidState(WordleError, RuntimeError):
    """An operation needing an ACTIVE session was called on a finished one."""


class SearchAborted(WordleError, RuntimeError):
    """A parallel worker failed; no partial strategy is returned."""
