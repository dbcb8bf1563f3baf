"""
Candidate filtering given game feedback.

Given:
  - the current candidates (a subsequence of the dictionary)
  - one observation (guess, pattern), or a whole history of them

Return:
  - the candidates that would have produced exactly that feedback,
    in their original order.

An empty result is legal: it means the dictionary cannot explain the
feedback (e.g. the secret is not in the word list). Callers turn that into
a game-level outcome, not a crash.
"""

from typing import Iterable, Tuple

from .scoring import score

# History is a sequence of (guess, pattern) tuples produced by the engine.
History = Iterable[Tuple[str, str]]  # (guess, pattern)


def filter_candidates(candidates: Iterable[str], guess: str, observed: str) -> Tuple[str, ...]:
    """
    Keep only the words `w` with score(guess, w) == observed.

    Re-applying the same observation is a no-op, and the result is never
    larger than the input.
    """
    _score = score
    return tuple(w for w in candidates if _score(guess, w) == observed)


def filter_history(words: Iterable[str], history: History) -> Tuple[str, ...]:
    """
    Keep only words that reproduce every recorded (guess, pattern) pair.

    Used to rebuild a candidate set from scratch (e.g. from CLI input).
    """
    out = tuple(words)
    for guess, patt in history:
        if not out:
            break
        out = filter_candidates(out, guess, patt)
    return out
