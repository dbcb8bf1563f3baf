"""
Wordle-style scoring (feedback) for a single (guess, secret) pair.

Conventions:
  - 'G'  : green  = correct letter in the correct position   (Exact)
  - 'Y'  : yellow = correct letter in the wrong position     (Present)
  - '-'  : gray   = letter not present (or present fewer times than guessed)

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all greens and counts the remaining (unmatched) letters
     from the secret.
  2) Second pass, left to right, marks yellows only if the letter still has
     remaining count.

Patterns are plain strings, so they hash and sort and can key a dict.
For tables and caches a pattern also has a compact base-3 integer form
(Absent=0, Present=1, Exact=2, position i weighted by 3**i).
"""

from collections import Counter
from typing import Literal

from .errors import MalformedPattern

# Type alias for clarity; each pattern character is one of 'G', 'Y', '-'
PatternChar = Literal["G", "Y", "-"]

EXACT = "G"
PRESENT = "Y"
ABSENT = "-"

_DIGITS = {ABSENT: 0, PRESENT: 1, EXACT: 2}
_TAGS = {v: k for k, v in _DIGITS.items()}

# Extra spellings accepted from people typing feedback in by hand.
_ALIASES = {
    "g": EXACT, "y": PRESENT, "-": ABSENT,
    "b": ABSENT, "x": ABSENT, ".": ABSENT, "_": ABSENT,
}


def score(guess: str, secret: str) -> str:
    """
    Compute Wordle feedback pattern for `guess` against `secret`.

    Both words are expected already normalized (lowercase, same length).

    Examples:
      score("belle", "level") -> "-GYYY"
      score("speed", "abide") -> "--Y-Y"
    """
    assert len(guess) == len(secret), "Guess and secret must be the same length"

    pattern = [ABSENT] * len(guess)

    # Pass 1: mark greens and collect leftover counts from the secret.
    remaining = Counter()
    for i, (g, s) in enumerate(zip(guess, secret)):
        if g == s:
            pattern[i] = EXACT
        else:
            remaining[s] += 1

    # Pass 2: yellows are capped by the letter's leftover multiplicity.
    for i, g in enumerate(guess):
        if pattern[i] == EXACT:
            continue
        if remaining[g] > 0:
            pattern[i] = PRESENT
            remaining[g] -= 1

    return "".join(pattern)


def is_solved(pattern: str) -> bool:
    return bool(pattern) and all(ch == EXACT for ch in pattern)


def encode_pattern(pattern: str) -> int:
    """Pattern -> base-3 integer in [0, 3**N)."""
    code = 0
    for i, ch in enumerate(pattern):
        code += _DIGITS[ch] * 3 ** i
    return code


def decode_pattern(code: int, N: int = 5) -> str:
    """Inverse of encode_pattern for a word length N."""
    if not 0 <= code < 3 ** N:
        raise ValueError(f"pattern code {code} out of range for N={N}")
    tags = []
    for _ in range(N):
        code, digit = divmod(code, 3)
        tags.append(_TAGS[digit])
    return "".join(tags)


def parse_pattern(text: str, N: int = 5) -> str:
    """
    Normalize hand-typed feedback ("gy-b." etc.) into a canonical pattern.

    Raises MalformedPattern on a wrong length or an unknown character.
    """
    raw = text.strip().lower() if isinstance(text, str) else None
    if raw is None or len(raw) != N:
        raise MalformedPattern(f"pattern must have exactly {N} tags: {text!r}")
    try:
        return "".join(_ALIASES[ch] for ch in raw)
    except KeyError as e:
        raise MalformedPattern(f"unknown tag {e.args[0]!r} in pattern {text!r}") from e
