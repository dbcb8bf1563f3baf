"""
Words and the dictionary they come from.

A word is a lowercase string of exactly N letters a–z. The dictionary is the
ordered, de-duplicated, read-only word universe every solver component
shares for the lifetime of a process. Its order matters: it is the final
tie-break when two guesses score the same.

Validation happens once, here, at construction. Everything downstream
(scoring, filtering, search) trusts its inputs.
"""

from __future__ import annotations

import hashlib
from typing import Dict, Iterable, Iterator, Tuple

from .errors import MalformedWord

_ALPHABET = frozenset("abcdefghijklmnopqrstuvwxyz")


def is_valid_word(word, N: int) -> bool:
    """True if `word` is already a clean N-letter a–z token."""
    return isinstance(word, str) and len(word) == N and all(ch in _ALPHABET for ch in word)


def normalize_word(word, N: int = 5) -> str:
    """
    Strip/lowercase `word` and check its shape.

    Raises MalformedWord instead of silently coercing bad input.
    """
    if not isinstance(word, str):
        raise MalformedWord(f"word must be a string, got {type(word).__name__}")
    w = word.strip().lower()
    if not is_valid_word(w, N):
        raise MalformedWord(f"not a {N}-letter a-z word: {word!r}")
    return w


class Dictionary:
    """Immutable ordered word list with O(1) membership and index lookups."""

    __slots__ = ("_words", "_index", "_N", "_digest")

    def __init__(self, words: Iterable[str], N: int = 5):
        ordered = []
        index: Dict[str, int] = {}
        for raw in words:
            w = normalize_word(raw, N)
            if w in index:
                continue  # keep first occurrence
            index[w] = len(ordered)
            ordered.append(w)
        self._words: Tuple[str, ...] = tuple(ordered)
        self._index = index
        self._N = int(N)
        self._digest = None

    @property
    def N(self) -> int:
        return self._N

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    @property
    def digest(self) -> str:
        """SHA-256 of the newline-joined words; keys cached strategies."""
        if self._digest is None:
            h = hashlib.sha256()
            h.update("\n".join(self._words).encode("utf-8"))
            self._digest = h.hexdigest()
        return self._digest

    def index_of(self, word: str) -> int:
        """Dictionary position of `word` (KeyError if absent)."""
        return self._index[word]

    def __contains__(self, word) -> bool:
        return word in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __getitem__(self, i):
        return self._words[i]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Dictionary):
            return NotImplemented
        return self._N == other._N and self._words == other._words

    def __hash__(self) -> int:
        return hash((self._N, self._words))

    def __repr__(self) -> str:
        return f"Dictionary(N={self._N}, size={len(self._words)})"
