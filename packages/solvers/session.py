"""
One game's worth of solver state.

A session owns its candidate set and guess history; nothing else touches
them. The game loop drives it:

    s = SolverSession(search, opening)
    while not s.state.is_terminal:
        guess = s.suggest()
        s.record(guess, feedback_from_game(guess))

Candidates only ever shrink, and there is no undo.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from packages.engine import (
    InvalidState, filter_candidates, is_solved, normalize_word, parse_pattern,
)
from .cache import OpeningCache
from .search import StrategySearch

logger = logging.getLogger(__name__)

# Single source of truth for Wordle turn budget.
WORDLE_MAX_TURNS = 6


class SessionState(enum.Enum):
    ACTIVE = "active"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    CONTRADICTION = "contradiction"  # no dictionary word fits the feedback

    @property
    def is_terminal(self) -> bool:
        return self is not SessionState.ACTIVE


@dataclass(frozen=True)
class GuessRecord:
    guess: str
    pattern: str


class SolverSession:
    def __init__(self, search: StrategySearch, opening: Optional[OpeningCache] = None,
                 max_turns: int = WORDLE_MAX_TURNS):
        if max_turns < 1:
            raise ValueError(f"max_turns must be >= 1; got {max_turns}")
        if opening is not None and opening.search is not search:
            raise ValueError("opening cache was built for a different search")
        self.search = search
        self.opening = opening
        self.max_turns = int(max_turns)
        self._candidates: Tuple[str, ...] = search.dictionary.words
        self._history: List[GuessRecord] = []
        self._state = SessionState.ACTIVE

    # ---- read accessors (display only) ----
    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def candidates(self) -> Tuple[str, ...]:
        return self._candidates

    @property
    def remaining(self) -> int:
        return len(self._candidates)

    @property
    def history(self) -> Tuple[GuessRecord, ...]:
        return tuple(self._history)

    @property
    def turn(self) -> int:
        """1-based number of the next guess."""
        return len(self._history) + 1

    @property
    def turns_left(self) -> int:
        return max(0, self.max_turns - len(self._history))

    def _require_active(self, op: str) -> None:
        if self._state.is_terminal:
            raise InvalidState(f"cannot {op}: session is {self._state.value}")

    # ---- operations ----
    def suggest(self) -> str:
        """Next guess to play: the cached opening on turn 1, else a fresh search."""
        self._require_active("suggest")
        if not self._history:
            if self.opening is not None:
                return self.opening.best_opening_guess()
        return self.search.best_guess(self._candidates).guess

    def record(self, guess: str, pattern: str) -> SessionState:
        """
        Apply real feedback from the game and move to the next state.

        The guess need not be a dictionary word. Returns the new state.
        """
        self._require_active("record")
        N = self.search.dictionary.N
        guess = normalize_word(guess, N)
        pattern = parse_pattern(pattern, N)

        self._history.append(GuessRecord(guess, pattern))
        before = len(self._candidates)
        self._candidates = filter_candidates(self._candidates, guess, pattern)

        if is_solved(pattern):
            self._state = SessionState.SOLVED
        elif not self._candidates:
            self._state = SessionState.CONTRADICTION
        elif len(self._history) >= self.max_turns:
            self._state = SessionState.EXHAUSTED

        logger.debug("turn %d: %s %s -> %d/%d candidates (%s)",
                     len(self._history), guess, pattern, len(self._candidates), before,
                     self._state.value)
        return self._state
