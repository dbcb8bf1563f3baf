"""
Simulation harness.

- play_game:  drive one SolverSession against a known secret.
- run_case:   fresh session + play_game for one secret.
- run_batch:  many secrets in sequence (optionally a sample prefix).
- summarize:  success rate and guess-count statistics for a batch.

The game side here is the engine's own `score`, so the whole loop is
offline and deterministic. These functions are UI-agnostic so they can be
reused by a CLI app, a notebook, or tests without changes.
"""

from __future__ import annotations
import time
from typing import Dict, Iterable, List, Optional

import numpy as np

from packages.engine import score
from packages.solvers import (
    OpeningCache, SessionState, SolverSession, StrategySearch, WORDLE_MAX_TURNS,
)


def play_game(session: SolverSession, secret: str) -> Dict:
    """
    Play until the session reaches a terminal state.

    Returns:
        dict with keys:
            answer (str), success (bool), guesses (int), state (str),
            time_ms (float), history (list[(guess, pattern)]),
            remaining (int, candidates left at the end)
    """
    t0 = time.perf_counter()
    while not session.state.is_terminal:
        guess = session.suggest()
        session.record(guess, score(guess, secret))
    dt = (time.perf_counter() - t0) * 1000.0

    history = [(r.guess, r.pattern) for r in session.history]
    return {
        "answer": secret,
        "success": session.state is SessionState.SOLVED,
        "guesses": len(history),
        "state": session.state.value,
        "time_ms": dt,
        "history": history,
        "remaining": session.remaining,
    }


def run_case(
        search: StrategySearch,
        secret: str,
        *,
        opening: Optional[OpeningCache] = None,
        max_turns: int = WORDLE_MAX_TURNS,
) -> Dict:
    """One fresh session against `secret`."""
    session = SolverSession(search, opening, max_turns=max_turns)
    return play_game(session, secret)


def run_batch(
        search: StrategySearch,
        secrets: Iterable[str],
        *,
        opening: Optional[OpeningCache] = None,
        max_turns: int = WORDLE_MAX_TURNS,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    secrets are used to speed up quick experiments.
    """
    pool = list(secrets)
    if sample is not None:
        pool = pool[:sample]
    return [run_case(search, s, opening=opening, max_turns=max_turns) for s in pool]


def summarize(results: List[Dict], max_turns: int = WORDLE_MAX_TURNS) -> Dict:
    """
    Aggregate a batch: success rate, mean guesses over solved games,
    histogram of guesses-to-solve (1..max_turns), and the failed secrets.
    """
    n = len(results)
    solved = [r for r in results if r["success"]]
    turns = np.array([r["guesses"] for r in solved], dtype=np.int64)
    hist = np.bincount(turns, minlength=max_turns + 1)[1:max_turns + 1] if len(turns) else \
        np.zeros(max_turns, dtype=np.int64)
    return {
        "num_cases": n,
        "solved": len(solved),
        "success_rate": (len(solved) / n) if n else 0.0,
        "mean_guesses": float(turns.mean()) if len(turns) else 0.0,
        "distribution": {str(i + 1): int(c) for i, c in enumerate(hist)},
        "failures": [r["answer"] for r in results if not r["success"]],
    }
