from __future__ import annotations

from packages.engine import Dictionary
from .config import SolverConfig
from .scorer import (
    StrategyResult, better, get_metric, get_metric_ids, partition, pick_best,
    rank_key, register_metric, score_guess,
)
from .search import StrategySearch, rank_chunk
from .cache import OpeningCache
from .session import GuessRecord, SessionState, SolverSession, WORDLE_MAX_TURNS


def create_solver(dictionary: Dictionary, config: SolverConfig | None = None):
    """
    Factory: build the (search, opening cache) pair sessions are created from.

    The caller owns both and should close the search when done.
    """
    config = config or SolverConfig(word_length=dictionary.N)
    search = StrategySearch(dictionary, config)
    return search, OpeningCache(search, store_path=config.store_path)


__all__ = [
    "SolverConfig", "StrategyResult", "StrategySearch", "OpeningCache",
    "SolverSession", "SessionState", "GuessRecord", "WORDLE_MAX_TURNS",
    "score_guess", "partition", "better", "pick_best", "rank_key", "rank_chunk",
    "register_metric", "get_metric", "get_metric_ids", "create_solver",
]
