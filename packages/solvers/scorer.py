"""
Guess scoring: how well does a guess split the current candidates?

For a guess g, partition the candidates by the feedback pattern each would
produce, then turn the bucket sizes into one number (higher is better).

Metrics (registered by id):
  - entropy        Shannon entropy of the bucket distribution, in bits.
                   Maximal (log2 |candidates|) when every bucket is a singleton.
  - minimax        minus the largest bucket (worst case left after the guess).
  - expected_left  minus the expected number of candidates left.

Ties are broken by `better`: a guess that could itself be the answer beats
one that cannot, then the earlier dictionary word wins.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from packages.engine import score as score_fn

Metric = Callable[[np.ndarray, int], float]

# ---- Metric registry ----
METRICS: Dict[str, Metric] = {}


def register_metric(metric_id: str) -> Callable[[Metric], Metric]:
    """
    Decorator: @register_metric("id") adds a bucket-size metric to METRICS.
    """
    if not metric_id:
        raise ValueError("metric id must be non-empty")

    def deco(fn: Metric) -> Metric:
        if metric_id in METRICS:
            raise ValueError(f"Duplicate metric id: {metric_id}")
        METRICS[metric_id] = fn
        return fn

    return deco


def get_metric(metric_id: str) -> Metric:
    try:
        return METRICS[metric_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown metric: {metric_id}. Available: {get_metric_ids()}") from e


def get_metric_ids() -> List[str]:
    """Sorted for stable CLI help."""
    return sorted(METRICS.keys())


@register_metric("entropy")
def entropy(counts: np.ndarray, total: int) -> float:
    if total <= 1:
        return 0.0
    p = counts[counts > 0] / total
    return float(-(p * np.log2(p)).sum())


@register_metric("minimax")
def minimax(counts: np.ndarray, total: int) -> float:
    if total == 0:
        return 0.0
    return -float(counts.max())


@register_metric("expected_left")
def expected_left(counts: np.ndarray, total: int) -> float:
    if total == 0:
        return 0.0
    return -float((counts * counts).sum()) / total


def partition(guess: str, candidates: Iterable[str]) -> Dict[str, int]:
    """Pattern -> number of candidates that would produce it."""
    buckets: Dict[str, int] = defaultdict(int)
    _score = score_fn
    for ans in candidates:
        buckets[_score(guess, ans)] += 1
    return dict(buckets)


def score_guess(candidates: Sequence[str], guess: str, metric: str = "entropy") -> float:
    """Score one guess against the candidates; pure, never mutates them."""
    fn = get_metric(metric)
    buckets = partition(guess, candidates)
    counts = np.fromiter(buckets.values(), dtype=np.int64, count=len(buckets))
    return fn(counts, len(candidates))


@dataclass(frozen=True)
class StrategyResult:
    """Best guess for one turn. `index` is the guess's dictionary position."""
    guess: str
    score: float
    index: int
    is_candidate: bool


def rank_key(r: StrategyResult, tolerance: float = 1e-9) -> Tuple[float, bool, int]:
    """
    Sort key for results; larger is better.

    Scores are snapped to a grid of width `tolerance` so near-equal scores
    compare equal, then candidate membership, then lower dictionary index.
    Comparing keys is a total order, so any grouping of a fold agrees.
    """
    q = round(r.score / tolerance) if tolerance > 0 else r.score
    return q, r.is_candidate, -r.index


def better(a: StrategyResult, b: Optional[StrategyResult], tolerance: float = 1e-9) -> bool:
    """True if `a` should be preferred over `b`."""
    if b is None:
        return True
    return rank_key(a, tolerance) > rank_key(b, tolerance)


def pick_best(results: Iterable[Optional[StrategyResult]],
              tolerance: float = 1e-9) -> Optional[StrategyResult]:
    """Sequential fold with `better`; None entries are skipped."""
    best = None
    for r in results:
        if r is not None and better(r, best, tolerance):
            best = r
    return best
