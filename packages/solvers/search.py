"""
Strategy search: pick the best next guess from the WHOLE dictionary.

Every dictionary word is scored against the current candidates, not only the
candidates themselves, because a word that cannot be the answer can still
split the remaining set well.

This is O(|dictionary| x |candidates|) pattern computations, and O(n^2) for
the opening guess, so the scan is a fork/join:
  1) cut the dictionary into contiguous chunks of `chunk_size` words,
  2) rank each chunk in an independent task -> its local best result,
  3) fold the chunk winners in dictionary order with the same tie-break.

Workers only read their chunk and the candidates and return one value; there
is no shared accumulator and nothing to lock. Because the fold uses the same
total order as a sequential scan, the result does not depend on the number of
workers or the chunk size.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from packages.engine import Dictionary, SearchAborted
from .config import SolverConfig
from .scorer import StrategyResult, better, get_metric, partition, pick_best

logger = logging.getLogger(__name__)


def rank_chunk(words: Sequence[str], start: int, candidates: Sequence[str],
               metric: str, tolerance: float) -> Optional[StrategyResult]:
    """
    Score one contiguous dictionary slice; return its best entry.

    `start` is the dictionary index of words[0] so results carry their global
    position for the tie-break. Module-level so process pools can pickle it.
    """
    fn = get_metric(metric)
    cand_set = frozenset(candidates)
    total = len(candidates)

    best = None
    for offset, guess in enumerate(words):
        buckets = partition(guess, candidates)
        counts = np.fromiter(buckets.values(), dtype=np.int64, count=len(buckets))
        r = StrategyResult(guess, fn(counts, total), start + offset, guess in cand_set)
        if better(r, best, tolerance):
            best = r
    return best


class StrategySearch:
    """
    Dictionary-wide best-guess search with a bounded, lazily created pool.

    Use as a context manager (or call close()) to shut the pool down.
    """

    def __init__(self, dictionary: Dictionary, config: SolverConfig | None = None):
        if not len(dictionary):
            raise ValueError("dictionary is empty")
        self.dictionary = dictionary
        self.config = (config or SolverConfig(word_length=dictionary.N)).validate()
        if self.config.word_length != dictionary.N:
            raise ValueError(
                f"config word_length={self.config.word_length} does not match "
                f"dictionary N={dictionary.N}")
        self._executor: Optional[Executor] = None

    # ---- pool lifecycle ----
    def _get_executor(self) -> Executor:
        if self._executor is None:
            n = self.config.effective_workers
            if self.config.executor == "thread":
                self._executor = ThreadPoolExecutor(max_workers=n)
            else:
                self._executor = ProcessPoolExecutor(max_workers=n)
            logger.debug("started %s pool with %d workers", self.config.executor, n)
        return self._executor

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True, cancel_futures=True)
            self._executor = None

    def __enter__(self) -> "StrategySearch":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ---- search ----
    def chunks(self) -> Iterator[Tuple[int, Tuple[str, ...]]]:
        """Yield (start_index, words) slices covering the dictionary in order."""
        words = self.dictionary.words
        size = self.config.chunk_size
        for start in range(0, len(words), size):
            yield start, words[start:start + size]

    def _use_pool(self, num_candidates: int, num_chunks: int) -> bool:
        if self.config.effective_workers <= 1 or num_chunks <= 1:
            return False
        return len(self.dictionary) * num_candidates >= self.config.parallel_threshold

    def best_guess(self, candidates: Sequence[str]) -> StrategyResult:
        """Return the best guess for `candidates` (must be non-empty)."""
        cands = tuple(candidates)
        if not cands:
            raise ValueError("cannot pick a guess for an empty candidate set")

        metric, tol = self.config.metric, self.config.tolerance
        chunks = list(self.chunks())
        t0 = time.perf_counter()

        if self._use_pool(len(cands), len(chunks)):
            results = self._run_parallel(chunks, cands)
        else:
            results = [rank_chunk(words, start, cands, metric, tol) for start, words in chunks]

        best = pick_best(results, tol)
        logger.debug(
            "best_guess over %d candidates: %s (%s=%.4f) in %.1f ms",
            len(cands), best.guess, metric, best.score, (time.perf_counter() - t0) * 1000.0)
        return best

    def _run_parallel(self, chunks: List[Tuple[int, Tuple[str, ...]]],
                      cands: Tuple[str, ...]) -> List[Optional[StrategyResult]]:
        executor = self._get_executor()
        metric, tol = self.config.metric, self.config.tolerance
        futures = [
            executor.submit(rank_chunk, words, start, cands, metric, tol)
            for start, words in chunks
        ]
        logger.info("scoring %d words x %d candidates in %d chunks",
                    len(self.dictionary), len(cands), len(futures))

        # Collect in submission order so the fold sees dictionary order.
        results: List[Optional[StrategyResult]] = []
        for i, fut in enumerate(futures):
            try:
                results.append(fut.result())
            except Exception as e:
                for f in futures[i + 1:]:
                    f.cancel()
                start = chunks[i][0]
                logger.error("chunk starting at %d failed: %s", start, e)
                raise SearchAborted(f"worker for chunk at index {start} failed") from e
        return results
