"""
Opening-guess cache.

The opening guess depends only on the dictionary and the metric, and it is
the expensive O(n^2) search, so it is computed once per process and shared by
every session that is handed this object. There is no module-level instance:
build one next to your StrategySearch and pass it in.

Optionally the result is also kept in a small JSON store on disk, keyed by
"<dictionary sha256>:<metric>", so later processes with the same word list
skip the precomputation entirely.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Dict, Optional

from .scorer import StrategyResult
from .search import StrategySearch

logger = logging.getLogger(__name__)


class OpeningCache:
    def __init__(self, search: StrategySearch, store_path: Optional[str] = None):
        self.search = search
        self.store_path = Path(store_path) if store_path else None
        self._lock = threading.Lock()
        self._result: Optional[StrategyResult] = None

    @property
    def key(self) -> str:
        return f"{self.search.dictionary.digest}:{self.search.config.metric}"

    @property
    def is_ready(self) -> bool:
        return self._result is not None

    def opening(self) -> StrategyResult:
        """Compute (first call only) and return the best opening guess."""
        if self._result is not None:
            return self._result
        with self._lock:
            # Another thread may have filled it while we waited.
            if self._result is None:
                self._result = self._load() or self._compute()
        return self._result

    def best_opening_guess(self) -> str:
        return self.opening().guess

    def _compute(self) -> StrategyResult:
        dictionary = self.search.dictionary
        logger.info("No cached opening for wordset %s, computing over %d words",
                    dictionary.digest[:12], len(dictionary))
        result = self.search.best_guess(dictionary.words)
        logger.info("Opening guess is %r (%s=%.4f)",
                    result.guess, self.search.config.metric, result.score)
        self._save(result)
        return result

    # ---- optional JSON store ----
    def _read_store(self) -> Dict:
        if self.store_path is None or not self.store_path.exists():
            return {}
        try:
            data = json.loads(self.store_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable opening store %s: %s", self.store_path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def _load(self) -> Optional[StrategyResult]:
        entry = self._read_store().get(self.key)
        if not entry:
            return None
        if not isinstance(entry, dict):
            logger.warning("Ignoring malformed opening entry %r in %s", entry, self.store_path)
            return None
        dictionary = self.search.dictionary
        guess = entry.get("guess")
        if not isinstance(guess, str) or guess not in dictionary:
            logger.warning("Stored opening %r is not in the dictionary; recomputing", guess)
            return None
        try:
            stored_score = float(entry.get("score", 0.0))
        except (TypeError, ValueError):
            logger.warning("Ignoring stored opening %r with bad score %r", guess, entry.get("score"))
            return None
        logger.info("Using cached opening %r from %s", guess, self.store_path)
        return StrategyResult(
            guess=guess,
            score=stored_score,
            index=dictionary.index_of(guess),
            is_candidate=True,  # every dictionary word is a candidate at turn 1
        )

    def _save(self, result: StrategyResult) -> None:
        if self.store_path is None:
            return
        data = self._read_store()
        data[self.key] = {"guess": result.guess, "score": result.score}
        self.store_path.parent.mkdir(parents=True, exist_ok=True)
        self.store_path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
        logger.info("Cached opening in %s", self.store_path)
