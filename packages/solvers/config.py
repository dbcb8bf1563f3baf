from __future__ import annotations

import os
from dataclasses import dataclass, asdict
from typing import Dict, Optional

from .scorer import get_metric_ids

EXECUTORS = ("process", "thread")


@dataclass
class SolverConfig:
    """Centralized solver configuration (CLI flags map onto these fields)."""
    word_length: int = 5
    max_turns: int = 6
    metric: str = "entropy"
    workers: Optional[int] = None     # None -> os.cpu_count()
    chunk_size: int = 256             # dictionary words per parallel task
    executor: str = "process"
    # Below this many pattern computations (guesses x candidates) run inline;
    # pool start-up costs more than it saves on small late-game sets.
    parallel_threshold: int = 200_000
    tolerance: float = 1e-9           # scores closer than this are ties
    store_path: Optional[str] = None  # optional JSON store for opening guesses

    @property
    def effective_workers(self) -> int:
        return self.workers or os.cpu_count() or 1

    def validate(self) -> "SolverConfig":
        if self.word_length < 1:
            raise ValueError(f"word_length must be >= 1; got {self.word_length}")
        if self.max_turns < 1:
            raise ValueError(f"max_turns must be >= 1; got {self.max_turns}")
        if self.metric not in get_metric_ids():
            raise ValueError(f"Unknown metric: {self.metric}. Available: {get_metric_ids()}")
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"workers must be >= 1; got {self.workers}")
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1; got {self.chunk_size}")
        if self.executor not in EXECUTORS:
            raise ValueError(f"executor must be one of {EXECUTORS}; got {self.executor!r}")
        if self.tolerance < 0:
            raise ValueError(f"tolerance must be >= 0; got {self.tolerance}")
        return self

    def as_dict(self) -> Dict:
        return asdict(self)
