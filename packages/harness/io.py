"""
I/O utilities for simulation runs.

Responsibilities:
- write_csv:      flatten per-game results into a tidy CSV (one row per game).
- write_manifest: dump a JSON manifest with config, dictionary report, summary.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Patterns are prefixed with an apostrophe to keep Excel from interpreting
  strings like "-GYY-" as formulas (which would display as #NAME?).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def _excel_safe_pattern(patt: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "-GYY-" -> "'-GYY-"
    """
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str, max_turns: int, N: int, metric: str = "") -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      metric, N, answer, success, state, guesses, remaining, time_ms,
      guess_1, patt_1, ..., guess_max_turns, patt_max_turns

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["metric", "N", "answer", "success", "state", "guesses", "remaining", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "metric": metric,
                "N": N,
                "answer": r["answer"],
                "success": r["success"],
                "state": r.get("state", ""),
                "guesses": r["guesses"],
                "remaining": r.get("remaining", ""),
                "time_ms": round(float(r["time_ms"]), 3),
            }

            # Expand history into fixed columns (Excel-safe patterns)
            hist = r.get("history", [])
            for i in range(1, max_turns + 1):
                if i <= len(hist):
                    g, patt = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"patt_{i}"] = _excel_safe_pattern(patt)
                else:
                    row[f"guess_{i}"] = ""
                    row[f"patt_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest for a run.

    Typical keys:
      - run_id, git_commit
      - config: solver configuration + CLI args
      - dictionary: output of datasets.validate_wordlist(...) and digest
      - opening: the opening guess and its score
      - summary: output of harness.summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
