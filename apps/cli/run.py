# apps/cli/run.py
"""
CLI entry point for evaluating the solver over a dictionary.

This script:
  1) Validates the dictionary (prints counts + SHA, refuses invalid lines).
  2) Builds the strategy search and computes (or loads) the opening guess.
  3) Plays every dictionary word (or a seeded sample) as the secret with a
     live progress indicator and writes:
       - CSV:  per-case results + guess/pattern history columns
       - JSON: manifest with config, dictionary report, opening, summary
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from packages.datasets import load_dictionary, pretty_summary, validate_wordlist
from packages.harness import run_case, summarize
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from packages.solvers import SolverConfig, create_solver, get_metric_ids

MAX_TURNS = 6  # Wordle hard limit (kept here to mirror session constant)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordle solver — evaluate over a dictionary")
    ap.add_argument("--dictionary", default="packages/datasets/data/words_5.txt",
                    help="path to the word list (one word per line)")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--metric", default="entropy", choices=get_metric_ids(),
                    help="guess metric")
    ap.add_argument("--workers", type=int, help="parallel workers (default: CPU count)")
    ap.add_argument("--chunk-size", type=int, default=256,
                    help="dictionary words per parallel task")
    ap.add_argument("--executor", choices=["process", "thread"], default="process")
    ap.add_argument("--store", help="JSON file caching opening guesses across runs")
    ap.add_argument("--max-turns", type=int, default=MAX_TURNS)
    ap.add_argument("--sample", type=int,
                    help="run only a subset of secrets (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv=None):
    """
    Parse CLI args, validate the dictionary, run the batch with progress, and write outputs.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # 1) Validate dictionary and print a one-liner summary (counts, SHA)
    rep = validate_wordlist(args.N, args.dictionary)
    print(pretty_summary(rep))
    if not rep["words"]["exists"] or rep["words"]["invalid_lines"] or not rep["words"]["count"]:
        raise SystemExit("Dictionary failed validation; fix it before running.")

    dictionary = load_dictionary(args.dictionary, N=args.N)
    config = SolverConfig(
        word_length=args.N,
        max_turns=args.max_turns,
        metric=args.metric,
        workers=args.workers,
        chunk_size=args.chunk_size,
        executor=args.executor,
        store_path=args.store,
    )

    # 2) Cases (deterministic sample by seed)
    if args.sample and args.sample < len(dictionary):
        pool = list(dictionary)
        random.Random(args.seed).shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = list(dictionary)
    total = len(cases)

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    search, opening = create_solver(dictionary, config)
    with search:
        # 3) Opening guess: the one O(n^2) step, shared by every game below
        t0 = time.time()
        first = opening.opening()
        print(f"Opening guess: {first.guess} ({config.metric}={first.score:.4f}, "
              f"{time.time() - t0:.1f}s)")

        results = []
        start = time.time()
        last_print = 0.0
        iterator = tqdm(cases, ncols=80, desc="Solving", unit="game") if mode == "bar" else cases

        # 4) Run batch with live progress
        for idx, secret in enumerate(iterator, 1):
            results.append(run_case(search, secret, opening=opening, max_turns=config.max_turns))

            if mode == "plain":
                now = time.time()
                if (now - last_print >= 1.0) or (idx == total):
                    elapsed = now - start
                    rate = (idx / elapsed) if elapsed > 0 else 0.0
                    remaining = (total - idx) / rate if rate > 0 else 0.0
                    pct = 100.0 * idx / max(1, total)
                    sys.stderr.write(
                        f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                    )
                    sys.stderr.flush()
                    last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    summary = summarize(results, max_turns=config.max_turns)

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=config.max_turns, N=args.N, metric=config.metric)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": {**vars(args), "solver": config.as_dict()},
        "dictionary": {**rep, "digest": dictionary.digest},
        "opening": {"guess": first.guess, "score": first.score},
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Solved {summary['solved']}/{summary['num_cases']} "
          f"({100.0 * summary['success_rate']:.1f}%), "
          f"mean {summary['mean_guesses']:.2f} guesses")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
