# apps/cli/suggest.py
"""
Suggest the next guess from feedback recorded so far.

Example:
  python -m apps.cli.suggest --dictionary words.txt crane:-Y--G plumb:-----

Each positional argument is GUESS:PATTERN where PATTERN uses G (green),
Y (yellow) and - (gray); b/x/./_ are accepted for gray too.
"""

from __future__ import annotations

import argparse
import logging
import sys

from packages.datasets import load_dictionary
from packages.engine import WordleError
from packages.solvers import SolverConfig, SolverSession, create_solver, get_metric_ids


def _parse_observation(text: str):
    guess, sep, patt = text.partition(":")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected GUESS:PATTERN, got {text!r}")
    return guess, patt


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordle solver — suggest the next guess")
    ap.add_argument("observations", nargs="*", type=_parse_observation,
                    help="GUESS:PATTERN pairs in the order they were played")
    ap.add_argument("--dictionary", default="packages/datasets/data/words_5.txt")
    ap.add_argument("--N", type=int, default=5)
    ap.add_argument("--metric", default="entropy", choices=get_metric_ids())
    ap.add_argument("--workers", type=int)
    ap.add_argument("--store", help="JSON file caching opening guesses across runs")
    ap.add_argument("--max-turns", type=int, default=6)
    ap.add_argument("--show", type=int, default=10,
                    help="list the remaining candidates when at most this many are left")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s %(name)s: %(message)s")

    dictionary = load_dictionary(args.dictionary, N=args.N)
    config = SolverConfig(word_length=args.N, max_turns=args.max_turns, metric=args.metric,
                          workers=args.workers, store_path=args.store)
    search, opening = create_solver(dictionary, config)

    with search:
        session = SolverSession(search, opening, max_turns=config.max_turns)
        try:
            for guess, patt in args.observations:
                session.record(guess, patt)
        except WordleError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2

        print(f"{session.remaining} possible word{'s' if session.remaining != 1 else ''}")
        if 0 < session.remaining <= args.show:
            print("  " + ", ".join(session.candidates))

        if session.state.is_terminal:
            messages = {
                "solved": "Solved!",
                "exhausted": "Out of guesses.",
                "contradiction": "No dictionary word fits that feedback (answer not in dictionary?).",
            }
            print(messages[session.state.value])
            return 0 if session.state.value == "solved" else 1

        print(f"Guess {session.turn} of {session.max_turns}: try {session.suggest()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
