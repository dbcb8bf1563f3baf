import json
import threading

from packages.engine import Dictionary
from packages.solvers import OpeningCache, SolverConfig, StrategySearch, create_solver

WORDS = ["crane", "raise", "stare", "trace", "cared", "adieu", "alone", "slate"]


def _counting_search(calls):
    search = StrategySearch(Dictionary(WORDS), SolverConfig(workers=1))
    real = search.best_guess

    def counted(candidates):
        calls.append(len(candidates))
        return real(candidates)

    search.best_guess = counted
    return search


def test_opening_computed_once_across_threads():
    calls = []
    cache = OpeningCache(_counting_search(calls))
    assert not cache.is_ready

    seen = []
    threads = [threading.Thread(target=lambda: seen.append(cache.best_opening_guess()))
               for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert calls == [len(WORDS)]
    assert len(set(seen)) == 1 and cache.is_ready
    assert cache.opening().guess == seen[0]


def test_store_round_trip(tmp_path):
    store = tmp_path / "cache" / "openings.json"
    calls = []
    first = OpeningCache(_counting_search(calls), store_path=str(store)).opening()
    assert calls == [len(WORDS)]

    data = json.loads(store.read_text(encoding="utf-8"))
    key = f"{Dictionary(WORDS).digest}:entropy"
    assert data[key]["guess"] == first.guess

    calls2 = []
    second = OpeningCache(_counting_search(calls2), store_path=str(store)).opening()
    assert calls2 == []
    assert second.guess == first.guess and second.index == first.index


def test_store_ignores_garbage_and_foreign_entries(tmp_path):
    store = tmp_path / "openings.json"
    store.write_text("{not json", encoding="utf-8")
    calls = []
    OpeningCache(_counting_search(calls), store_path=str(store)).opening()
    assert calls == [len(WORDS)]

    key = f"{Dictionary(WORDS).digest}:entropy"
    for bad in [{"guess": "zzzzz", "score": 9.0}, "crane", ["crane"],
                {"guess": ["crane"]}, {"guess": "crane", "score": "high"}]:
        store.write_text(json.dumps({key: bad}), encoding="utf-8")
        calls = []
        r = OpeningCache(_counting_search(calls), store_path=str(store)).opening()
        assert calls == [len(WORDS)] and r.guess in WORDS


def test_create_solver_wires_store(tmp_path):
    cfg = SolverConfig(workers=1, store_path=str(tmp_path / "s.json"))
    search, opening = create_solver(Dictionary(WORDS), cfg)
    with search:
        assert opening.search is search
        assert opening.best_opening_guess() in WORDS
    assert (tmp_path / "s.json").exists()
