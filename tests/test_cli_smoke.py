import json
from pathlib import Path

import pytest

from apps.cli import run, suggest

WORDS = ["apple", "angle", "ankle", "ample"]


def _dictionary(tmp_path: Path) -> str:
    p = tmp_path / "words.txt"
    p.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return str(p)


def test_suggest_opening_and_followup(tmp_path, capsys):
    d = _dictionary(tmp_path)
    assert suggest.main(["--dictionary", d, "--workers", "1"]) == 0
    assert "try apple" in capsys.readouterr().out

    assert suggest.main(["--dictionary", d, "--workers", "1", "apple:G--GG"]) == 0
    out = capsys.readouterr().out
    assert "2 possible words" in out and "angle, ankle" in out and "try angle" in out


def test_suggest_terminal_states(tmp_path, capsys):
    d = _dictionary(tmp_path)
    assert suggest.main(["--dictionary", d, "--workers", "1", "angle:GGGGG"]) == 0
    assert "Solved!" in capsys.readouterr().out
    assert suggest.main(["--dictionary", d, "--workers", "1", "apple:-----"]) == 1
    assert "No dictionary word fits" in capsys.readouterr().out
    assert suggest.main(["--dictionary", d, "--workers", "1", "apple:GGG"]) == 2


def test_run_writes_reports(tmp_path, capsys):
    d = _dictionary(tmp_path)
    out = tmp_path / "reports"
    run.main(["--dictionary", d, "--workers", "1", "--progress", "off", "--outdir", str(out)])
    printed = capsys.readouterr().out
    assert "Opening guess: apple" in printed and "Solved 4/4" in printed

    manifests = list(out.glob("*_manifest.json"))
    assert len(manifests) == 1 and len(list(out.glob("*.csv"))) == 1
    m = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert m["opening"]["guess"] == "apple"
    assert m["summary"]["success_rate"] == 1.0


def test_run_rejects_unknown_metric(tmp_path, capsys):
    d = _dictionary(tmp_path)
    with pytest.raises(SystemExit) as exc:
        run.main(["--dictionary", d, "--metric", "nope", "--outdir", str(tmp_path)])
    assert exc.value.code == 2
    assert "invalid choice" in capsys.readouterr().err
