from __future__ import annotations
from pathlib import Path
from typing import List

from packages.engine import Dictionary


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def load_dictionary(p: Path | str, N: int = 5) -> Dictionary:
    """
    Load a newline-separated word list: lowercase, drop blanks, de-duplicate.
    Raises MalformedWord on the first line that isn't an N-letter a–z word.
    """
    words = [w.strip().lower() for w in read_lines(p) if w.strip()]
    return Dictionary(words, N=N)
