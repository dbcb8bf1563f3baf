from .scoring import (
    ABSENT, EXACT, PRESENT,
    decode_pattern, encode_pattern, is_solved, parse_pattern, score,
)
from .constraints import filter_candidates, filter_history
from .words import Dictionary, is_valid_word, normalize_word
from .errors import (
    InvalidState, MalformedPattern, MalformedWord, SearchAborted, WordleError,
)

__all__ = [
    "score", "encode_pattern", "decode_pattern", "parse_pattern", "is_solved",
    "EXACT", "PRESENT", "ABSENT",
    "filter_candidates", "filter_history",
    "Dictionary", "normalize_word", "is_valid_word",
    "WordleError", "MalformedWord", "MalformedPattern", "InvalidState", "SearchAborted",
]
