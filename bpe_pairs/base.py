from collections import defaultdict
from typing import NamedTuple

class PairKey(NamedTuple):
    first: str
    second: str

class EmptyCounterError(ValueError):
    """Raised when the most common pair is requested before anything was counted."""

def count_pairs(text: str) -> dict[PairKey, int]:
    """Count adjacent character pairs in `text`.

    Characters are the string's code points, so a glyph built from several
    code points (an emoji with a skin-tone modifier, say) contributes more
    than one character. Returns a dict mapping PairKey(c1, c2) -> frequency;
    empty and single-character strings give an empty dict.
    """
    pair_counts: dict[PairKey, int] = defaultdict(int)
    for c1, c2 in zip(text[:-1], text[1:]):
        pair_counts[PairKey(c1, c2)] += 1
    return dict(pair_counts)
