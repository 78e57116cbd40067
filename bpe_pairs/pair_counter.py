import logging
import regex as re

from types import MappingProxyType
from typing import Mapping

from .base import EmptyCounterError, PairKey, count_pairs

PAT = r"""'(?:[sdmt]|ll|ve|re)| ?\p{L}+| ?\p{N}+| ?[^\s\p{L}\p{N}]+|\s+(?!\S)|\s+"""
EOT_TOKEN = "<|endoftext|>"

logger = logging.getLogger(__name__)

class PairCounter():
    """Running tally of adjacent character pairs over one or more strings."""

    def __init__(self):
        self._counts: dict[PairKey, int] = {}

    def count(self, text: str) -> None:
        """Add the adjacent pairs of `text` to the tally.

        Separate calls are summed, but no pair is formed across calls:
        count("ab") then count("cd") never sees ("b", "c"), unlike
        count("abcd").
        """
        pairs = count_pairs(text)
        for pair, freq in pairs.items():
            self._counts[pair] = self._counts.get(pair, 0) + freq
        logger.debug("counted %d pairs (%d distinct) from %d characters",
                     max(0, len(text) - 1), len(pairs), len(text))

    def count_pretokens(self, text: str, special_tokens: list[str] | None = None) -> None:
        """Count the pairs of `text` without letting a pair cross a PAT pre-token boundary.

        The text is only split before counting; nothing is encoded. Special
        tokens are split out first and are not counted at all. Empty strings
        in `special_tokens` are ignored.
        """
        if special_tokens is None:
            special_tokens = [EOT_TOKEN]
        special_tokens = [tok for tok in special_tokens if tok]
        parts = [text]
        if special_tokens:
            # Longest first so overlapping special tokens match greedily
            alternation = "|".join(re.escape(tok) for tok in sorted(special_tokens, key=len, reverse=True))
            parts = re.split(alternation, text)
        for part in parts:
            for pretoken in re.finditer(PAT, part):
                self.count(pretoken.group(0))

    def counts(self) -> Mapping[PairKey, int]:
        return MappingProxyType(self._counts)

    def most_common(self) -> set[PairKey]:
        """Return every pair whose count equals the highest count seen.

        Raises EmptyCounterError if no pair has been counted yet.
        """
        if not self._counts:
            raise EmptyCounterError("most_common() called on an empty counter")
        max_count = max(self._counts.values())
        best = {pair for pair, freq in self._counts.items() if freq == max_count}
        logger.debug("%d pair(s) share the maximum count %d", len(best), max_count)
        return best

    def total(self) -> int:
        return sum(self._counts.values())

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"PairCounter(distinct={len(self)}, total={self.total()})"
