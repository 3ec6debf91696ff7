"""Document frequency and inverse document frequency over tokenised documents."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence


class TFIDF:
    """IDF table built from a corpus of token lists."""

    def __init__(self, docs_tokens: Sequence[Iterable[str]]) -> None:
        self.n = len(docs_tokens)
        self.df: Counter[str] = Counter()
        for tokens in docs_tokens:
            self.df.update(set(tokens))
        self._idf = {
            token: math.log(1 + (self.n - count + 0.5) / (count + 0.5))
            for token, count in self.df.items()
        }

    def idf(self, token: str) -> float:
        """Inverse document frequency of ``token``; 0.0 for unseen tokens."""
        return self._idf.get(token, 0.0)