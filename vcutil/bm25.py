"""Okapi BM25 relevance scoring."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from .tfidf import TFIDF


class BM25:
    """BM25 scorer over a fixed corpus of tokenised documents."""

    def __init__(self, docs_tokens: Sequence[Sequence[str]], k1: float, b: float) -> None:
        if not docs_tokens:
            raise ValueError("BM25 needs at least one document")
        self.k1 = k1
        self.b = b
        self.docs = [list(tokens) for tokens in docs_tokens]
        self.avg_doc_len = sum(len(tokens) for tokens in self.docs) / len(self.docs)
        self.tfidf = TFIDF(self.docs)

    def score(self, query_tokens: Sequence[str], doc_tokens: Sequence[str]) -> float:
        """BM25 score of one document against the query."""
        if not query_tokens or not doc_tokens:
            return 0.0
        doc_len = len(doc_tokens)
        term_freq = Counter(doc_tokens)
        length_norm = self.k1 * (1 - self.b + self.b * doc_len / self.avg_doc_len)
        total = 0.0
        for token in query_tokens:
            tf = float(term_freq[token])
            total += self.tfidf.idf(token) * (tf * (self.k1 + 1)) / (tf + length_norm)
        return total

    def all_docs_scores(self, query_tokens: Sequence[str]) -> list[float]:
        """Scores of every corpus document, in corpus order."""
        return [self.score(query_tokens, doc) for doc in self.docs]