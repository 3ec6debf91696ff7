import math

import pytest

from vcutil.tfidf import TFIDF


def test_new_tfidf():
    docs = [
        ["hello", "world"],
        ["hello", "python"],
        ["bm25", "test", "example"],
    ]
    model = TFIDF(docs)
    assert model.n == 3
    expected_df = {"hello": 2, "world": 1, "python": 1, "bm25": 1, "test": 1, "example": 1}
    for token, expected in expected_df.items():
        assert model.df[token] == expected

    expected_idf = {
        "hello": math.log(1 + (3 - 2 + 0.5) / (2 + 0.5)),
        "world": math.log(1 + (3 - 1 + 0.5) / (1 + 0.5)),
        "python": math.log(1 + (3 - 1 + 0.5) / (1 + 0.5)),
        "bm25": math.log(1 + (3 - 1 + 0.5) / (1 + 0.5)),
        "test": math.log(1 + (3 - 1 + 0.5) / (1 + 0.5)),
        "example": math.log(1 + (3 - 1 + 0.5) / (1 + 0.5)),
    }
    for token, expected in expected_idf.items():
        assert f"{model.idf(token):.5f}" == f"{expected:.5f}"


def test_get_idf():
    model = TFIDF([["hello", "world"], ["hello", "python"]])
    n, df = 2.0, 2.0
    expected = math.log(1 + (n - df + 0.5) / (df + 0.5))
    assert f"{model.idf('hello'):.5f}" == f"{expected:.5f}"
    assert model.idf("unknown") == 0.0


def test_repeated_token_counts_once_per_document():
    model = TFIDF([["a", "a", "a"], ["b"]])
    assert model.df["a"] == 1
    assert model.idf("a") == pytest.approx(model.idf("b"))