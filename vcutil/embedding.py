"""Client for a text-embedding service that speaks a small JSON protocol."""

from __future__ import annotations

import json
import urllib.request
from dataclasses import dataclass


@dataclass
class EmbeddingClient:
    """Posts ``{"ss": [...]}`` to ``url`` and reads the ``embddings`` field of the reply."""

    url: str
    type: str = ""

    def embed(self, *args: str) -> list[list[float]]:
        """Embedding vectors for the given texts, in order; no request for no texts."""
        if not args:
            return []
        body = json.dumps({"ss": list(args)}).encode("utf-8")
        request = urllib.request.Request(
            self.url,
            data=body,
            headers={"Content-Type": "application/json"},
            method="POST",
        )
        with urllib.request.urlopen(request) as response:
            payload = response.read()
        result = json.loads(payload)
        if not isinstance(result, dict):
            raise ValueError("embedding response is not a JSON object")
        embeddings = result.get("embddings") or []
        return [[float(x) for x in vector] for vector in embeddings]