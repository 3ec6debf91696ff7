"""Separate the reasoning block of model output from its answer."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_THINK_END = "</think>"


def parse_output(text: str) -> tuple[str, str]:
    """Split into (reasoning up to and including ``</think>``, the rest)."""
    end = text.find(_THINK_END)
    if end < 0:
        return "", text
    end += len(_THINK_END)
    return text[:end], text[end:]


def remove_think(text: str) -> str:
    """Drop everything up to and including ``</think>``."""
    return parse_output(text)[1]


def message_content(message: Any) -> str:
    """Content of a chat message (object or mapping); empty for None."""
    if message is None:
        return ""
    if isinstance(message, Mapping):
        return message.get("content", "")
    return message.content


def content_without_think(message: Any) -> str:
    """Message content without its reasoning block."""
    return remove_think(message_content(message))


def content_as_json(message: Any) -> str:
    """Message content without reasoning or a surrounding ```json fence."""
    text = content_without_think(message).strip()
    return text.removeprefix("```json").removesuffix("```")