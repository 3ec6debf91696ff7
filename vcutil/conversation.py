"""Chat conversations persisted as one JSON message per line."""

from __future__ import annotations

import contextlib
import json
import os
import tempfile
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

_SUFFIX = ".jsonl"


@dataclass
class Message:
    """A chat message; unknown JSON fields are kept in ``extra``."""

    role: str
    content: str = ""
    name: str = ""
    tool_call_id: str = ""
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data = dict(self.extra)
        data["role"] = self.role
        data["content"] = self.content
        if self.name:
            data["name"] = self.name
        if self.tool_call_id:
            data["tool_call_id"] = self.tool_call_id
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Message:
        rest = dict(data)
        return cls(
            role=rest.pop("role", ""),
            content=rest.pop("content", ""),
            name=rest.pop("name", ""),
            tool_call_id=rest.pop("tool_call_id", ""),
            extra=rest,
        )


class Conversation:
    """Messages of one conversation, appended to its file as they arrive."""

    def __init__(self, conversation_id: str, file_path: Path, max_window_size: int) -> None:
        self.id = conversation_id
        self.messages: list[Message] = []
        self._file_path = Path(file_path)
        self._max_window_size = max_window_size
        self._lock = threading.Lock()

    def append(self, message: Message) -> None:
        """Add a message and append it to the conversation file."""
        with self._lock:
            self.messages.append(message)
            self._save(message)

    def full_messages(self) -> list[Message]:
        """Every message of the conversation."""
        with self._lock:
            return list(self.messages)

    def messages_window(self) -> list[Message]:
        """The most recent messages, at most the window size of them."""
        with self._lock:
            if len(self.messages) > self._max_window_size:
                return self.messages[len(self.messages) - self._max_window_size:]
            return list(self.messages)

    def _load(self) -> None:
        """Read messages from the file, stopping at the first unreadable line."""
        try:
            handle = self._file_path.open(encoding="utf-8")
        except OSError:
            return
        with handle:
            for line in handle:
                try:
                    data = json.loads(line)
                except json.JSONDecodeError:
                    return
                if not isinstance(data, dict):
                    return
                self.messages.append(Message.from_dict(data))

    def _save(self, message: Message) -> None:
        line = json.dumps(message.to_dict(), ensure_ascii=False)
        with contextlib.suppress(OSError), self._file_path.open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")


class SimpleMemory:
    """A directory of conversation files with an in-memory cache."""

    def __init__(self, directory: str | os.PathLike[str] = "", max_window_size: int = 0) -> None:
        if not directory:
            directory = Path(tempfile.gettempdir()) / "eino" / "memory"
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)
        self.max_window_size = max_window_size
        self._conversations: dict[str, Conversation] = {}
        self._lock = threading.Lock()

    def _path(self, conversation_id: str) -> Path:
        return self.directory / (conversation_id + _SUFFIX)

    def get_conversation(self, conversation_id: str, create_if_not_exist: bool = False) -> Conversation:
        """The conversation with this id, loaded from its file on first use.

        With ``create_if_not_exist`` a missing file is created empty.
        """
        with self._lock:
            cached: Optional[Conversation] = self._conversations.get(conversation_id)
            if cached is not None:
                return cached
            path = self._path(conversation_id)
            if create_if_not_exist and not path.exists():
                path.write_text("", encoding="utf-8")
            conversation = Conversation(conversation_id, path, self.max_window_size)
            conversation._load()
            self._conversations[conversation_id] = conversation
            return conversation

    def list_conversations(self) -> list[str]:
        """Ids of the conversations stored in the directory, sorted by file name."""
        with self._lock:
            try:
                entries = sorted(self.directory.iterdir(), key=lambda p: p.name)
            except OSError:
                return []
            return [entry.name.removesuffix(_SUFFIX) for entry in entries if not entry.is_dir()]

    def delete_conversation(self, conversation_id: str) -> None:
        """Remove the conversation's file and forget it; OSError if the file cannot be removed."""
        with self._lock:
            self._path(conversation_id).unlink()
            self._conversations.pop(conversation_id, None)


def default_memory() -> SimpleMemory:
    """Memory stored under ``data/memory`` with a window of six messages."""
    return SimpleMemory(directory="data/memory", max_window_size=6)