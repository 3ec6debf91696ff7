"""The JSON envelope returned by the HTTP API."""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


def _is_empty(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    if isinstance(value, (str, bytes, list, tuple, dict, set)):
        return len(value) == 0
    return False


@dataclass
class HTTPResponse(Generic[T]):
    """Response envelope with a status code, message and payload."""

    code: int = 0
    msg: str = ""
    data: Optional[T] = None

    def to_dict(self) -> dict[str, Any]:
        """The envelope as a dict, leaving out empty fields."""
        fields = (("code", self.code), ("msg", self.msg), ("data", self.data))
        return {name: value for name, value in fields if not _is_empty(value)}


def success(data: T) -> HTTPResponse[T]:
    """A success envelope carrying ``data``."""
    return HTTPResponse(code=int(HTTPStatus.OK), data=data)


def success_none() -> HTTPResponse[int]:
    """A success envelope with no payload."""
    return HTTPResponse(code=int(HTTPStatus.OK), data=0)


def error(code: int, msg: str) -> HTTPResponse[int]:
    """An error envelope with the given code and message."""
    return HTTPResponse(code=code, msg=msg, data=0)