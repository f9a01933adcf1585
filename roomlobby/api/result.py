"""
Outcome of a backend call.

The client never raises for request failures; it returns an `ApiResult`
whose `kind` tells success apart from the different failure modes. Code that
does not care why a call failed can use `value_or_none()`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ResultKind(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    HTTP_ERROR = "http_error"
    TRANSPORT_ERROR = "transport_error"
    INVALID_RESPONSE = "invalid_response"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class ApiResult:
    kind: ResultKind
    value: Any = None
    status_code: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.kind is ResultKind.OK

    def value_or_none(self) -> Any:
        """Return the body for a successful call, None for any failure."""
        return self.value if self.ok else None

    @classmethod
    def success(cls, value: Any, status_code: int | None = None) -> ApiResult:
        return cls(ResultKind.OK, value=value, status_code=status_code)

    @classmethod
    def http_failure(cls, status_code: int, error: str) -> ApiResult:
        kind = ResultKind.NOT_FOUND if status_code == 404 else ResultKind.HTTP_ERROR
        return cls(kind, status_code=status_code, error=error)

    @classmethod
    def transport_failure(cls, error: str) -> ApiResult:
        return cls(ResultKind.TRANSPORT_ERROR, error=error)

    @classmethod
    def cancelled(cls) -> ApiResult:
        return cls(ResultKind.CANCELLED, error="cancelled before request was sent")

    @classmethod
    def invalid_response(cls, error: str, status_code: int | None = None) -> ApiResult:
        return cls(ResultKind.INVALID_RESPONSE, status_code=status_code, error=error)
