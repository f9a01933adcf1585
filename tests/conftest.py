"""Shared fixtures: a mocked requests session and real Response objects."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from roomlobby.api.client import LobbyApiClient

BASE_URL = "http://api.test"


def make_response(status_code: int = 200, body: Any = None, text: str | None = None) -> requests.Response:
    """Build a real `requests.Response` so raise_for_status/json behave as in production."""
    response = requests.Response()
    response.status_code = status_code
    response.url = BASE_URL
    if body is not None:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
        response.encoding = "utf-8"
    elif text is not None:
        response._content = text.encode("utf-8")
        response.headers["Content-Type"] = "text/plain"
        response.encoding = "utf-8"
    else:
        response._content = b""
    return response


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ROOMLOBBY_API_TIMEOUT", raising=False)


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session: MagicMock) -> LobbyApiClient:
    return LobbyApiClient(base_url=BASE_URL, session=session, timeout=5)
