"""Backend API access: the result-returning client and the None-on-failure helpers."""

from roomlobby.api.client import LobbyApiClient
from roomlobby.api.result import ApiResult, ResultKind

__all__ = ["ApiResult", "LobbyApiClient", "ResultKind"]
