"""
HTTP client for the rooms backend (users, rooms and auth endpoints).

One `requests.Session` is kept per client so cookies set by the backend
(the room-auth flow depends on them) are sent on later calls.
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Union

import requests

from roomlobby.api.result import ApiResult
from roomlobby.utils import config
from roomlobby.utils.logger import get_logger

logger = get_logger()

USERS_PATH = "/api/users"
ROOMS_PATH = "/api/rooms"
AUTH_VERIFY_PATH = "/api/users/auth/verify"
AUTH_RETRIEVE_PATH = "/api/users/auth/retrieve"
ROOMAUTH_OBTAIN_PATH = "/api/users/roomauth/obtain"
ROOMAUTH_VERIFY_PATH = "/api/users/roomauth/verify"
ROOM_ENTER_PATH = "/api/rooms/enter"
ROOM_LEAVE_PATH = "/api/rooms/leave"

BaseUrl = Union[str, Callable[[], str], None]


def _parse_body(response: requests.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _merge_session_expiry(retrieved: Any, verified: Any) -> Any:
    """Copy `exp` from the verify body onto the retrieved user body."""
    if not retrieved or not verified:
        return retrieved
    if not isinstance(retrieved, dict) or not isinstance(verified, dict):
        return retrieved
    if "exp" not in verified:
        return retrieved
    return {**retrieved, "exp": verified["exp"]}


class LobbyApiClient:
    """
    Client for the rooms backend.

    Args:
        base_url: Backend root as a string or a zero-argument callable. When
            None, `config.api_base_url()` is used. Resolved on every request.
        session: Optional `requests.Session` (tests pass a mock).
        timeout: Request timeout in seconds. When None, `config.api_timeout()`
            is read per request; it defaults to no timeout.
    """

    def __init__(
        self,
        base_url: BaseUrl = None,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        self._base_url = base_url
        self._session = session if session is not None else requests.Session()
        self._timeout = timeout

    def __enter__(self) -> LobbyApiClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def _resolve_base_url(self) -> str:
        if self._base_url is None:
            return config.api_base_url()
        value = self._base_url() if callable(self._base_url) else self._base_url
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"Backend base URL is not configured (got {value!r})")
        return value.strip().rstrip("/")

    def _request(self, method: str, path: str, payload: dict[str, Any] | None = None) -> ApiResult:
        try:
            url = self._resolve_base_url() + path
        except ValueError as e:
            logger.warning("%s %s not sent: %s", method, path, e)
            return ApiResult.transport_failure(str(e))

        timeout = self._timeout if self._timeout is not None else config.api_timeout()
        logger.debug("%s %s", method, url)
        try:
            response = self._session.request(method, url, json=payload, timeout=timeout)
        except requests.exceptions.RequestException as e:
            logger.warning("%s %s failed: %s (%s)", method, path, e, type(e).__name__)
            return ApiResult.transport_failure(f"{type(e).__name__}: {e}")

        # Anything outside 2xx is a failure, including redirects requests did not follow
        if not 200 <= response.status_code < 300:
            logger.warning("%s %s failed with HTTP %s", method, path, response.status_code)
            reason = response.reason or "unexpected status"
            return ApiResult.http_failure(response.status_code, f"HTTP {response.status_code} {reason} for {url}")

        return ApiResult.success(_parse_body(response), status_code=response.status_code)

    # --- Single-request operations ---

    def fetch_users(self) -> ApiResult:
        return self._request("GET", USERS_PATH)

    def fetch_rooms(self) -> ApiResult:
        return self._request("GET", ROOMS_PATH)

    def add_room_user(
        self,
        real_name: str,
        display_name: str,
        guest_id: str,
        room_code: str,
    ) -> ApiResult:
        """Register a guest in a room. `real_name` is the account name, if any."""
        payload = {
            "dispName": display_name,
            "roomCode": room_code,
            "guestName": real_name,
            "guestId": guest_id,
        }
        return self._request("PATCH", ROOM_ENTER_PATH, payload)

    def remove_room_user(self, guest_id: str, room_code: str) -> ApiResult:
        return self._request("PATCH", ROOM_LEAVE_PATH, {"roomCode": room_code, "guestId": guest_id})

    # --- Two-step operations ---

    def get_session(self, cancel: threading.Event | None = None) -> ApiResult:
        """
        Verify the auth session, then retrieve the user it belongs to.

        The retrieved body gets the verify body's `exp`. Nothing is retrieved
        when verification fails or `cancel` is set before the second request.
        """
        if cancel is not None and cancel.is_set():
            return ApiResult.cancelled()
        verified = self._request("GET", AUTH_VERIFY_PATH)
        if not verified.ok:
            return verified
        if verified.value is None:
            logger.warning("GET %s returned no session body", AUTH_VERIFY_PATH)
            return ApiResult.invalid_response("verify returned an empty body", verified.status_code)
        if cancel is not None and cancel.is_set():
            return ApiResult.cancelled()

        payload: dict[str, Any] = {}
        if isinstance(verified.value, dict) and "id" in verified.value:
            payload["id"] = verified.value["id"]
        retrieved = self._request("POST", AUTH_RETRIEVE_PATH, payload)
        if not retrieved.ok:
            return retrieved
        return ApiResult.success(
            _merge_session_expiry(retrieved.value, verified.value),
            status_code=retrieved.status_code,
        )

    def create_room_session(
        self,
        room_code: str,
        user_id: str,
        cancel: threading.Event | None = None,
    ) -> ApiResult:
        """
        Obtain a room token for `user_id`, then verify it.

        The verify call carries no body; the backend identifies the room
        session from the cookie set by the obtain call. The obtain body is
        ignored.
        """
        if cancel is not None and cancel.is_set():
            return ApiResult.cancelled()
        obtained = self._request("POST", ROOMAUTH_OBTAIN_PATH, {"code": room_code, "id": user_id})
        if not obtained.ok:
            return obtained
        if cancel is not None and cancel.is_set():
            return ApiResult.cancelled()
        return self._request("POST", ROOMAUTH_VERIFY_PATH)
