"""
Call helpers for front-end code.

Each function returns the response body on success and None on any failure,
so UI code can treat all failures alike. Use `LobbyApiClient` directly when
the reason for a failure matters.

The client holds a cookie jar (the room-auth flow depends on it), so a server
handling several visitors must give each one its own client with
`use_client`. Outside such a block a process-wide client is used, which is
fine for scripts and single-user tools.

Usage:
    from roomlobby.api import helpers

    with helpers.use_client(visitor_client):
        rooms = helpers.fetch_rooms() or []
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

from roomlobby.api.client import LobbyApiClient
from roomlobby.utils.ids import gen_unique_id

_client: LobbyApiClient | None = None
_bound_client: ContextVar[LobbyApiClient | None] = ContextVar("roomlobby_client", default=None)


def get_client() -> LobbyApiClient:
    """Return the client bound by `use_client`, else the process-wide one."""
    global _client
    bound = _bound_client.get()
    if bound is not None:
        return bound
    if _client is None:
        _client = LobbyApiClient()
    return _client


def set_client(client: LobbyApiClient | None) -> None:
    """Replace the process-wide client. None resets it to a fresh default on next use."""
    global _client
    _client = client


@contextmanager
def use_client(client: LobbyApiClient) -> Iterator[LobbyApiClient]:
    """Route helper calls made in this context (thread or task) through `client`."""
    token = _bound_client.set(client)
    try:
        yield client
    finally:
        _bound_client.reset(token)


def fetch_users() -> Any:
    """Body of GET /api/users, or None."""
    return get_client().fetch_users().value_or_none()


def fetch_rooms() -> Any:
    """Body of GET /api/rooms, or None."""
    return get_client().fetch_rooms().value_or_none()


def get_session() -> Any:
    """Current user with session expiry (`exp`), or None when not logged in."""
    return get_client().get_session().value_or_none()


def create_room_session(room_code: str, user_id: str) -> Any:
    """Room token payload for `user_id` in `room_code`, or None."""
    return get_client().create_room_session(room_code, user_id).value_or_none()


def add_room_user(real_name: str, display_name: str, guest_id: str, room_code: str) -> Any:
    return get_client().add_room_user(real_name, display_name, guest_id, room_code).value_or_none()


def remove_room_user(guest_id: str, room_code: str) -> Any:
    return get_client().remove_room_user(guest_id, room_code).value_or_none()


__all__ = [
    "fetch_users",
    "fetch_rooms",
    "get_session",
    "create_room_session",
    "add_room_user",
    "remove_room_user",
    "gen_unique_id",
    "get_client",
    "set_client",
    "use_client",
]
