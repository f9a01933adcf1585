"""
Lobby rendering helpers for the Streamlit UI.

Backend bodies are passed through unvalidated, so the pure helpers here
accept whatever shape comes back and fall back to sensible labels.
"""

from __future__ import annotations

import datetime as _dt
from typing import Any


def _as_list(body: Any) -> list[Any]:
    if isinstance(body, list):
        return body
    if isinstance(body, dict):
        for key in ("rooms", "users", "data"):
            if isinstance(body.get(key), list):
                return body[key]
    return []


def room_code(room: Any) -> str | None:
    """Return the code of a room record, or None when it has none."""
    if not isinstance(room, dict):
        return None
    code = room.get("roomCode") or room.get("code")
    return str(code) if code else None


def room_options(rooms_body: Any) -> dict[str, str]:
    """
    Map a display label to its room code for every room that has a code.

    Example:
        >>> room_options([{"roomCode": "ABCD", "name": "Study"}])
        {'Study (ABCD)': 'ABCD'}
    """
    out: dict[str, str] = {}
    for room in _as_list(rooms_body):
        code = room_code(room)
        if not code:
            continue
        name = room.get("name") or room.get("roomName") or "Room"
        out[f"{name} ({code})"] = code
    return out


def room_guests(room: Any) -> list[str]:
    """Display names of the guests in a room record."""
    if not isinstance(room, dict):
        return []
    names: list[str] = []
    for guest in room.get("users") or room.get("guests") or []:
        if isinstance(guest, dict):
            name = guest.get("dispName") or guest.get("guestName") or guest.get("guestId")
            if name:
                names.append(str(name))
        elif guest:
            names.append(str(guest))
    return names


def find_room(rooms_body: Any, code: str) -> dict[str, Any] | None:
    for room in _as_list(rooms_body):
        if room_code(room) == code:
            return room
    return None


def user_names(users_body: Any) -> list[str]:
    names = []
    for user in _as_list(users_body):
        if isinstance(user, dict):
            name = user.get("username") or user.get("name")
            if name:
                names.append(str(name))
    return names


def session_label(session: Any) -> str:
    """One-line description of the logged-in user, or a guest notice."""
    if not isinstance(session, dict) or not session:
        return "Not signed in. You will join rooms as a guest."
    name = session.get("username") or session.get("name") or session.get("id") or "user"
    exp = session.get("exp")
    if isinstance(exp, (int, float)):
        expires = _dt.datetime.fromtimestamp(exp, tz=_dt.timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
        return f"Signed in as {name} (session expires {expires})"
    return f"Signed in as {name}"


def render_room(st: Any, room: dict[str, Any]) -> None:
    """Render one room's details into a Streamlit container."""
    code = room_code(room) or "?"
    st.markdown(f"**{room.get('name') or 'Room'}** · code `{code}`")
    guests = room_guests(room)
    if guests:
        st.caption("In the room: " + ", ".join(guests))
    else:
        st.caption("Nobody here yet.")
