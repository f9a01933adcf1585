"""
Tests for lobby_display: room options, guest lists, session label.
"""

from __future__ import annotations

from unittest.mock import MagicMock

from roomlobby.ui.lobby_display import (
    find_room,
    render_room,
    room_code,
    room_guests,
    room_options,
    session_label,
    user_names,
)


def test_room_options_skips_rooms_without_code() -> None:
    rooms = [
        {"roomCode": "ABCD", "name": "Study"},
        {"code": "WXYZ"},
        {"name": "No code"},
        "garbage",
    ]
    assert room_options(rooms) == {"Study (ABCD)": "ABCD", "Room (WXYZ)": "WXYZ"}


def test_room_options_accepts_wrapped_list() -> None:
    assert room_options({"rooms": [{"roomCode": "ABCD", "name": "A"}]}) == {"A (ABCD)": "ABCD"}
    assert room_options(None) == {}


def test_room_code_and_find_room() -> None:
    rooms = [{"roomCode": "ABCD"}, {"roomCode": "EFGH", "name": "Second"}]
    assert room_code(rooms[0]) == "ABCD"
    assert room_code(None) is None
    assert find_room(rooms, "EFGH") == {"roomCode": "EFGH", "name": "Second"}
    assert find_room(rooms, "ZZZZ") is None


def test_room_guests_prefers_display_name() -> None:
    room = {"users": [{"dispName": "Ann", "guestName": "ann1"}, {"guestId": "?abc"}, "Raw", {}]}
    assert room_guests(room) == ["Ann", "?abc", "Raw"]


def test_user_names() -> None:
    assert user_names([{"username": "bob"}, {"name": "amy"}, {"id": 3}]) == ["bob", "amy"]


def test_session_label() -> None:
    assert session_label(None).startswith("Not signed in")
    assert session_label({"username": "bob"}) == "Signed in as bob"
    assert session_label({"username": "bob", "exp": 0}) == "Signed in as bob (session expires 1970-01-01 00:00 UTC)"


def test_render_room_lists_guests() -> None:
    st = MagicMock()
    render_room(st, {"roomCode": "ABCD", "name": "Study", "users": [{"dispName": "Ann"}]})
    st.markdown.assert_called_once_with("**Study** · code `ABCD`")
    st.caption.assert_called_once_with("In the room: Ann")
