"""
Room Lobby — Streamlit UI entry point.
"""

import streamlit as st

# Load .env first so the backend URL is available to the client
from roomlobby.utils.config import load_config
load_config()

from roomlobby.api import LobbyApiClient, helpers
from roomlobby.utils.logger import setup_logger, get_logger
from roomlobby.ui.lobby_display import (
    find_room,
    render_room,
    room_options,
    session_label,
    user_names,
)

setup_logger("roomlobby")
log = get_logger()

st.set_page_config(page_title="Room Lobby", layout="wide")
st.title("Room Lobby")

# One client per visitor: the room-auth cookies must not leak between browser sessions
if "api_client" not in st.session_state:
    st.session_state.api_client = LobbyApiClient()


def render_lobby() -> None:
    if "session" not in st.session_state:
        st.session_state.session = helpers.get_session()
    if "guest_id" not in st.session_state:
        st.session_state.guest_id = helpers.gen_unique_id()
    if "joined_room" not in st.session_state:
        st.session_state.joined_room = None

    session = st.session_state.session

    with st.sidebar:
        st.header("Session")
        st.caption(session_label(session))
        st.caption(f"Guest id: `{st.session_state.guest_id}`")
        if st.button("Refresh"):
            st.session_state.session = helpers.get_session()
            st.rerun()

        with st.expander("Registered users"):
            users = helpers.fetch_users()
            if users is None:
                st.caption("Could not load users.")
            else:
                names = user_names(users)
                st.write(", ".join(names) if names else "No users yet.")

    rooms = helpers.fetch_rooms()
    if rooms is None:
        st.error("Could not reach the rooms backend. Check ROOMLOBBY_API_URL in .env.")
        return

    options = room_options(rooms)
    joined = st.session_state.joined_room

    if joined:
        room = find_room(rooms, joined)
        if room:
            render_room(st, room)
        if st.button("Leave room"):
            result = helpers.remove_room_user(st.session_state.guest_id, joined)
            if result is None:
                st.warning("Leaving failed; try again.")
            else:
                log.info("Guest %s left room %s", st.session_state.guest_id, joined)
                st.session_state.joined_room = None
                st.rerun()
    elif not options:
        st.info("No rooms are open right now.")
    else:
        label = st.selectbox("Room", list(options.keys()))
        default_name = session.get("username", "") if isinstance(session, dict) else ""
        display_name = st.text_input("Display name", value=default_name)
        if st.button("Enter room", disabled=not display_name.strip()):
            code = options[label]
            real_name = default_name or display_name.strip()
            user_id = session.get("id") if isinstance(session, dict) and session.get("id") else st.session_state.guest_id
            token = helpers.create_room_session(code, user_id)
            if token is None:
                st.warning("Could not obtain a room session.")
            elif helpers.add_room_user(real_name, display_name.strip(), st.session_state.guest_id, code) is None:
                st.warning("Could not enter the room.")
            else:
                log.info("Guest %s entered room %s", st.session_state.guest_id, code)
                st.session_state.joined_room = code
                st.rerun()


with helpers.use_client(st.session_state.api_client):
    render_lobby()
