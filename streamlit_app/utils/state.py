"""
Session State Module.

This module wraps Streamlit's session_state to give every browser session its
own RecipeApp. The app (store, navigator, open Add form) lives in
st.session_state, so it survives reruns and is reset when the user starts a
new session.

# NOTE: Nothing is persisted. Refreshing the page starts a fresh session with
    only the sample recipes.
"""

import uuid

import streamlit as st

from recipebook.app import RecipeApp

# Session state keys
APP_KEY = "recipe_app"
SESSION_ID_KEY = "session_id"


def get_or_create_session_id() -> str:
    """
    Get or create the session ID stored in st.session_state.

    The id is attached to UI events so that events of one browser session can be
    grouped.

    Returns:
        Session ID string (UUID format)
    """
    if SESSION_ID_KEY not in st.session_state:
        st.session_state[SESSION_ID_KEY] = str(uuid.uuid4())
    return st.session_state[SESSION_ID_KEY]


def get_recipe_app() -> RecipeApp:
    """
    Get the RecipeApp of the current session, creating it on first use.

    Returns:
        RecipeApp seeded with the sample categories and recipes
    """
    if APP_KEY not in st.session_state:
        st.session_state[APP_KEY] = RecipeApp(session_id=get_or_create_session_id())
    return st.session_state[APP_KEY]


def reset_recipe_app() -> RecipeApp:
    """Discard the session's recipes and navigation and start from the sample data."""
    st.session_state.pop(APP_KEY, None)
    return get_recipe_app()
