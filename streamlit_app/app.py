"""
Recipe Book - Streamlit Frontend Main Entry Point.

Run with:
    streamlit run streamlit_app/app.py

The app is a single Streamlit page. Which screen is shown (list, detail, add) is
decided by the session's RecipeApp navigator, not by Streamlit's multi-page
routing: button callbacks change the navigator and Streamlit's rerun renders
the new current route.
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import recipebook without installing it
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
from recipebook.config import AppConfig, setup_logging

import streamlit as st

from recipebook.navigation import AddRoute, DetailRoute
from screens.add_screen import render_add_screen
from screens.detail_screen import render_detail_screen
from screens.list_screen import render_list_screen
from ui.styles import load_global_styles
from utils.state import get_recipe_app, reset_recipe_app

setup_logging()

app_title = AppConfig.get_app_title()

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title=app_title,
    page_icon="🍰",
    layout="centered",
)

load_global_styles()

app = get_recipe_app()

with st.sidebar:
    st.markdown(f"### 🍰 **{app_title}**")
    st.caption(f"{len(app.store)} recipes")

    st.divider()

    # The detail screen renders nothing for unknown ids, so back stays reachable here.
    if app.navigator.can_go_back:
        st.button("Back", key="sidebar_back", width="stretch", on_click=app.go_back)

    with st.expander("Session", expanded=False):
        st.caption("Recipes live only in this browser session.")
        st.button("Start over", key="sidebar_reset", width="stretch", on_click=reset_recipe_app)

route = app.route
if isinstance(route, DetailRoute):
    render_detail_screen(app, route.recipe_id)
elif isinstance(route, AddRoute):
    render_add_screen(app)
else:
    render_list_screen(app, title=app_title)
