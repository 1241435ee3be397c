"""
Layout primitives for consistent screen structure.

Provides reusable components for screen headers and cards.
"""

from contextlib import contextmanager
from typing import Callable, Optional

import streamlit as st

from recipebook.formatting import escape_markdown


def page_header(
    title: str,
    back: Optional[Callable[[], None]] = None,
    back_key: str = "header_back",
) -> None:
    """
    Render a screen header with title and optional back button.

    Args:
        title: Screen title, shown literally (may be a user-typed recipe name)
        back: Optional callback for a "<" button left of the title
        back_key: Widget key of the back button, unique per screen
    """
    heading = f"# {escape_markdown(title)}"
    if back is not None:
        col_back, col_title = st.columns([1, 11])
        with col_back:
            st.button("<", key=back_key, on_click=back, help="Back")
        with col_title:
            st.markdown(heading)
    else:
        st.markdown(heading)


@contextmanager
def card():
    """
    Context manager for a bordered card container.

    Usage:
        with card():
            st.write("Card content")
    """
    with st.container(border=True):
        yield
