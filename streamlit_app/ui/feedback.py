"""
Standardized feedback utilities for consistent error and empty states.
"""

from typing import Optional

import streamlit as st


def show_error(message: str) -> None:
    """
    Display a standardized error message.

    Args:
        message: Main error message to display
    """
    st.error(f"⚠️ {message}")


def show_empty_state(title: str, subtitle: Optional[str] = None) -> None:
    """
    Display a standardized empty state.

    Args:
        title: Main empty state title
        subtitle: Optional subtitle/description text
    """
    st.info(f"📭 **{title}**")
    if subtitle:
        st.caption(subtitle)
