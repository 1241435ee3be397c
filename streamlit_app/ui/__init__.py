"""
UI Styling and Components Module.

This module provides global CSS styling and reusable UI components
for the recipe book Streamlit app.
"""

from ui.styles import load_global_styles
from ui.layout import page_header, card
from ui.feedback import show_error, show_empty_state

__all__ = [
    "load_global_styles",
    "page_header",
    "card",
    "show_error",
    "show_empty_state",
]
