"""
Global CSS Styling for the recipe book.

This module provides load_global_styles() to inject consistent styling on every
screen. Focuses on typography, spacing, and the star glyphs.
"""

import streamlit as st


def load_global_styles() -> None:
    """
    Inject global CSS styles.

    This function:
    - Imports Google Fonts (Nunito) for friendly typography
    - Tightens heading spacing
    - Makes buttons rounded pills
    - Colors rating stars
    """
    css = """
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Nunito:wght@400;600;700&display=swap');

        html, body, [class*="css"] {
            font-family: 'Nunito', 'sans serif' !important;
        }

        h1, h2, h3 {
            font-weight: 600 !important;
            letter-spacing: 0.02em !important;
            margin-bottom: 0.5rem !important;
        }

        .stButton > button {
            border-radius: 50px !important;
            font-weight: 600 !important;
        }

        .rb-stars {
            color: #f5a623;
            letter-spacing: 0.1em;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
