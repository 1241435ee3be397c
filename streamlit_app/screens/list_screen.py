"""
Recipe List Screen.

Shows every recipe in store order with its category and star rating. Opening a
row navigates to the detail screen; the "+" button opens the add screen.
"""

import streamlit as st

from recipebook.app import RecipeApp
from recipebook.formatting import escape_markdown, rating_stars
from screens.add_screen import reset_form_widgets
from ui.feedback import show_empty_state
from ui.layout import card, page_header


def _open_add(app: RecipeApp) -> None:
    reset_form_widgets()
    app.open_add()


def render_list_screen(app: RecipeApp, title: str = "Recipes") -> None:
    """
    Render the recipe list.

    Args:
        app: Session RecipeApp
        title: Screen title
    """
    page_header(title)

    notice = app.pop_notice()
    if notice:
        st.toast(escape_markdown(notice), icon="✅")

    st.button("+", key="add_recipe", type="primary", help="Add recipe", on_click=_open_add, args=(app,))

    recipes = app.store.list()
    if not recipes:
        show_empty_state("No recipes yet", "Use + to add your first recipe.")
        return

    for recipe in recipes:
        with card():
            col_text, col_action = st.columns([4, 1])
            with col_text:
                st.markdown(f"### {escape_markdown(recipe.name)}")
                st.markdown(f"Category: {escape_markdown(recipe.category.name)}")
                st.markdown(
                    f'Rating: <span class="rb-stars">{rating_stars(recipe.rating)}</span>',
                    unsafe_allow_html=True,
                )
            with col_action:
                st.button(
                    "Open",
                    key=f"open_recipe_{recipe.id}",
                    width="stretch",
                    on_click=app.open_recipe,
                    args=(recipe.id,),
                )
