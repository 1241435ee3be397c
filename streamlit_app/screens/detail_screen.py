"""
Recipe Detail Screen.

Shows one recipe: category, rating and the ingredient list in order. An unknown
recipe id (e.g. from a stale navigation) renders nothing at all.
"""

import streamlit as st

from recipebook.app import RecipeApp
from recipebook.formatting import escape_markdown, ingredient_line, ingredients_frame, rating_stars
from ui.layout import page_header


def render_detail_screen(app: RecipeApp, recipe_id: int) -> None:
    """
    Render the detail view of `recipe_id`.

    Args:
        app: Session RecipeApp
        recipe_id: Id carried by the detail route
    """
    recipe = app.view_recipe(recipe_id)
    if recipe is None:
        return

    page_header(recipe.name, back=app.go_back, back_key="detail_back")

    st.markdown(f"#### Category: {escape_markdown(recipe.category.name)}")
    st.markdown(
        f'#### Rating: <span class="rb-stars">{rating_stars(recipe.rating)}</span>',
        unsafe_allow_html=True,
    )
    st.markdown("### Ingredients:")
    for ingredient in recipe.ingredients:
        st.text(ingredient_line(ingredient))

    with st.expander("Table view", expanded=False):
        st.dataframe(ingredients_frame(recipe.ingredients), hide_index=True, width="stretch")
