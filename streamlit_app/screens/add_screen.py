"""
Add Recipe Screen.

Renders the AddRecipeForm of the session app. Widget values live under the keys
below in st.session_state; every button callback first copies them into the
form, then calls the form/app operation. Clearing the ingredient fields after
"Add" is done by writing back to those keys inside the callback.
"""

import streamlit as st

from recipebook.app import RecipeApp
from recipebook.config import AppConfig
from recipebook.forms import DEFAULT_RATING, AddRecipeForm
from recipebook.formatting import ingredient_line, rating_selector_glyphs
from recipebook.models import MAX_RATING, MIN_RATING
from ui.feedback import show_error
from ui.layout import page_header

# Widget keys
NAME_KEY = "add_recipe_name"
CATEGORY_KEY = "add_recipe_category"
INGREDIENT_AMOUNT_KEY = "add_recipe_ingredient_amount"
INGREDIENT_NAME_KEY = "add_recipe_ingredient_name"
RATING_KEY = "add_recipe_rating"

FORM_KEYS = (NAME_KEY, CATEGORY_KEY, INGREDIENT_AMOUNT_KEY, INGREDIENT_NAME_KEY, RATING_KEY)

# Selector labels, index 0 is a one-star rating
RATING_LABELS = ["".join(rating_selector_glyphs(i)) for i in range(MIN_RATING, MAX_RATING + 1)]


def rating_label(rating: int) -> str:
    return RATING_LABELS[rating - MIN_RATING]


def reset_form_widgets() -> None:
    """Forget widget values of a previous add screen visit."""
    for key in FORM_KEYS:
        st.session_state.pop(key, None)


def _sync_form(form: AddRecipeForm) -> None:
    form.name = st.session_state.get(NAME_KEY, "")
    category_names = [c.name for c in form.categories]
    selected = st.session_state.get(CATEGORY_KEY)
    form.select_category(category_names.index(selected) if selected in category_names else 0)
    form.ingredient_amount = st.session_state.get(INGREDIENT_AMOUNT_KEY, "")
    form.ingredient_name = st.session_state.get(INGREDIENT_NAME_KEY, "")
    label = st.session_state.get(RATING_KEY, rating_label(DEFAULT_RATING))
    form.set_rating(RATING_LABELS.index(label) + MIN_RATING)


def _add_ingredient(app: RecipeApp) -> None:
    form = app.form
    if form is None:
        return
    _sync_form(form)
    if form.add_ingredient_draft():
        st.session_state[INGREDIENT_AMOUNT_KEY] = form.ingredient_amount
        st.session_state[INGREDIENT_NAME_KEY] = form.ingredient_name


def _save(app: RecipeApp) -> None:
    if app.form is None:
        return
    _sync_form(app.form)
    app.submit_add()


def render_add_screen(app: RecipeApp) -> None:
    """
    Render the add recipe form.

    Args:
        app: Session RecipeApp with an open form
    """
    form = app.form
    if form is None:
        # Add route reached without open_add(); start an empty draft.
        form = app.form = AddRecipeForm(app.categories)

    page_header("Add Recipe", back=app.cancel_add, back_key="add_back")

    st.text_input("Recipe Name", key=NAME_KEY)

    st.selectbox(
        "Category",
        options=[c.name for c in form.categories],
        key=CATEGORY_KEY,
    )

    st.markdown("Ingredients:")
    col_amount, col_name, col_add = st.columns([2, 2, 1], vertical_alignment="bottom")
    with col_amount:
        st.text_input("Amount", key=INGREDIENT_AMOUNT_KEY)
    with col_name:
        st.text_input("Name", key=INGREDIENT_NAME_KEY)
    with col_add:
        st.button("Add", key="add_ingredient", on_click=_add_ingredient, args=(app,))

    for ingredient in form.ingredients:
        st.text(ingredient_line(ingredient))

    st.radio(
        "Rating:",
        options=RATING_LABELS,
        index=DEFAULT_RATING - MIN_RATING,
        horizontal=True,
        key=RATING_KEY,
    )

    if AppConfig.show_validation_feedback():
        for problem in form.errors:
            show_error(problem)

    col_save, col_cancel, _ = st.columns([1, 1, 4])
    with col_save:
        st.button("Save", key="save_recipe", type="primary", on_click=_save, args=(app,))
    with col_cancel:
        st.button("Cancel", key="cancel_recipe", on_click=app.cancel_add)
