"""
Text helpers shared by the list, detail and add screens.
"""

import re
from typing import Iterable, List

import pandas as pd

from .models import MAX_RATING, Ingredient

FILLED_STAR = "★"
EMPTY_STAR = "☆"

_MARKDOWN_SPECIAL = re.compile(r"([\\`*_{}\[\]()#+\-.!|<>~$])")


def escape_markdown(text: str) -> str:
    """
    Backslash-escape markdown syntax so user text renders literally.

    Args:
        text: Text typed by the user, e.g. a recipe name

    Returns:
        Text safe to embed in an st.markdown string, e.g. "*Tea*" -> "\\*Tea\\*"
    """
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


def rating_stars(rating: int) -> str:
    """One filled star per rating point, e.g. 3 -> "★★★"."""
    return FILLED_STAR * rating


def rating_selector_glyphs(rating: int) -> List[str]:
    """
    Glyphs for the five-star selector.

    Args:
        rating: Currently selected rating

    Returns:
        MAX_RATING glyphs, filled for positions up to and including `rating`
    """
    return [FILLED_STAR if i <= rating else EMPTY_STAR for i in range(1, MAX_RATING + 1)]


def ingredient_line(ingredient: Ingredient) -> str:
    """Render an ingredient as "- <amount> <name>"."""
    return f"- {ingredient.amount} {ingredient.name}"


def ingredients_frame(ingredients: Iterable[Ingredient]) -> pd.DataFrame:
    """
    Tabular view of an ingredient list for st.dataframe.

    Returns:
        DataFrame with columns Amount, Ingredient in list order
    """
    rows = [{"Amount": i.amount, "Ingredient": i.name} for i in ingredients]
    return pd.DataFrame(rows, columns=["Amount", "Ingredient"])
