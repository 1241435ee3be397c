"""
Add Recipe Form State Module.

This module holds the draft state of the Add screen and the operations the
screen's controls trigger. It knows nothing about the UI toolkit: the Streamlit
screen copies widget values in, calls an operation, and renders the result.

Draft fields:
- `name`: recipe name (default "")
- `selected_category_index`: index into the category list (default 0)
- `ingredients`: ingredients added so far (default empty)
- `ingredient_name` / `ingredient_amount`: the one ingredient being composed
- `rating`: star rating (default 3)

# NOTE: Failed validation is a no-op for the user. The problems are kept on
    `errors` so the screen can optionally show them.
"""

import logging
from typing import Callable, List, Optional, Sequence

from .errors import ValidationError
from .models import Category, Ingredient, NewRecipe, Recipe

logger = logging.getLogger(__name__)

DEFAULT_RATING = 3


class AddRecipeForm:
    """Transient, not-yet-stored recipe draft."""

    def __init__(self, categories: Sequence[Category]):
        """
        Args:
            categories: Categories offered by the category selector; must not be empty
        """
        if not categories:
            raise ValueError("AddRecipeForm needs at least one category")
        self.categories: List[Category] = list(categories)
        self.name: str = ""
        self.selected_category_index: int = 0
        self.ingredients: List[Ingredient] = []
        self.ingredient_name: str = ""
        self.ingredient_amount: str = ""
        self.rating: int = DEFAULT_RATING
        self.errors: List[str] = []

    @property
    def selected_category(self) -> Category:
        return self.categories[self.selected_category_index]

    def select_category(self, index: int) -> None:
        """Select the category at `index` in the category list."""
        if not 0 <= index < len(self.categories):
            raise IndexError(f"category index {index} out of range")
        self.selected_category_index = index

    def set_rating(self, rating: int) -> None:
        # Bounded by the five-star selector.
        self.rating = rating

    def add_ingredient_draft(self) -> bool:
        """
        Move the ingredient being composed into the ingredient list.

        Both fields must be non-blank; otherwise nothing changes.

        Returns:
            True if an ingredient was appended
        """
        if not self.ingredient_name.strip() or not self.ingredient_amount.strip():
            logger.debug("Ignoring incomplete ingredient (name=%r, amount=%r)",
                         self.ingredient_name, self.ingredient_amount)
            return False
        self.ingredients.append(Ingredient(name=self.ingredient_name, amount=self.ingredient_amount))
        self.ingredient_name = ""
        self.ingredient_amount = ""
        return True

    def validate(self) -> NewRecipe:
        """
        Assemble the draft into a NewRecipe.

        Returns:
            NewRecipe with the selected category

        Raises:
            ValidationError: If the name is blank or no ingredients were added
        """
        problems = []
        if not self.name.strip():
            problems.append("Recipe name is required")
        if not self.ingredients:
            problems.append("Add at least one ingredient")
        if problems:
            raise ValidationError(problems)

        return NewRecipe(
            name=self.name,
            category=self.selected_category,
            ingredients=self.ingredients,
            rating=self.rating,
        )

    def submit(self, on_add: Callable[[NewRecipe], Recipe]) -> Optional[Recipe]:
        """
        Hand the draft to `on_add` if it is complete.

        Args:
            on_add: Callback that stores the draft and navigates away

        Returns:
            The stored Recipe, or None if the draft was incomplete
        """
        try:
            draft = self.validate()
        except ValidationError as exc:
            self.errors = exc.problems
            logger.debug("Submit ignored: %s", exc)
            return None

        self.errors = []
        return on_add(draft)

    def cancel(self, on_cancel: Callable[[], None]) -> None:
        """Leave the form without storing anything."""
        on_cancel()
