"""
Recipe data models.

Category, Ingredient and Recipe are immutable value records. A Recipe holds its
Category by value (not by id), and its ingredients as an ordered tuple.

NewRecipe is the payload handed to the store by the Add screen: every Recipe
field except the id, which only the store assigns.
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

MIN_RATING = 1
MAX_RATING = 5


class Category(BaseModel):
    """A recipe category such as "Dessert"."""

    id: int = Field(..., description="Category identifier")
    name: str = Field(..., description="Display name")

    model_config = ConfigDict(frozen=True)


class Ingredient(BaseModel):
    """
    One ingredient line of a recipe.

    The amount is free text ("2 cups", "1/2 cup", "1 bunch") and is never parsed.
    """

    name: str = Field(..., description="Ingredient name, e.g. 'Flour'")
    amount: str = Field(..., description="Free-text amount, e.g. '2 cups'")

    model_config = ConfigDict(frozen=True)


class NewRecipe(BaseModel):
    """A recipe that has not been stored yet and therefore has no id."""

    name: str = Field(..., description="Recipe name")
    category: Category = Field(..., description="Category, held by value")
    ingredients: Tuple[Ingredient, ...] = Field(default=(), description="Ordered ingredient list")
    rating: int = Field(3, ge=MIN_RATING, le=MAX_RATING, description="Star rating 1-5")

    model_config = ConfigDict(frozen=True)


class Recipe(NewRecipe):
    """A stored recipe. The id is unique within its store."""

    id: int = Field(..., description="Store-assigned identifier")

    @classmethod
    def from_new(cls, draft: NewRecipe, recipe_id: int) -> "Recipe":
        """
        Build a stored Recipe from a draft and the id the store picked for it.

        Args:
            draft: Recipe payload without id
            recipe_id: Identifier assigned by the store

        Returns:
            Recipe with the same field values as the draft plus the id
        """
        return cls(
            id=recipe_id,
            name=draft.name,
            category=draft.category,
            ingredients=draft.ingredients,
            rating=draft.rating,
        )
