"""
Tests for the recipe data models.

This module tests Category, Ingredient, NewRecipe and Recipe including:
- Immutability of value records
- Deep value equality
- Rating bounds
- Building a stored Recipe from a draft
"""

import pydantic
import pytest

from recipebook.models import Category, Ingredient, NewRecipe, Recipe


DESSERT = Category(id=1, name="Dessert")


class TestValueRecords:
    """Test cases for Category and Ingredient."""

    def test_category_is_immutable(self):
        """Assigning to a field of a frozen model fails."""
        with pytest.raises(pydantic.ValidationError):
            DESSERT.name = "Cake"

    def test_ingredient_equality_is_by_value(self):
        """Two ingredients with the same fields are equal."""
        assert Ingredient(name="Flour", amount="2 cups") == Ingredient(name="Flour", amount="2 cups")
        assert Ingredient(name="Flour", amount="2 cups") != Ingredient(name="Flour", amount="3 cups")


class TestRecipe:
    """Test cases for NewRecipe and Recipe."""

    def test_ingredients_are_stored_as_tuple(self):
        """A list of ingredients is converted to an immutable tuple."""
        draft = NewRecipe(
            name="Cake",
            category=DESSERT,
            ingredients=[Ingredient(name="Flour", amount="2 cups")],
            rating=4,
        )
        assert isinstance(draft.ingredients, tuple)
        assert draft.ingredients[0].name == "Flour"

    def test_new_recipe_default_rating(self):
        """A draft without rating gets 3 stars."""
        draft = NewRecipe(name="Cake", category=DESSERT)
        assert draft.rating == 3
        assert draft.ingredients == ()

    @pytest.mark.parametrize("rating", [0, 6, -1])
    def test_rating_out_of_range_rejected(self, rating):
        """Ratings outside 1..5 are rejected by the model."""
        with pytest.raises(pydantic.ValidationError):
            NewRecipe(name="Cake", category=DESSERT, rating=rating)

    def test_from_new_copies_fields_and_sets_id(self):
        """Recipe.from_new keeps every draft field and adds the id."""
        draft = NewRecipe(
            name="Cake",
            category=DESSERT,
            ingredients=[Ingredient(name="Flour", amount="2 cups")],
            rating=5,
        )
        recipe = Recipe.from_new(draft, 7)

        assert recipe.id == 7
        assert recipe.name == "Cake"
        assert recipe.category == DESSERT
        assert recipe.ingredients == draft.ingredients
        assert recipe.rating == 5

    def test_category_held_by_value(self):
        """The recipe carries the full category record, not just its id."""
        recipe = Recipe(id=1, name="Cake", category=DESSERT, rating=5)
        assert recipe.category.name == "Dessert"
