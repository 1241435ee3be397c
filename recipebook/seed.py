"""
Sample Data Module.

This module contains the categories and recipes that exist when the app starts.
Nothing here is persisted: every new session begins from exactly this data.
"""

from typing import List

from .models import Category, Ingredient, Recipe

DESSERT = Category(id=1, name="Dessert")
MAIN_COURSE = Category(id=2, name="Main Course")
APPETIZER = Category(id=3, name="Appetizer")

CATEGORIES = (DESSERT, MAIN_COURSE, APPETIZER)

_RECIPES = (
    Recipe(
        id=1,
        name="Chocolate Cake",
        category=DESSERT,
        ingredients=[
            Ingredient(name="Flour", amount="2 cups"),
            Ingredient(name="Cocoa Powder", amount="1/2 cup"),
        ],
        rating=5,
    ),
    Recipe(
        id=2,
        name="Caesar Salad",
        category=APPETIZER,
        ingredients=[
            Ingredient(name="Lettuce", amount="1 bunch"),
            Ingredient(name="Croutons", amount="1 cup"),
        ],
        rating=4,
    ),
)


def get_categories() -> List[Category]:
    """Return the sample categories in display order."""
    return list(CATEGORIES)


def get_seed_recipes() -> List[Recipe]:
    """
    Return the sample recipes in display order.

    Recipes are immutable, so the same instances can be shared between stores;
    the returned list itself is always a fresh copy.
    """
    return list(_RECIPES)
