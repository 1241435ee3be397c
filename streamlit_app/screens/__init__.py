"""
Screens of the recipe book: list, detail and add.

Each screen renders one route of the RecipeApp navigator and wires its buttons
to RecipeApp callbacks. Screens never change the store themselves.
"""
