"""
Application root.

RecipeApp owns the recipe store, the navigator, the category list and the Add
form while it is open. Screens get read access to the store and call the
methods below instead of mutating anything themselves:

- open_recipe / open_add: list screen actions
- go_back: detail screen back action, add screen cancel
- submit_add / save_recipe: add screen save action
- view_recipe: detail screen lookup

The app subscribes to its own store and navigator to log UI events, to drop the
Add form once the user leaves the add screen, and to leave a one-shot notice for
the list screen after a recipe was added.
"""

import logging
from typing import Iterable, List, Optional

from . import events
from .forms import AddRecipeForm
from .models import Category, NewRecipe, Recipe
from .navigation import AddRoute, DetailRoute, Navigator, Route
from .seed import get_categories, get_seed_recipes
from .store import RecipeStore

logger = logging.getLogger(__name__)


class RecipeApp:
    """State and callbacks for one user session."""

    def __init__(
        self,
        categories: Optional[Iterable[Category]] = None,
        recipes: Optional[Iterable[Recipe]] = None,
        session_id: Optional[str] = None,
    ):
        """
        Args:
            categories: Category list for the add form (default: sample categories)
            recipes: Initial recipes (default: sample recipes)
            session_id: Identifier attached to logged UI events
        """
        self.session_id = session_id
        self.categories: List[Category] = list(categories) if categories is not None else get_categories()
        self.store = RecipeStore(recipes if recipes is not None else get_seed_recipes())
        self.navigator = Navigator()
        self.form: Optional[AddRecipeForm] = None
        self._notice: Optional[str] = None

        self.store.subscribe(self._on_recipe_added)
        self.navigator.subscribe(self._on_route_changed)

    @property
    def route(self) -> Route:
        return self.navigator.current

    def open_recipe(self, recipe_id: int) -> None:
        found = self.store.find_by_id(recipe_id) is not None
        self.navigator.navigate(DetailRoute(recipe_id=recipe_id))
        events.log_recipe_viewed(self.session_id, recipe_id, found=found)

    def open_add(self) -> AddRecipeForm:
        """
        Open the add screen with a fresh draft.

        Returns:
            The new AddRecipeForm
        """
        self.form = AddRecipeForm(self.categories)
        self.navigator.navigate(AddRoute())
        return self.form

    def go_back(self) -> bool:
        return self.navigator.pop()

    def save_recipe(self, draft: NewRecipe) -> Recipe:
        """
        Store a validated draft and return to the previous screen.

        Args:
            draft: Complete recipe payload from the add form

        Returns:
            The stored Recipe
        """
        recipe = self.store.add(draft)
        self.navigator.pop()
        return recipe

    def submit_add(self) -> Optional[Recipe]:
        """
        Submit the open add form.

        Returns:
            The stored Recipe, or None if no form is open or it is incomplete
        """
        if self.form is None:
            return None
        return self.form.submit(self.save_recipe)

    def cancel_add(self) -> None:
        if self.form is None:
            self.go_back()
            return
        self.form.cancel(self.go_back)

    def view_recipe(self, recipe_id: int) -> Optional[Recipe]:
        """
        Resolve the recipe for the detail screen.

        Returns:
            The Recipe, or None for an unknown id (the screen then renders nothing)
        """
        recipe = self.store.find_by_id(recipe_id)
        if recipe is None:
            logger.debug("Detail requested for unknown recipe %d", recipe_id)
        return recipe

    def pop_notice(self) -> Optional[str]:
        """Return and clear the pending notice for the list screen."""
        notice, self._notice = self._notice, None
        return notice

    def _on_recipe_added(self, recipe: Recipe) -> None:
        self._notice = f"Added {recipe.name}"
        events.log_recipe_added(
            self.session_id,
            recipe_id=recipe.id,
            category=recipe.category.name,
            ingredient_count=len(recipe.ingredients),
            rating=recipe.rating,
        )

    def _on_route_changed(self, route: Route) -> None:
        if not isinstance(route, AddRoute):
            self.form = None
        events.log_navigation(self.session_id, route.name)
