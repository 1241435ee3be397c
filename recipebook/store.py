"""
In-memory recipe store.

The store owns the ordered list of recipes for one application instance. It is
the only place that assigns recipe ids: a new recipe gets max(existing ids) + 1,
or 1 for an empty store.

The store:
- Keeps recipes in insertion order, which is also the list screen order
- Hands out read-only snapshots (tuples), never its internal list
- Notifies subscribed listeners after every successful add

Note: The store performs no validation of names or ingredients. Callers (the
Add form) reject incomplete drafts before calling add().
"""

import logging
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from .models import NewRecipe, Recipe

logger = logging.getLogger(__name__)

RecipeListener = Callable[[Recipe], None]


class RecipeStore:
    """Ordered, append-only collection of recipes."""

    def __init__(self, recipes: Optional[Iterable[Recipe]] = None):
        self._recipes: List[Recipe] = list(recipes or [])
        self._listeners: List[RecipeListener] = []

    def list(self) -> Tuple[Recipe, ...]:
        """
        Get the current recipes.

        Returns:
            Tuple of recipes in insertion order
        """
        return tuple(self._recipes)

    def next_id(self) -> int:
        """Id the next added recipe will receive."""
        return max((recipe.id for recipe in self._recipes), default=0) + 1

    def add(self, draft: NewRecipe) -> Recipe:
        """
        Store a new recipe.

        Args:
            draft: Recipe payload without id

        Returns:
            The stored Recipe, carrying its newly assigned id
        """
        recipe = Recipe.from_new(draft, self.next_id())
        self._recipes.append(recipe)
        logger.info("Added recipe %d (%s)", recipe.id, recipe.name)

        for listener in list(self._listeners):
            listener(recipe)
        return recipe

    def find_by_id(self, recipe_id: int) -> Optional[Recipe]:
        """
        Look up a recipe by id.

        Args:
            recipe_id: Any integer, including ids that were never issued

        Returns:
            The matching Recipe, or None if there is none
        """
        for recipe in self._recipes:
            if recipe.id == recipe_id:
                return recipe
        return None

    def subscribe(self, listener: RecipeListener) -> Callable[[], None]:
        """
        Register a listener called with each recipe after it is added.

        Args:
            listener: Callable receiving the stored Recipe

        Returns:
            Function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def __len__(self) -> int:
        return len(self._recipes)

    def __iter__(self) -> Iterator[Recipe]:
        return iter(self.list())
