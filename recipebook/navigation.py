"""
Navigation between the list, detail and add screens.

Routes are small typed values. The detail route carries its recipe id as an int,
so no screen ever has to parse an id out of a path string. The route name
("list", "detail/3", "add") exists only for logging and events.

The Navigator keeps the current route plus a back-stack. The app is at most two
levels deep (list -> detail, list -> add), but the stack works for any depth.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Tuple, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListRoute:
    """The recipe list; start destination."""

    @property
    def name(self) -> str:
        return "list"


@dataclass(frozen=True)
class DetailRoute:
    """Detail view of one recipe."""

    recipe_id: int

    @property
    def name(self) -> str:
        return f"detail/{self.recipe_id}"


@dataclass(frozen=True)
class AddRoute:
    """The add recipe form."""

    @property
    def name(self) -> str:
        return "add"


Route = Union[ListRoute, DetailRoute, AddRoute]
RouteListener = Callable[[Route], None]


class Navigator:
    """
    Current route plus back-stack.

    Listeners are called with the new current route after every change.
    """

    def __init__(self, start: Route = ListRoute()):
        self._current: Route = start
        self._back_stack: List[Route] = []
        self._listeners: List[RouteListener] = []

    @property
    def current(self) -> Route:
        return self._current

    @property
    def back_stack(self) -> Tuple[Route, ...]:
        return tuple(self._back_stack)

    @property
    def can_go_back(self) -> bool:
        return bool(self._back_stack)

    def navigate(self, route: Route) -> None:
        """
        Push the current route and make `route` current.

        Args:
            route: Destination route
        """
        logger.debug("Navigate %s -> %s", self._current.name, route.name)
        self._back_stack.append(self._current)
        self._current = route
        self._notify()

    def pop(self) -> bool:
        """
        Return to the previous route.

        Returns:
            True if the navigator moved back, False if already at the root
        """
        if not self._back_stack:
            return False
        previous = self._back_stack.pop()
        logger.debug("Back %s -> %s", self._current.name, previous.name)
        self._current = previous
        self._notify()
        return True

    def subscribe(self, listener: RouteListener) -> Callable[[], None]:
        """
        Register a listener called with the new route after each change.

        Returns:
            Function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._current)
