"""A sealable router mapping identifiers to handlers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from orbiter.errors import OrbiterError

IdT = TypeVar("IdT")
RouteT = TypeVar("RouteT", bound="Routable")


class Routable(ABC, Generic[IdT]):
    """A component that can be registered in a router."""

    @abstractmethod
    def id(self) -> IdT:
        """Return the component's identifier."""


class Router(Generic[IdT, RouteT]):
    """Routes by identifier; once sealed, no routes can be added."""

    def __init__(self) -> None:
        self._routes: dict[IdT, RouteT] = {}
        self._sealed = False

    def seal(self) -> None:
        """Prevent further route additions."""
        self._sealed = True

    def is_sealed(self) -> bool:
        """Return whether the router is sealed."""
        return self._sealed

    def add_route(self, route: RouteT) -> None:
        """Register a route under its identifier."""
        if self._sealed:
            raise RuntimeError("cannot add route to sealed router")
        route_id = route.id()
        try:
            route_id.validate()
        except OrbiterError as err:
            raise ValueError("route id is not valid") from err
        if self.has_route(route_id):
            raise ValueError("route is already set")
        self._routes[route_id] = route

    def has_route(self, route_id: IdT) -> bool:
        """Return whether a route exists for the identifier."""
        return route_id in self._routes

    def route(self, route_id: IdT) -> RouteT | None:
        """Return the route for the identifier, or None if there is none."""
        return self._routes.get(route_id)