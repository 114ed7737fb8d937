"""Orbiter payloads, their wrapper and the module genesis state."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from orbiter.errors import NilPointerError
from orbiter.orbit import Action, Orbit


@dataclass
class Payload:
    """Actions to run before routing, and the orbit to route to."""

    orbit: Orbit | None = None
    pre_actions: list[Action | None] = field(default_factory=list)

    def validate(self) -> None:
        """Raise if any pre-action or the orbit is not valid."""
        for action in self.pre_actions:
            if action is None:
                raise NilPointerError("action is a nil pointer")
            action.validate()
        if self.orbit is None:
            raise NilPointerError("orbit is a nil pointer")
        self.orbit.validate()


def new_payload(
    orbit: Orbit | None, pre_actions: Iterable[Action | None] | None = None
) -> Payload:
    """Return a validated payload; missing pre-actions become an empty list."""
    payload = Payload(orbit=orbit, pre_actions=list(pre_actions or []))
    payload.validate()
    return payload


@dataclass
class PayloadWrapper:
    """The envelope that carries an orbiter payload."""

    orbiter: Payload | None = None

    def validate(self) -> None:
        """Raise if the wrapped payload is missing or not valid."""
        if self.orbiter is None:
            raise NilPointerError("payload is a nil pointer")
        self.orbiter.validate()


def new_payload_wrapper(
    orbit: Orbit | None, pre_actions: Iterable[Action | None] | None = None
) -> PayloadWrapper:
    """Return a wrapper around a newly validated payload."""
    return PayloadWrapper(orbiter=new_payload(orbit, pre_actions))


@dataclass
class GenesisState:
    """Genesis state of the module; it carries no fields."""

    def validate(self) -> None:
        """An empty genesis state is always valid."""
        return None


def default_genesis_state() -> GenesisState:
    """Return the default genesis state."""
    return GenesisState()