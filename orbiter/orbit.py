"""Orbits, actions and the identifiers that describe cross-chain routes."""

from __future__ import annotations

import dataclasses
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from orbiter.errors import (
    InvalidTypeError,
    NilPointerError,
    OrbiterError,
    PackAnyError,
    ValidationError,
)
from orbiter.ids import ActionID, ProtocolID, new_action_id, new_protocol_id

_ORBIT_ID_SEPARATOR = ":"
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class OrbitAttributes(ABC):
    """Protocol specific routing attributes of an orbit.

    Concrete attributes are dataclasses.
    """

    @abstractmethod
    def counterparty_id(self) -> str:
        """Return the destination chain identifier."""


class ActionAttributes(ABC):
    """Attributes of an action. Concrete attributes are dataclasses."""


def type_url_for(message_type: type) -> str:
    """Return the type URL under which a message class is packed."""
    name = getattr(message_type, "PROTO_NAME", None)
    if not name:
        name = f"{message_type.__module__}.{message_type.__qualname__}"
    return f"/{name}"


@dataclass
class PackedAny:
    """A message packed with its type URL; the message itself is kept."""

    type_url: str = ""
    value: Any = None

    def cached_value(self) -> Any:
        """Return the message held before packing."""
        return self.value


def pack_any(message: Any) -> PackedAny:
    """Pack a dataclass message together with its type URL."""
    if (
        message is None
        or isinstance(message, type)
        or not dataclasses.is_dataclass(message)
    ):
        raise PackAnyError(f"can't proto marshal {type(message).__name__}")
    return PackedAny(type_url=type_url_for(type(message)), value=message)


@dataclass(frozen=True)
class OrbitID:
    """A source or destination of a transfer and the bridge protocol used."""

    protocol_id: ProtocolID
    counterparty_id: str

    def validate(self) -> None:
        """Raise if the protocol or the counterparty is not valid."""
        new_protocol_id(self.protocol_id)
        if not self.counterparty_id:
            raise ValidationError("counterparty id cannot be empty string")

    def id(self) -> str:
        """Return the string that encodes protocol and counterparty."""
        protocol = int(self.protocol_id) & 0xFFFFFFFF
        return f"{protocol}{_ORBIT_ID_SEPARATOR}{self.counterparty_id}"

    def __str__(self) -> str:
        return self.id()


def new_orbit_id(protocol_id: int, counterparty_id: str) -> OrbitID:
    """Return a validated orbit identifier."""
    OrbitID(protocol_id, counterparty_id).validate()
    return OrbitID(ProtocolID(protocol_id), counterparty_id)


def parse_orbit_id(text: str) -> OrbitID:
    """Parse the string form produced by OrbitID.id."""
    protocol_text, separator, counterparty_id = text.partition(_ORBIT_ID_SEPARATOR)
    if not separator:
        raise ValidationError(
            f"invalid orbit ID format: missing separator in {text}"
        )
    if not _INT_PATTERN.fullmatch(protocol_text):
        raise ValidationError(
            f'invalid protocol ID: parsing "{protocol_text}": invalid syntax'
        )
    value = int(protocol_text)
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValidationError(
            f'invalid protocol ID: parsing "{protocol_text}": value out of range'
        )
    try:
        return new_orbit_id(value, counterparty_id)
    except OrbiterError as err:
        raise ValidationError(f"invalid orbit ID string {text}: {err}") from err


@dataclass
class Orbit:
    """Routing information for the destination of a transfer."""

    protocol_id: ProtocolID = ProtocolID.PROTOCOL_UNSUPPORTED
    attributes: PackedAny | None = None
    passthrough_payload: bytes | None = None

    def validate(self) -> None:
        """Raise if the protocol is not supported or attributes are missing."""
        new_protocol_id(self.protocol_id)
        if self.attributes is None:
            raise NilPointerError("orbit attributes are not set")

    def cached_attributes(self) -> OrbitAttributes:
        """Return the unpacked orbit attributes."""
        if self.attributes is None:
            raise NilPointerError("orbit attributes are not set")
        value = self.attributes.cached_value()
        if not isinstance(value, OrbitAttributes):
            raise InvalidTypeError(
                f"expected OrbitAttributes, got {type(value).__name__}"
            )
        return value

    def set_attributes(self, attributes: OrbitAttributes) -> None:
        """Pack the attributes into the orbit."""
        if not isinstance(attributes, OrbitAttributes):
            raise PackAnyError(f"can't proto marshal {type(attributes).__name__}")
        self.attributes = pack_any(attributes)


def new_orbit(
    protocol_id: ProtocolID,
    attributes: OrbitAttributes,
    passthrough_payload: bytes | None = None,
) -> Orbit:
    """Return a validated orbit with the attributes packed into it.

    The passthrough payload is stored but not used by any protocol yet.
    """
    orbit = Orbit(protocol_id=protocol_id, passthrough_payload=passthrough_payload)
    orbit.set_attributes(attributes)
    orbit.validate()
    return orbit


@dataclass
class Action:
    """An action to perform on a transfer before routing it."""

    id: ActionID = ActionID.ACTION_UNSUPPORTED
    attributes: PackedAny | None = None

    def validate(self) -> None:
        """Raise if the action is not supported or attributes are missing."""
        new_action_id(self.id)
        if self.attributes is None:
            raise NilPointerError("action attributes are not set")

    def cached_attributes(self) -> ActionAttributes:
        """Return the unpacked action attributes."""
        if self.attributes is None:
            raise NilPointerError("action attributes are not set")
        value = self.attributes.cached_value()
        if not isinstance(value, ActionAttributes):
            raise InvalidTypeError(
                f"expected ActionAttributes, got {type(value).__name__}"
            )
        return value

    def set_attributes(self, attributes: ActionAttributes) -> None:
        """Pack the attributes into the action."""
        if not isinstance(attributes, ActionAttributes):
            raise PackAnyError(f"can't proto marshal {type(attributes).__name__}")
        self.attributes = pack_any(attributes)


def new_action(action_id: ActionID, attributes: ActionAttributes) -> Action:
    """Return a validated action with the attributes packed into it."""
    action = Action(id=action_id)
    action.set_attributes(attributes)
    action.validate()
    return action