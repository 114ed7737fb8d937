"""Interface registry and JSON encoding of orbiter messages."""

from __future__ import annotations

import base64
import binascii
import dataclasses
import json
from enum import Enum
from typing import Any

from orbiter.errors import UnresolvedTypeError, ValidationError
from orbiter.ids import ActionID, ProtocolID
from orbiter.orbit import (
    Action,
    ActionAttributes,
    Orbit,
    OrbitAttributes,
    PackedAny,
    pack_any,
    type_url_for,
)
from orbiter.payload import GenesisState, Payload, PayloadWrapper

ORBIT_ATTRIBUTES_NAME = "noble.orbiter.v1.OrbitAttributes"
ACTION_ATTRIBUTES_NAME = "noble.orbiter.v1.ActionAttributes"


class InterfaceRegistry:
    """Maps interfaces to the concrete message classes that implement them."""

    def __init__(self) -> None:
        self._interfaces: dict[str, type] = {}
        self._implementations: dict[type, dict[str, type]] = {}

    def register_interface(self, name: str, interface: type) -> None:
        """Register an interface under its fully qualified name."""
        if not isinstance(interface, type):
            raise TypeError(f"{interface!r} is not an interface type")
        self._interfaces[name] = interface
        self._implementations.setdefault(interface, {})

    def register_implementations(self, interface: type, *args: type) -> None:
        """Register message classes as implementations of an interface."""
        implementations = self._implementations.setdefault(interface, {})
        for implementation in args:
            if not (
                isinstance(implementation, type)
                and issubclass(implementation, interface)
            ):
                raise TypeError(
                    f"{implementation!r} does not implement {interface.__name__}"
                )
            type_url = type_url_for(implementation)
            existing = implementations.get(type_url)
            if existing is not None and existing is not implementation:
                raise ValueError(
                    f"concrete type {existing.__name__} has already been "
                    f"registered under type URL {type_url}"
                )
            implementations[type_url] = implementation

    def resolve(self, type_url: str, interface: type | str) -> type:
        """Return the class registered for a type URL under an interface.

        The interface may be given as a class or as its registered name.
        """
        if isinstance(interface, str):
            try:
                interface = self._interfaces[interface]
            except KeyError:
                raise UnresolvedTypeError(
                    f"interface {interface} is not registered"
                ) from None
        implementation = self._implementations.get(interface, {}).get(type_url)
        if implementation is None:
            raise UnresolvedTypeError(type_url)
        return implementation


def register_interfaces(registry: InterfaceRegistry) -> None:
    """Register the interfaces defined by the orbiter module."""
    registry.register_interface(ORBIT_ATTRIBUTES_NAME, OrbitAttributes)
    registry.register_interface(ACTION_ATTRIBUTES_NAME, ActionAttributes)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _is_bytes_field(field: dataclasses.Field) -> bool:
    return field.type is bytes or field.type == "bytes"


def _encode_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _encode_fields(value)
    if isinstance(value, (list, tuple)):
        return [_encode_value(item) for item in value]
    return value


def _encode_fields(message: Any) -> dict[str, Any]:
    return {
        _camel(f.name): _encode_value(getattr(message, f.name))
        for f in dataclasses.fields(message)
    }


def _enum_name(enum_type: type[Enum], value: Any) -> Any:
    try:
        return enum_type(value).name
    except ValueError:
        return int(value)


def _encode_any(
    registry: InterfaceRegistry, packed: PackedAny | None, interface: type
) -> dict[str, Any] | None:
    if packed is None:
        return None
    registry.resolve(packed.type_url, interface)
    encoded: dict[str, Any] = {"@type": packed.type_url}
    encoded.update(_encode_fields(packed.cached_value()))
    return encoded


def _encode_orbit(registry: InterfaceRegistry, orbit: Orbit | None) -> Any:
    if orbit is None:
        return None
    encoded = {
        "protocolId": _enum_name(ProtocolID, orbit.protocol_id),
        "attributes": _encode_any(registry, orbit.attributes, OrbitAttributes),
    }
    if orbit.passthrough_payload is not None:
        encoded["passthroughPayload"] = _encode_value(orbit.passthrough_payload)
    return encoded


def _encode_action(registry: InterfaceRegistry, action: Action | None) -> Any:
    if action is None:
        return None
    return {
        "id": _enum_name(ActionID, action.id),
        "attributes": _encode_any(registry, action.attributes, ActionAttributes),
    }


def _encode_payload(registry: InterfaceRegistry, payload: Payload | None) -> Any:
    if payload is None:
        return None
    return {
        "orbit": _encode_orbit(registry, payload.orbit),
        "preActions": [_encode_action(registry, a) for a in payload.pre_actions],
    }


def _encode(registry: InterfaceRegistry, message: Any) -> Any:
    if isinstance(message, PayloadWrapper):
        return {"orbiter": _encode_payload(registry, message.orbiter)}
    if isinstance(message, Payload):
        return _encode_payload(registry, message)
    if isinstance(message, Orbit):
        return _encode_orbit(registry, message)
    if isinstance(message, Action):
        return _encode_action(registry, message)
    if isinstance(message, GenesisState):
        return {}
    raise TypeError(f"cannot marshal {type(message).__name__}")


def marshal_json(registry: InterfaceRegistry, message: Any) -> bytes:
    """Encode a message as JSON, resolving packed attributes in the registry."""
    return json.dumps(_encode(registry, message), separators=(",", ":")).encode()


def _require_object(data: Any, allowed: set[str], what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValidationError(f"{what} must be a JSON object")
    unknown = set(data) - allowed
    if unknown:
        raise ValidationError(f"unknown field {sorted(unknown)[0]!r} in {what}")
    return data


def _decode_bytes(value: Any) -> bytes:
    if not isinstance(value, str):
        raise ValidationError("bytes must be encoded as a base64 string")
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as err:
        raise ValidationError(f"invalid base64 bytes: {err}") from err


def _decode_enum(enum_type: type[Enum], value: Any) -> Any:
    if value is None:
        return enum_type(0)
    if isinstance(value, str):
        try:
            return enum_type[value]
        except KeyError:
            raise ValidationError(
                f"unknown value {value!r} for enum {enum_type.__name__}"
            ) from None
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return enum_type(value)
        except ValueError:
            raise ValidationError(
                f"unknown value {value} for enum {enum_type.__name__}"
            ) from None
    raise ValidationError(f"invalid value {value!r} for enum {enum_type.__name__}")


def _decode_any(
    registry: InterfaceRegistry, data: Any, interface: type
) -> PackedAny | None:
    if data is None:
        return None
    if not isinstance(data, dict):
        raise ValidationError("Any must be a JSON object")
    type_url = data.get("@type")
    if not isinstance(type_url, str) or not type_url:
        raise ValidationError("Any JSON is missing the @type field")
    message_type = registry.resolve(type_url, interface)
    fields = {_camel(f.name): f for f in dataclasses.fields(message_type)}
    _require_object(data, set(fields) | {"@type"}, type_url)
    kwargs: dict[str, Any] = {}
    for key, field in fields.items():
        if key not in data:
            continue
        value = data[key]
        if _is_bytes_field(field) and value is not None:
            value = _decode_bytes(value)
        kwargs[field.name] = value
    return pack_any(message_type(**kwargs))


def _decode_orbit(registry: InterfaceRegistry, data: Any) -> Orbit | None:
    if data is None:
        return None
    data = _require_object(
        data, {"protocolId", "attributes", "passthroughPayload"}, "orbit"
    )
    passthrough = data.get("passthroughPayload")
    return Orbit(
        protocol_id=_decode_enum(ProtocolID, data.get("protocolId")),
        attributes=_decode_any(registry, data.get("attributes"), OrbitAttributes),
        passthrough_payload=None if passthrough is None else _decode_bytes(passthrough),
    )


def _decode_action(registry: InterfaceRegistry, data: Any) -> Action | None:
    if data is None:
        return None
    data = _require_object(data, {"id", "attributes"}, "action")
    return Action(
        id=_decode_enum(ActionID, data.get("id")),
        attributes=_decode_any(registry, data.get("attributes"), ActionAttributes),
    )


def _decode_payload(registry: InterfaceRegistry, data: Any) -> Payload | None:
    if data is None:
        return None
    data = _require_object(data, {"orbit", "preActions"}, "payload")
    pre_actions = data.get("preActions") or []
    if not isinstance(pre_actions, list):
        raise ValidationError("preActions must be a JSON array")
    return Payload(
        orbit=_decode_orbit(registry, data.get("orbit")),
        pre_actions=[_decode_action(registry, item) for item in pre_actions],
    )


def _decode_wrapper(registry: InterfaceRegistry, data: Any) -> PayloadWrapper:
    data = _require_object(data, {"orbiter"}, "payload wrapper")
    return PayloadWrapper(orbiter=_decode_payload(registry, data.get("orbiter")))


def _decode_genesis(registry: InterfaceRegistry, data: Any) -> GenesisState:
    _require_object(data, set(), "genesis state")
    return GenesisState()


def _decode_required(decoder: Any, what: str) -> Any:
    def decode(registry: InterfaceRegistry, data: Any) -> Any:
        if data is None:
            raise ValidationError(f"{what} JSON must not be null")
        return decoder(registry, data)

    return decode


_DECODERS = {
    Payload: _decode_required(_decode_payload, "payload"),
    PayloadWrapper: _decode_wrapper,
    Orbit: _decode_required(_decode_orbit, "orbit"),
    Action: _decode_required(_decode_action, "action"),
    GenesisState: _decode_genesis,
}


def unmarshal_json(
    registry: InterfaceRegistry, raw: bytes | str, message_type: type
) -> Any:
    """Decode JSON into an instance of the message type."""
    decoder = _DECODERS.get(message_type)
    if decoder is None:
        raise TypeError(f"cannot unmarshal {message_type.__name__}")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as err:
        raise ValidationError(f"invalid JSON: {err}") from err
    return decoder(registry, data)