from __future__ import annotations

import json
from dataclasses import dataclass

import pytest

from orbiter.codec import (
    InterfaceRegistry,
    marshal_json,
    register_interfaces,
    unmarshal_json,
)
from orbiter.errors import UnresolvedTypeError, ValidationError
from orbiter.ids import ActionID, ProtocolID
from orbiter.orbit import (
    ActionAttributes,
    OrbitAttributes,
    new_action,
    new_orbit,
    type_url_for,
)
from orbiter.payload import GenesisState, Payload, PayloadWrapper


@dataclass
class PlanetAttr(OrbitAttributes):
    PROTO_NAME = "noble.orbiter.testdata.TestOrbitAttr"

    planet: str = ""

    def counterparty_id(self) -> str:
        return self.planet


@dataclass
class WhateverAttr(ActionAttributes):
    PROTO_NAME = "noble.orbiter.testdata.TestActionAttr"

    whatever: str = ""


def _register_orbit(registry):
    registry.register_implementations(OrbitAttributes, PlanetAttr)


def _register_action(registry):
    registry.register_implementations(ActionAttributes, WhateverAttr)


def _register_both(registry):
    _register_orbit(registry)
    _register_action(registry)


def _payload_default():
    return Payload()


def _payload_orbit():
    return Payload(orbit=new_orbit(ProtocolID.PROTOCOL_IBC, PlanetAttr("saturn"), b""))


def _payload_action():
    action = new_action(
        ActionID.ACTION_FEE, WhateverAttr("doesn't kill you makes you stronger")
    )
    return Payload(pre_actions=[action])


def _payload_both():
    orbit = new_orbit(ProtocolID.PROTOCOL_IBC, PlanetAttr("saturn"), b"")
    action = new_action(
        ActionID.ACTION_FEE, WhateverAttr("doesn't kill you makes you stronger")
    )
    return Payload(orbit=orbit, pre_actions=[action])


CASES = [
    pytest.param(None, _payload_default, "", id="success-default-payload"),
    pytest.param(_register_orbit, _payload_orbit, "", id="success-orbit-no-actions"),
    pytest.param(
        lambda registry: None,
        _payload_action,
        "unable to resolve",
        id="error-action-not-registered",
    ),
    pytest.param(
        _register_action,
        _payload_orbit,
        "unable to resolve",
        id="error-orbit-not-registered",
    ),
    pytest.param(_register_both, _payload_both, "", id="success-orbit-and-actions"),
]


def _registry(setup):
    registry = InterfaceRegistry()
    if setup is not None:
        setup(registry)
    return registry


@pytest.mark.parametrize("setup, make_payload, exp_err", CASES)
def test_marshal_unmarshal_payload(setup, make_payload, exp_err):
    registry = _registry(setup)
    if exp_err:
        with pytest.raises(UnresolvedTypeError, match=exp_err):
            marshal_json(registry, make_payload())
    else:
        raw = marshal_json(registry, make_payload())
        payload = unmarshal_json(registry, raw, Payload)
        expected = make_payload()
        assert payload.orbit == expected.orbit
        assert len(payload.pre_actions) == len(expected.pre_actions)


@pytest.mark.parametrize("setup, make_payload, exp_err", CASES)
def test_marshal_unmarshal_wrapper(setup, make_payload, exp_err):
    registry = _registry(setup)
    wrapper = PayloadWrapper(orbiter=make_payload())
    if exp_err:
        with pytest.raises(UnresolvedTypeError, match=exp_err):
            marshal_json(registry, wrapper)
    else:
        raw = marshal_json(registry, wrapper)
        decoded = unmarshal_json(registry, raw, PayloadWrapper)
        expected = make_payload()
        assert decoded.orbiter.orbit == expected.orbit
        assert len(decoded.orbiter.pre_actions) == len(expected.pre_actions)


def test_default_payload_json_shape():
    raw = marshal_json(InterfaceRegistry(), Payload())
    assert json.loads(raw) == {"orbit": None, "preActions": []}


def test_orbit_json_carries_type_url_and_fields():
    registry = _registry(_register_orbit)
    raw = marshal_json(registry, _payload_orbit())
    orbit = json.loads(raw)["orbit"]
    assert orbit["protocolId"] == "PROTOCOL_IBC"
    assert orbit["attributes"] == {
        "@type": "/noble.orbiter.testdata.TestOrbitAttr",
        "planet": "saturn",
    }


def test_actions_round_trip_with_attributes():
    registry = _registry(_register_both)
    original = _payload_both()
    decoded = unmarshal_json(registry, marshal_json(registry, original), Payload)
    assert decoded == original
    assert decoded.pre_actions[0].cached_attributes() == WhateverAttr(
        "doesn't kill you makes you stronger"
    )


def test_unmarshal_unknown_type_url_fails():
    raw = json.dumps(
        {"orbit": {"protocolId": "PROTOCOL_IBC", "attributes": {"@type": "/unknown"}}}
    )
    with pytest.raises(UnresolvedTypeError, match="unable to resolve"):
        unmarshal_json(_registry(_register_orbit), raw, Payload)


def test_unmarshal_invalid_json_fails():
    with pytest.raises(ValidationError, match="invalid JSON"):
        unmarshal_json(InterfaceRegistry(), b"{not json", Payload)


def test_unmarshal_unknown_enum_fails():
    raw = json.dumps({"orbit": {"protocolId": "PROTOCOL_NOPE"}})
    with pytest.raises(ValidationError, match="PROTOCOL_NOPE"):
        unmarshal_json(InterfaceRegistry(), raw, Payload)


def test_genesis_round_trip():
    registry = InterfaceRegistry()
    assert unmarshal_json(registry, marshal_json(registry, GenesisState()), GenesisState) == GenesisState()


def test_register_interfaces_resolves_by_name():
    registry = InterfaceRegistry()
    register_interfaces(registry)
    _register_both(registry)
    assert (
        registry.resolve(type_url_for(PlanetAttr), "noble.orbiter.v1.OrbitAttributes")
        is PlanetAttr
    )
    assert (
        registry.resolve(
            type_url_for(WhateverAttr), "noble.orbiter.v1.ActionAttributes"
        )
        is WhateverAttr
    )


def test_resolve_unknown_interface_name_fails():
    with pytest.raises(UnresolvedTypeError, match="not registered"):
        InterfaceRegistry().resolve(type_url_for(PlanetAttr), "noble.orbiter.v1.Nope")


def test_resolve_under_wrong_interface_fails():
    registry = _registry(_register_orbit)
    with pytest.raises(UnresolvedTypeError):
        registry.resolve(type_url_for(PlanetAttr), ActionAttributes)


def test_register_non_implementation_fails():
    with pytest.raises(TypeError, match="does not implement"):
        InterfaceRegistry().register_implementations(OrbitAttributes, WhateverAttr)