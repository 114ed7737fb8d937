from __future__ import annotations

from dataclasses import dataclass

import pytest

from orbiter.errors import IDNotSupportedError, NilPointerError, ValidationError
from orbiter.ids import ActionID, ProtocolID
from orbiter.orbit import (
    Action,
    ActionAttributes,
    OrbitAttributes,
    OrbitID,
    new_action,
    new_orbit,
)
from orbiter.packet import (
    Coin,
    new_action_packet,
    new_orbit_packet,
    new_transfer_attributes,
)


@dataclass
class PlanetAttr(OrbitAttributes):
    planet: str = ""

    def counterparty_id(self) -> str:
        return self.planet


@dataclass
class WhateverAttr(ActionAttributes):
    whatever: str = ""


def _transfer(amount=100):
    return new_transfer_attributes(ProtocolID.PROTOCOL_IBC, "channel-1", "uusdc", amount)


def test_new_transfer_attributes_copies_source_to_destination():
    attrs = _transfer()
    assert attrs.source_protocol_id is ProtocolID.PROTOCOL_IBC
    assert attrs.source_counterparty_id == "channel-1"
    assert attrs.source_orbit_id == OrbitID(ProtocolID.PROTOCOL_IBC, "channel-1")
    assert attrs.source_amount == attrs.destination_amount == 100
    assert attrs.source_denom == attrs.destination_denom == "uusdc"


def test_non_positive_amount_fails():
    with pytest.raises(ValidationError, match="source amount must be positive"):
        _transfer(0)


def test_negative_amount_fails():
    with pytest.raises(ValidationError, match="source coin validation error"):
        _transfer(-1)


def test_invalid_denom_fails():
    with pytest.raises(ValidationError, match="invalid denom"):
        new_transfer_attributes(ProtocolID.PROTOCOL_IBC, "channel-1", "1x", 10)


def test_empty_counterparty_fails():
    with pytest.raises(ValidationError, match="counterparty id cannot be empty string"):
        new_transfer_attributes(ProtocolID.PROTOCOL_IBC, "", "uusdc", 10)


def test_unsupported_protocol_fails():
    with pytest.raises(IDNotSupportedError):
        new_transfer_attributes(ProtocolID.PROTOCOL_UNSUPPORTED, "channel-1", "uusdc", 10)


def test_set_destination_amount():
    attrs = _transfer()
    attrs.set_destination_amount(50)
    assert attrs.destination_amount == 50
    assert attrs.source_amount == 100


@pytest.mark.parametrize("amount", [None, -5])
def test_set_destination_amount_clamps_to_zero(amount):
    attrs = _transfer()
    attrs.set_destination_amount(amount)
    assert attrs.destination_amount == 0
    with pytest.raises(ValidationError, match="destination amount must be positive"):
        attrs.validate()


def test_set_destination_denom():
    attrs = _transfer()
    attrs.set_destination_denom("ibc/denom")
    assert attrs.destination_denom == "ibc/denom"
    assert attrs.source_denom == "uusdc"


def test_bad_destination_denom_fails_validation():
    attrs = _transfer()
    attrs.set_destination_denom("")
    with pytest.raises(ValidationError, match="destination coin validation error"):
        attrs.validate()


def test_coin_validation():
    with pytest.raises(ValidationError, match="amount is nil"):
        Coin("uusdc", None).validate()
    with pytest.raises(ValidationError, match="negative coin amount"):
        Coin("uusdc", -1).validate()
    assert Coin("uusdc", 1).is_positive()
    assert not Coin("uusdc", 0).is_positive()
    assert not Coin("uusdc", None).is_positive()


def test_new_orbit_packet():
    orbit = new_orbit(ProtocolID.PROTOCOL_CCTP, PlanetAttr("earth"), None)
    transfer = _transfer()
    packet = new_orbit_packet(transfer, orbit)
    assert packet.orbit is orbit
    assert packet.transfer_attributes is transfer


def test_orbit_packet_requires_orbit():
    with pytest.raises(NilPointerError, match="orbit is a nil pointer"):
        new_orbit_packet(_transfer(), None)


def test_orbit_packet_requires_transfer_attributes():
    orbit = new_orbit(ProtocolID.PROTOCOL_CCTP, PlanetAttr("earth"), None)
    with pytest.raises(NilPointerError, match="transfer attributes is a nil pointer"):
        new_orbit_packet(None, orbit)


def test_new_action_packet():
    action = new_action(ActionID.ACTION_FEE, WhateverAttr("fee"))
    packet = new_action_packet(_transfer(), action)
    assert packet.action is action


def test_action_packet_requires_action():
    with pytest.raises(NilPointerError, match="action is a nil pointer"):
        new_action_packet(_transfer(), None)


def test_action_packet_with_unsupported_action_fails():
    with pytest.raises(IDNotSupportedError):
        new_action_packet(_transfer(), Action())