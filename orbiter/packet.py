"""Transfer attributes and the packets handed to orbit and action handlers."""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass

from orbiter.errors import NilPointerError, ValidationError
from orbiter.ids import ProtocolID
from orbiter.orbit import Action, Orbit, OrbitID, new_orbit_id

_DENOM_PATTERN = re.compile(r"[a-zA-Z][a-zA-Z0-9/:._-]{2,127}")


@dataclass(frozen=True)
class Coin:
    """An amount of a denomination; a missing amount is None."""

    denom: str
    amount: int | None

    def validate(self) -> None:
        """Raise if the denom is malformed or the amount is missing or negative."""
        if not _DENOM_PATTERN.fullmatch(self.denom):
            raise ValidationError(f"invalid denom: {self.denom}")
        if self.amount is None:
            raise ValidationError("amount is nil")
        if self.amount < 0:
            raise ValidationError(f"negative coin amount: {self.amount}")

    def is_positive(self) -> bool:
        """Return whether the amount is strictly greater than zero."""
        return self.amount is not None and self.amount > 0


@dataclass
class TransferAttributes:
    """Cross-chain transfer information passed to actions and routing.

    The source fields are fixed; the destination coin may be changed by actions.
    """

    source_orbit_id: OrbitID
    source_coin: Coin
    destination_coin: Coin

    def validate(self) -> None:
        """Raise if the source orbit or either coin is not valid."""
        self.source_orbit_id.validate()
        try:
            self.source_coin.validate()
        except ValidationError as err:
            raise ValidationError(f"source coin validation error: {err}") from err
        if not self.source_coin.is_positive():
            raise ValidationError("source amount must be positive")
        try:
            self.destination_coin.validate()
        except ValidationError as err:
            raise ValidationError(
                f"destination coin validation error: {err}"
            ) from err
        if not self.destination_coin.is_positive():
            raise ValidationError("destination amount must be positive")

    @property
    def source_protocol_id(self) -> ProtocolID:
        return self.source_orbit_id.protocol_id

    @property
    def source_counterparty_id(self) -> str:
        return self.source_orbit_id.counterparty_id

    @property
    def source_amount(self) -> int:
        return self.source_coin.amount or 0

    @property
    def source_denom(self) -> str:
        return self.source_coin.denom

    @property
    def destination_amount(self) -> int:
        return self.destination_coin.amount or 0

    @property
    def destination_denom(self) -> str:
        return self.destination_coin.denom

    def set_destination_amount(self, amount: int | None) -> None:
        """Set the destination amount; missing or negative amounts become zero."""
        if amount is None or amount < 0:
            amount = 0
        self.destination_coin = dataclasses.replace(self.destination_coin, amount=amount)

    def set_destination_denom(self, denom: str) -> None:
        """Set the destination denom."""
        self.destination_coin = dataclasses.replace(self.destination_coin, denom=denom)


def new_transfer_attributes(
    source_protocol_id: ProtocolID,
    source_counterparty_id: str,
    denom: str,
    amount: int | None,
) -> TransferAttributes:
    """Return validated transfer attributes; the destination starts as the source."""
    source_orbit_id = new_orbit_id(source_protocol_id, source_counterparty_id)
    attributes = TransferAttributes(
        source_orbit_id=source_orbit_id,
        source_coin=Coin(denom, amount),
        destination_coin=Coin(denom, amount),
    )
    attributes.validate()
    return attributes


def _validate_transfer(attributes: TransferAttributes | None) -> None:
    if attributes is None:
        raise NilPointerError("transfer attributes is a nil pointer")
    attributes.validate()


@dataclass
class OrbitPacket:
    """Routing information extended with the transfer attributes."""

    transfer_attributes: TransferAttributes | None
    orbit: Orbit | None

    def validate(self) -> None:
        """Raise if the orbit or the transfer attributes are not valid."""
        if self.orbit is None:
            raise NilPointerError("orbit is a nil pointer")
        self.orbit.validate()
        _validate_transfer(self.transfer_attributes)


def new_orbit_packet(
    transfer_attributes: TransferAttributes | None, orbit: Orbit | None
) -> OrbitPacket:
    """Return a validated orbit packet."""
    packet = OrbitPacket(transfer_attributes=transfer_attributes, orbit=orbit)
    packet.validate()
    return packet


@dataclass
class ActionPacket:
    """An action extended with the transfer attributes."""

    transfer_attributes: TransferAttributes | None
    action: Action | None

    def validate(self) -> None:
        """Raise if the action or the transfer attributes are not valid."""
        if self.action is None:
            raise NilPointerError("action is a nil pointer")
        self.action.validate()
        _validate_transfer(self.transfer_attributes)


def new_action_packet(
    transfer_attributes: TransferAttributes | None, action: Action | None
) -> ActionPacket:
    """Return a validated action packet."""
    packet = ActionPacket(transfer_attributes=transfer_attributes, action=action)
    packet.validate()
    return packet