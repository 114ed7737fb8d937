"""Protocol and action identifiers."""

from __future__ import annotations

from enum import IntEnum

from orbiter.errors import IDNotSupportedError


class ProtocolID(IntEnum):
    """Cross-chain bridge protocols known to the orbiter."""

    PROTOCOL_UNSUPPORTED = 0
    PROTOCOL_IBC = 1
    PROTOCOL_CCTP = 2
    PROTOCOL_HYPERLANE = 3

    def __str__(self) -> str:
        return self.name

    def validate(self) -> None:
        """Raise IDNotSupportedError if the protocol is the unsupported one."""
        if self is ProtocolID.PROTOCOL_UNSUPPORTED:
            raise IDNotSupportedError(f"protocol id {self.name}")


class ActionID(IntEnum):
    """Actions the orbiter can perform on a transfer."""

    ACTION_UNSUPPORTED = 0
    ACTION_FEE = 1

    def __str__(self) -> str:
        return self.name

    def validate(self) -> None:
        """Raise IDNotSupportedError if the action is the unsupported one."""
        if self is ActionID.ACTION_UNSUPPORTED:
            raise IDNotSupportedError(f"action id {self.name}")


def new_protocol_id(value: int) -> ProtocolID:
    """Return the validated protocol identifier for an integer value."""
    try:
        protocol_id = ProtocolID(value)
    except ValueError:
        raise IDNotSupportedError(f"unknown protocol id {value}") from None
    protocol_id.validate()
    return protocol_id


def new_action_id(value: int) -> ActionID:
    """Return the validated action identifier for an integer value."""
    try:
        action_id = ActionID(value)
    except ValueError:
        raise IDNotSupportedError(f"unknown action id {value}") from None
    action_id.validate()
    return action_id