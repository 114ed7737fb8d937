"""Error types raised by the orbiter package."""

from __future__ import annotations


class OrbiterError(Exception):
    """Base class for errors with a registered code and description."""

    codespace = "orbiter"
    code = 0
    description = "orbiter error"

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        if self.detail:
            return f"{self.detail}: {self.description}"
        return self.description


class UnauthorizedError(OrbiterError, PermissionError):
    code = 1
    description = "signer must be the authority"


class IDNotSupportedError(OrbiterError, ValueError):
    code = 2
    description = "id is not supported"


class NilPointerError(OrbiterError, ValueError):
    code = 3
    description = "invalid nil pointer"


class ValidationError(OrbiterError, ValueError):
    code = 6
    description = "validation failed"


class UnableToPauseError(OrbiterError):
    code = 8
    description = "unable to pause"


class UnableToUnpauseError(OrbiterError):
    code = 9
    description = "unable to unpause"


class InvalidTypeError(OrbiterError, TypeError):
    codespace = "sdk"
    code = 29
    description = "invalid type"


class PackAnyError(OrbiterError, TypeError):
    codespace = "sdk"
    code = 33
    description = "failed packing protobuf message to Any"


class UnresolvedTypeError(OrbiterError, LookupError):
    codespace = "codec"
    code = 0
    description = "unable to resolve type URL"