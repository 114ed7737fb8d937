"""Data types and validation for routing cross-chain transfers through actions and orbits."""

__version__ = "0.1.0"

__all__ = [
    "codec",
    "errors",
    "ids",
    "keys",
    "orbit",
    "packet",
    "payload",
    "router",
    "stats",
]