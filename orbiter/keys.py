"""Module names, store prefixes and derived addresses."""

from __future__ import annotations

import hashlib

MODULE_NAME = "orbiter"

COMPONENT_PREFIX = "component"


def module_address(name: str) -> bytes:
    """Return the 20-byte account address derived from a module name."""
    return hashlib.sha256(name.encode("utf-8")).digest()[:20]


MODULE_ADDRESS = module_address(MODULE_NAME)

DUST_COLLECTOR_NAME = f"{MODULE_NAME}/dust_collector"
DUST_COLLECTOR_ADDRESS = module_address(DUST_COLLECTOR_NAME)

# Orbits
ORBIT_COMPONENT_NAME = "orbit"
ORBIT_CONTROLLER_NAME = "orbit_controller"
PAUSED_ORBITS_NAME = "paused_orbits"
PAUSED_ORBIT_CONTROLLERS_NAME = "paused_orbit_controllers"
PAUSED_ORBIT_PREFIX = bytes([10])
PAUSED_ORBIT_CONTROLLERS_PREFIX = bytes([11])

# Actions
ACTION_COMPONENT_NAME = "action"
ACTION_CONTROLLER_NAME = "action_controller"
PAUSED_ACTION_CONTROLLERS_NAME = "paused_action_controllers"
# Normalizes the basis points defined in a fee action.
BPS_NORMALIZER = 10_000
PAUSED_ACTION_CONTROLLERS_PREFIX = bytes([20])

# Dispatcher
DISPATCHER_COMPONENT_NAME = "dispatcher"
DISPATCHED_AMOUNTS_NAME = "dispatched_amounts"
DISPATCHED_COUNTS_NAME = "dispatched_counts"
DISPATCHED_AMOUNTS_PREFIX = bytes([30])
DISPATCHED_AMOUNTS_PREFIX_BY_DESTINATION_PROTOCOL_ID = bytes([31])
DISPATCHED_AMOUNTS_PREFIX_BY_DESTINATION_ORBIT_ID = bytes([32])
DISPATCHED_COUNTS_PREFIX = bytes([33])
DISPATCHED_COUNTS_PREFIX_BY_DESTINATION_PROTOCOL_ID = bytes([34])

# Adapters
ADAPTERS_COMPONENT_NAME = "adapter"
ADAPTER_CONTROLLER_NAME = "adapter_controller"
# Identifier of the Noble domain in the CCTP protocol.
CCTP_NOBLE_DOMAIN = 4

ORBITER_PREFIX = MODULE_NAME