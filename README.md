# orbiter

Data types for describing and validating cross-chain transfers that run a
sequence of actions and are then routed to a destination orbit. The package
has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Modules

- `orbiter.ids` – `ProtocolID` (`PROTOCOL_UNSUPPORTED`, `PROTOCOL_IBC`,
  `PROTOCOL_CCTP`, `PROTOCOL_HYPERLANE`) and `ActionID`
  (`ACTION_UNSUPPORTED`, `ACTION_FEE`). `new_protocol_id` and
  `new_action_id` turn an integer into a member and raise
  `IDNotSupportedError` for unknown values or the unsupported member.
- `orbiter.orbit` – `OrbitID` with its string form `"<protocol>:<counterparty>"`
  (`OrbitID.id()`), built with `new_orbit_id` and read back with
  `parse_orbit_id`. `Orbit` and `Action` hold their attributes as a
  `PackedAny`; `new_orbit` and `new_action` pack and validate them.
  Attribute classes are dataclasses deriving from `OrbitAttributes` (which
  requires `counterparty_id()`) or `ActionAttributes`.
- `orbiter.payload` – `Payload` (an orbit plus its pre-actions),
  `PayloadWrapper`, and `GenesisState` with `default_genesis_state()`.
- `orbiter.packet` – `Coin`, `TransferAttributes` (created with
  `new_transfer_attributes`; the destination coin starts equal to the source
  coin and can be changed with `set_destination_amount` and
  `set_destination_denom`), `OrbitPacket` and `ActionPacket`.
- `orbiter.router` – `Router`, a map from identifiers to `Routable`
  handlers. `add_route` raises `RuntimeError` once the router is sealed and
  `ValueError` for an invalid or duplicate identifier; `route` returns `None`
  when nothing is registered.
- `orbiter.codec` – `InterfaceRegistry`, `register_interfaces`,
  `marshal_json` and `unmarshal_json`. Packed attributes are written with an
  `@type` field; a type that is not registered raises `UnresolvedTypeError`.
- `orbiter.stats` – `AmountDispatched`, `ChainAmountDispatched` and
  `TotalDispatched`, whose `chain_amount` returns an empty entry for an
  unknown counterparty.
- `orbiter.keys` – module name, store prefixes and `module_address`, which
  derives a 20-byte address from a name.
- `orbiter.errors` – `OrbiterError` and its subclasses, each with a
  `codespace`, `code` and `description`.

## Examples

```python
from orbiter.ids import ProtocolID
from orbiter.orbit import parse_orbit_id

orbit_id = parse_orbit_id("1:channel-1")
assert orbit_id.protocol_id is ProtocolID.PROTOCOL_IBC
assert orbit_id.counterparty_id == "channel-1"
assert orbit_id.id() == "1:channel-1"
```

Encoding a payload as JSON and reading it back:

```python
from dataclasses import dataclass

from orbiter.codec import (
    InterfaceRegistry,
    marshal_json,
    register_interfaces,
    unmarshal_json,
)
from orbiter.ids import ProtocolID
from orbiter.orbit import OrbitAttributes, new_orbit
from orbiter.payload import Payload, new_payload


@dataclass
class PlanetAttributes(OrbitAttributes):
    planet: str = ""

    def counterparty_id(self) -> str:
        return self.planet


registry = InterfaceRegistry()
register_interfaces(registry)
registry.register_implementations(OrbitAttributes, PlanetAttributes)

payload = new_payload(new_orbit(ProtocolID.PROTOCOL_IBC, PlanetAttributes("saturn")))
raw = marshal_json(registry, payload)
decoded = unmarshal_json(registry, raw, Payload)
assert decoded.orbit.cached_attributes() == PlanetAttributes("saturn")
```

Invalid input raises subclasses of `orbiter.errors.OrbiterError`: for
example `IDNotSupportedError` for an unsupported protocol, `NilPointerError`
when attributes are missing, `PackAnyError` when attributes are not a
dataclass of the right kind, and `ValidationError` for malformed identifiers,
coins or JSON.

## What the package does not do

It holds the data types and their validation only. It keeps no state between
calls (paused protocols, dispatched amounts and the like are not stored
anywhere), performs no transfers, talks to no network, and has no command
line program. The JSON encoding covers `Payload`, `PayloadWrapper`, `Orbit`,
`Action` and `GenesisState`.

## Running the tests

```
pip install ".[test]"
pytest
```