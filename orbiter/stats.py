"""Statistics of amounts dispatched across chains."""

from __future__ import annotations

from dataclasses import dataclass, field

from orbiter.ids import ProtocolID
from orbiter.orbit import OrbitID


@dataclass
class AmountDispatched:
    """Incoming and outgoing amounts for a route."""

    incoming: int = 0
    outgoing: int = 0


@dataclass(frozen=True)
class ChainAmountDispatched:
    """The amount dispatched through one orbit."""

    orbit_id: OrbitID = OrbitID(ProtocolID.PROTOCOL_UNSUPPORTED, "")
    amount_dispatched: AmountDispatched = field(default_factory=AmountDispatched)


@dataclass
class TotalDispatched:
    """Dispatched amounts keyed by counterparty identifier."""

    chains_amount: dict[str, ChainAmountDispatched] = field(default_factory=dict)

    def chain_amount(self, counterparty_id: str) -> ChainAmountDispatched:
        """Return the amount for a counterparty, or an empty one if unknown."""
        return self.chains_amount.get(counterparty_id, ChainAmountDispatched())

    def set_amount_dispatched(
        self, counterparty_id: str, chain_amount: ChainAmountDispatched
    ) -> None:
        """Record the amount dispatched for a counterparty."""
        self.chains_amount[counterparty_id] = chain_amount