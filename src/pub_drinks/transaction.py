"""
Transaction: accumulates drinks and produces the receipt.

Callers add drinks (optionally with extras) and then call `finalize()`,
which prices everything, applies the offers and renders a plain-text
receipt:

    DRINK: Beer £3.99
    DRINK: Beer £3.99
    DRINK: Spirit/Liqueur (Double) £13.98
    DRINK: Bottle of Wine £29.95

    OFFERS APPLIED:
    Buy one drink get two free on Fridays starting at 6pm (-£7.98)
    TOTAL: £43.93

Line items are shown rounded, but the total is computed from the exact
costs and rounded once at the end.
"""

import logging
from collections.abc import Iterable
from decimal import Decimal

from pub_drinks.domain.clock import SystemTimeSource, TimeSource
from pub_drinks.domain.drinks import DrinkVariant, Modifier, PricedItem
from pub_drinks.domain.formatting import CurrencyFormatter, SymbolCurrencyFormatter, to_currency
from pub_drinks.domain.models import DrinkOrder, TransactionSummary
from pub_drinks.domain.offers import Offer, applicable_offers, sum_costs

logger = logging.getLogger(__name__)


class Transaction:
    """An ordered tab of priced drinks.

    The time source and formatter are fixed at construction. `finalize()`
    only reads state, so it can be called as often as needed.
    """

    def __init__(
        self,
        time_source: TimeSource | None = None,
        formatter: CurrencyFormatter | None = None,
    ) -> None:
        self._drinks: list[PricedItem] = []
        self._time_source: TimeSource = time_source or SystemTimeSource()
        self._formatter: CurrencyFormatter = formatter or SymbolCurrencyFormatter()

    @property
    def drinks(self) -> tuple[PricedItem, ...]:
        return tuple(self._drinks)

    @property
    def time_source(self) -> TimeSource:
        return self._time_source

    def add_drink(self, drink: DrinkVariant, modifiers: Iterable[Modifier] = ()) -> None:
        """Append `drink`, wrapped by each modifier in turn (first wraps the base)."""
        item: PricedItem = drink
        for modifier in modifiers:
            item = modifier.wrap(item)
        self._drinks.append(item)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Added %s (%s) as item %d", item.description, item.cost, len(self._drinks))

    def add_order(self, order: DrinkOrder) -> None:
        self.add_drink(order.drink, order.modifiers)

    def finalize(self) -> TransactionSummary:
        full_cost = sum_costs(self._drinks)
        offers = applicable_offers(self)
        discounts = [(offer, offer.discount_amount(self)) for offer in offers]
        total_discount = sum((amount for _, amount in discounts), Decimal("0"))
        actual_cost = to_currency(full_cost - total_discount)

        logger.info(
            "Finalized %d drink(s): offers=%s discount=%s total=%s",
            len(self._drinks),
            [offer.name for offer in offers],
            total_discount,
            actual_cost,
        )
        return TransactionSummary(
            description=self._render(discounts, actual_cost),
            cost=actual_cost,
        )

    # ── Helpers ──────────────────────────────────────────────────

    def _render(self, discounts: list[tuple[Offer, Decimal]], actual_cost: Decimal) -> str:
        fmt = self._formatter.format
        lines = [f"DRINK: {item.description} {fmt(item.cost)}" for item in self._drinks]
        if discounts:
            lines += ["", "OFFERS APPLIED:"]
            lines += [f"{offer.label} (-{fmt(amount)})" for offer, amount in discounts]
        lines.append(f"TOTAL: {fmt(actual_cost)}")
        return "\n".join(lines)
