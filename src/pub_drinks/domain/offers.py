"""
Promotional offers.

Offers form a closed enumeration; the member value is the label printed on
the receipt. Each rule answers two questions about a transaction snapshot:

  - `is_applicable()`: does the offer apply right now?
  - `discount_amount()`: how much comes off the bill?

To add an offer, add a member and a branch to both `match` statements. The
`Transaction` evaluates every member, so nothing else needs to change.

Rules are pure: they read the transaction's drinks and its time source and
never mutate either.
"""

from collections.abc import Sequence
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING

from pub_drinks.domain.clock import day_and_hour
from pub_drinks.domain.drinks import PricedItem
from pub_drinks.domain.errors import UnrecognizedVariantError

if TYPE_CHECKING:
    from pub_drinks.transaction import Transaction

TGIF_MIN_DRINKS = 3
TGIF_DAY = "Friday"
TGIF_AFTER_HOUR = 18  # 19:00 qualifies, 18:59 does not
TGIF_GROUP_SIZE = 3
TGIF_FREE_PER_GROUP = 2


class Offer(str, Enum):
    """Offers the bar runs. Evaluated in declaration order."""

    TGIF = "Buy one drink get two free on Fridays starting at 6pm"

    @property
    def label(self) -> str:
        return self.value

    def is_applicable(self, transaction: "Transaction") -> bool:
        match self:
            case Offer.TGIF:
                when = day_and_hour(transaction.time_source.now())
                return (
                    len(transaction.drinks) >= TGIF_MIN_DRINKS
                    and when.day == TGIF_DAY
                    and when.hour > TGIF_AFTER_HOUR
                )
            case _:
                raise UnrecognizedVariantError("offer", self)

    def discount_amount(self, transaction: "Transaction") -> Decimal:
        match self:
            case Offer.TGIF:
                count = len(transaction.drinks)
                eligible = count - (count % TGIF_GROUP_SIZE)
                free = eligible * TGIF_FREE_PER_GROUP // TGIF_GROUP_SIZE
                return sum_costs(cheapest(transaction.drinks, free))
            case _:
                raise UnrecognizedVariantError("offer", self)


def cheapest(items: Sequence[PricedItem], count: int) -> list[PricedItem]:
    """The `count` lowest-cost items; equal costs keep their original order."""
    return sorted(items, key=lambda item: item.cost)[:count]


def sum_costs(items: Sequence[PricedItem]) -> Decimal:
    return sum((item.cost for item in items), Decimal("0"))


def applicable_offers(transaction: "Transaction") -> list[Offer]:
    """Every offer that applies to the transaction, in declaration order."""
    return [offer for offer in Offer if offer.is_applicable(transaction)]
