"""
Drinks and modifiers (Decorator pattern).

A **priced item** is anything exposing a `description` and a `cost`. Base
drinks are members of the `DrinkVariant` enum; extras such as "double" or
"bottle" wrap another priced item and transform both values. Wrapping is
recursive, so a modifier can wrap an already-modified drink.

Any combination of modifiers is accepted. A "Bottle of Wine (Double)" makes
little sense at the bar but is not rejected here.

Costs are `Decimal` and are never rounded at this level; rounding only
happens when a receipt is rendered.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Protocol

from pub_drinks.domain.errors import UnrecognizedVariantError


class PricedItem(Protocol):
    """Interface for anything that can appear on a receipt line.

    Structural subtyping: base drinks and modified drinks both satisfy it
    without sharing a base class.
    """

    @property
    def description(self) -> str: ...

    @property
    def cost(self) -> Decimal: ...


class Modifier(Protocol):
    """Interface for an extra that wraps a priced item.

    `ModifierKind` members implement it; new extras (ice, lemonade, ...) only
    need a `wrap()` method returning another priced item.
    """

    def wrap(self, inner: PricedItem) -> PricedItem: ...


class DrinkVariant(str, Enum):
    """Base drinks sold at the bar. The value is the receipt name."""

    SOFT = "Soft drink"
    BEER = "Beer"
    CIDER = "Cider"
    WINE = "Wine"
    SPIRIT_OR_LIQUEUR = "Spirit/Liqueur"

    @property
    def description(self) -> str:
        return self.value

    @property
    def cost(self) -> Decimal:
        return UNIT_PRICES[self]

    @classmethod
    def from_name(cls, name: str) -> "DrinkVariant":
        """Look up a drink by member name, receipt name or short alias."""
        key = name.strip().lower()
        for variant in cls:
            if key in (variant.name.lower(), variant.value.lower()):
                return variant
        if key in DRINK_ALIASES:
            return DRINK_ALIASES[key]
        raise UnrecognizedVariantError("drink", name)


UNIT_PRICES: dict[DrinkVariant, Decimal] = {
    DrinkVariant.SOFT: Decimal("0.99"),
    DrinkVariant.BEER: Decimal("3.99"),
    DrinkVariant.CIDER: Decimal("2.99"),
    DrinkVariant.WINE: Decimal("5.99"),
    DrinkVariant.SPIRIT_OR_LIQUEUR: Decimal("7.99"),
}

DRINK_ALIASES: dict[str, DrinkVariant] = {
    "soft": DrinkVariant.SOFT,
    "spirit": DrinkVariant.SPIRIT_OR_LIQUEUR,
    "liqueur": DrinkVariant.SPIRIT_OR_LIQUEUR,
}

DOUBLE_MULTIPLIER = Decimal("1.75")
BOTTLE_MULTIPLIER = Decimal("5")


class ModifierKind(str, Enum):
    """Built-in extras. Each `wrap()` returns a `ModifiedDrink`."""

    DOUBLE = "double"
    BOTTLE = "bottle"

    def wrap(self, inner: PricedItem) -> "ModifiedDrink":
        return ModifiedDrink(kind=self, inner=inner)

    @classmethod
    def from_name(cls, name: str) -> "ModifierKind":
        key = name.strip().lower()
        for kind in cls:
            if key in (kind.name.lower(), kind.value):
                return kind
        raise UnrecognizedVariantError("modifier", name)


@dataclass(frozen=True)
class ModifiedDrink:
    """A priced item wrapped by one built-in modifier.

    The wrapped item is owned exclusively by this node; chains are built
    innermost-first, so each modifier transforms the result of the previous.
    """

    kind: ModifierKind
    inner: PricedItem

    @property
    def cost(self) -> Decimal:
        match self.kind:
            case ModifierKind.DOUBLE:
                return self.inner.cost * DOUBLE_MULTIPLIER
            case ModifierKind.BOTTLE:
                return self.inner.cost * BOTTLE_MULTIPLIER
            case _:
                raise UnrecognizedVariantError("modifier", self.kind)

    @property
    def description(self) -> str:
        match self.kind:
            case ModifierKind.DOUBLE:
                return f"{self.inner.description} (Double)"
            case ModifierKind.BOTTLE:
                return f"Bottle of {self.inner.description}"
            case _:
                raise UnrecognizedVariantError("modifier", self.kind)
