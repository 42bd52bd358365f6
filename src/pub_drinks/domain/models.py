"""
Input and output models for the pricing engine.

These are Pydantic v2 models: `DrinkOrder` validates caller input (CLI
arguments, JSON payloads) before it reaches a `Transaction`, and
`TransactionSummary` is what `Transaction.finalize()` hands back.

Enums used as field types inherit from (str, Enum) so they serialize as
plain strings in JSON.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pub_drinks.domain.drinks import DrinkVariant, ModifierKind


class DrinkOrder(BaseModel):
    """A base drink plus the extras to apply, innermost first."""

    model_config = ConfigDict(frozen=True)

    drink: DrinkVariant
    modifiers: tuple[ModifierKind, ...] = ()

    # Accept short names ("spirit", "bottle") as well as enum values.
    @field_validator("drink", mode="before")
    @classmethod
    def _lookup_drink(cls, value: object) -> object:
        if isinstance(value, str) and not isinstance(value, DrinkVariant):
            return DrinkVariant.from_name(value)
        return value

    @field_validator("modifiers", mode="before")
    @classmethod
    def _lookup_modifiers(cls, value: object) -> object:
        if isinstance(value, list | tuple):
            return tuple(
                ModifierKind.from_name(item)
                if isinstance(item, str) and not isinstance(item, ModifierKind)
                else item
                for item in value
            )
        return value

    @classmethod
    def parse(cls, spec: str) -> "DrinkOrder":
        """Build an order from `name[:modifier[:modifier...]]`, e.g. "wine:bottle"."""
        drink, *modifiers = [part for part in spec.split(":") if part.strip()] or [""]
        return cls(drink=drink, modifiers=modifiers)


class TransactionSummary(BaseModel):
    """Result of finalizing a transaction.

    `cost` is already rounded to two decimal places; `description` is the
    plain-text receipt.
    """

    description: str
    cost: Decimal


class DayAndHour(BaseModel):
    """Calendar facts the offer rules care about."""

    day: str  # English weekday name, e.g. "Friday"
    hour: int = Field(..., ge=0, le=23)
