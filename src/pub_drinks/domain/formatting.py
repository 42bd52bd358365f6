"""
Currency rendering.

Pricing works in exact `Decimal`; this module is the only place amounts are
rounded. Rounding is half-up to the currency's minor unit. The formatter is
injected into `Transaction` so the symbol can be swapped without touching
the pricing code.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Protocol

CURRENCY_SYMBOL = "£"
CURRENCY_QUANTUM = Decimal("0.01")


def to_currency(amount: Decimal) -> Decimal:
    """Round to two decimal places, half-up."""
    return amount.quantize(CURRENCY_QUANTUM, rounding=ROUND_HALF_UP)


class CurrencyFormatter(Protocol):
    def format(self, amount: Decimal) -> str: ...


class SymbolCurrencyFormatter:
    """Renders `<symbol><amount>` with two decimals, e.g. "£3.99"."""

    def __init__(self, symbol: str = CURRENCY_SYMBOL) -> None:
        self.symbol = symbol

    def format(self, amount: Decimal) -> str:
        return f"{self.symbol}{to_currency(amount)}"
