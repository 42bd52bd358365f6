"""
Exceptions raised by the pricing engine.

Every drink, modifier and offer lives in a closed enumeration, so the only
domain failure is meeting a value outside one of those sets. Dispatch code
raises `UnrecognizedVariantError` instead of silently falling through.
"""


class PubDrinksError(Exception):
    """Base class for all pub_drinks errors."""


class UnrecognizedVariantError(PubDrinksError, ValueError):
    """A value is not a member of the closed set it was dispatched over."""

    def __init__(self, kind: str, value: object) -> None:
        self.kind = kind
        self.value = value
        super().__init__(f"Unrecognized {kind}: {value!r}")
