# pricing/errors.py
class PricingError(Exception):
    """Base class for price comparison errors."""


class UnknownCurrency(PricingError, KeyError):
    """A resolved currency has no entry in the active rate table."""

    def __init__(self, currency):
        self.currency = currency
        super().__init__(currency)

    def __str__(self) -> str:
        code = getattr(self.currency, "value", self.currency)
        return f"No exchange rate for currency {code!r}"


class EmptyInput(PricingError):
    """Ranking or best-deal selection was requested on zero records."""
