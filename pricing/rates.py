"""
Static exchange-rate snapshots.

Each rate is the USD value of one unit of the currency. Rates are curated by
hand from public market data; there is no refresh mechanism.
"""
import math
from types import MappingProxyType
from collections.abc import Mapping
from typing import Dict, Iterator

from .currency import CanonicalCurrency, REFERENCE_CURRENCY
from .errors import UnknownCurrency


class RateTable(Mapping):
    """
    Read-only CanonicalCurrency -> USD multiplier mapping.
    USD must be present at exactly 1.0 and every rate must be positive.
    """

    def __init__(self, rates: Mapping, name: str = "custom"):
        parsed: Dict[CanonicalCurrency, float] = {}
        for code, rate in rates.items():
            currency = (
                code
                if isinstance(code, CanonicalCurrency)
                else CanonicalCurrency.from_code(str(code))
            )
            if currency in parsed:
                raise ValueError(f"Duplicate rate for {currency.value}")
            value = float(rate)
            if not math.isfinite(value) or value <= 0:
                raise ValueError(
                    f"Rate for {currency.value} must be positive, got {rate!r}"
                )
            parsed[currency] = value

        if parsed.get(REFERENCE_CURRENCY) != 1.0:
            raise ValueError("Rate table must contain USD at exactly 1.0")

        self.name = name
        self._rates = MappingProxyType(parsed)

    def rate_for(self, currency: CanonicalCurrency) -> float:
        try:
            return self._rates[currency]
        except KeyError:
            raise UnknownCurrency(currency) from None

    def __getitem__(self, currency: CanonicalCurrency) -> float:
        return self.rate_for(currency)

    def __iter__(self) -> Iterator[CanonicalCurrency]:
        return iter(self._rates)

    def __len__(self) -> int:
        return len(self._rates)

    def __repr__(self) -> str:
        return f"RateTable(name={self.name!r}, currencies={len(self)})"


# Steam regional pricing snapshot (2024 approximate rates)
STEAM_RATES_2024 = RateTable(
    {
        "USD": 1.00,
        "ARS": 0.0011,
        "TRY": 0.030,
        "RUB": 0.011,
        "BRL": 0.18,
        "INR": 0.012,
        "CNY": 0.14,
        "EUR": 1.09,
        "GBP": 1.27,
        "JPY": 0.0067,
        "KRW": 0.00076,
        "MXN": 0.055,
    },
    name="steam-2024",
)

# Nintendo eShop snapshot (September 2025 market rates)
ESHOP_RATES_2025 = RateTable(
    {
        "USD": 1.00,
        "CAD": 0.72,
        "MXN": 0.0534,
        "BRL": 0.185,
        "EUR": 1.18,
        "GBP": 1.35,
        "JPY": 0.00677,
        "KRW": 0.000707,
        "AUD": 0.65,
    },
    name="eshop-2025",
)
