import math
from typing import Callable

from .currency import CanonicalCurrency, REFERENCE_CURRENCY, resolve
from .models import EnrichedPriceRecord, RawPriceRecord
from .rates import RateTable

Resolver = Callable[[str, str, float], CanonicalCurrency]


def to_reference(amount: float, currency: CanonicalCurrency, rates: RateTable) -> float:
    """Convert a local amount to USD. USD amounts are returned untouched."""
    if currency == REFERENCE_CURRENCY:
        return float(amount)
    return float(amount) * rates.rate_for(currency)


def savings_against(reference_price: float, baseline: float) -> float:
    """USD saved versus the baseline price; regions above baseline save 0."""
    return max(0.0, baseline - reference_price)


def enrich(
    record: RawPriceRecord,
    rates: RateTable,
    baseline: float,
    resolver: Resolver = resolve,
) -> EnrichedPriceRecord:
    """
    Resolve the record's currency, convert its price to USD and compute
    savings against the baseline.

    Raises UnknownCurrency if the resolved currency has no rate, and
    ValueError for a negative or non-finite price.
    """
    if not isinstance(record, RawPriceRecord):
        raise TypeError(
            f"enrich() expects a RawPriceRecord, got {type(record).__name__}"
        )
    price = record.price
    if (
        isinstance(price, bool)
        or not isinstance(price, (int, float))
        or not math.isfinite(price)
        or price < 0
    ):
        raise ValueError(f"Invalid price {price!r} for region {record.region}")

    currency = resolver(record.currency, record.region, record.price)
    reference_price = to_reference(record.price, currency, rates)
    return EnrichedPriceRecord(
        raw=record,
        currency_code=currency,
        reference_price=reference_price,
        savings=savings_against(reference_price, baseline),
    )
