# pricing/models.py
from dataclasses import dataclass

from .currency import CanonicalCurrency


@dataclass(frozen=True)
class RawPriceRecord:
    """
    One region's price for a game on a storefront, as found in the source data.
    The price is in the region's local currency; the currency token is kept
    exactly as the source shows it (may be empty).
    """
    region: str
    currency: str
    price: float
    url: str = ""
    region_name: str = ""
    flag: str = ""


@dataclass(frozen=True)
class EnrichedPriceRecord:
    """
    A RawPriceRecord with its resolved currency, USD price and savings
    against the baseline. Prices and savings are USD and never negative.
    """
    raw: RawPriceRecord
    currency_code: CanonicalCurrency
    reference_price: float
    savings: float

    @property
    def region(self) -> str:
        return self.raw.region

    @property
    def region_name(self) -> str:
        return self.raw.region_name

    @property
    def price(self) -> float:
        return self.raw.price

    @property
    def currency(self) -> str:
        return self.raw.currency

    @property
    def url(self) -> str:
        return self.raw.url

    @property
    def flag(self) -> str:
        return self.raw.flag


@dataclass(frozen=True)
class Projection:
    display_amount: float
    display_currency_label: str
    text: str


@dataclass(frozen=True)
class RankedRow:
    position: int
    region: str
    region_name: str
    flag: str
    display: Projection
    reference_price: float
    savings: float
    url: str
    is_best_deal: bool = False


@dataclass(frozen=True)
class BestDeal:
    region: str
    region_name: str
    price: float
    currency: str
    reference_price: float
    savings: float
    savings_percent: float
    url: str
    flag: str = ""
