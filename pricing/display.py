from enum import Enum

from .currency import REFERENCE_CURRENCY
from .models import EnrichedPriceRecord, Projection


class DisplayMode(str, Enum):
    LOCAL = "local"
    REFERENCE = "reference"

    @classmethod
    def parse(cls, value: "str | DisplayMode | None") -> "DisplayMode":
        if isinstance(value, DisplayMode):
            return value
        v = (value or "").strip().lower()
        if v in ("reference", "usd", REFERENCE_CURRENCY.value.lower()):
            return cls.REFERENCE
        if v in ("", "local"):
            return cls.LOCAL
        raise ValueError(f"Unknown display mode: {value!r}")

    def toggle(self) -> "DisplayMode":
        return DisplayMode.LOCAL if self is DisplayMode.REFERENCE else DisplayMode.REFERENCE


def format_local_price(price: float) -> str:
    """
    Format a local price the way storefront pages show it: thousands
    separators from 1000 up, otherwise the bare number ("19.5", "2,300").
    """
    if price >= 1000:
        return f"{price:,.3f}".rstrip("0").rstrip(".")
    if float(price).is_integer():
        return str(int(price))
    return repr(float(price))


def format_reference_price(amount: float) -> str:
    return f"${amount:.2f}"


def project(record: EnrichedPriceRecord, mode: DisplayMode) -> Projection:
    mode = DisplayMode.parse(mode)
    if mode is DisplayMode.REFERENCE:
        amount = round(record.reference_price, 2)
        return Projection(
            display_amount=amount,
            display_currency_label=REFERENCE_CURRENCY.value,
            text=format_reference_price(amount),
        )

    token = (record.currency or "").strip()
    formatted = format_local_price(record.price)
    if token:
        text = f"{token}{formatted}"
    else:
        token = record.currency_code.value
        text = f"{formatted} {token}"
    return Projection(
        display_amount=record.price,
        display_currency_label=token,
        text=text,
    )
