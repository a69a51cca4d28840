"""
Currency token resolution.

Source price data labels each region with whatever the storefront page shows:
a bare symbol ("$", "¥"), a prefixed dollar ("MX$", "AUD$"), or occasionally an
ISO code. resolve() turns that token into exactly one CanonicalCurrency.
"""
from enum import Enum


class CanonicalCurrency(str, Enum):
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"
    CNY = "CNY"
    KRW = "KRW"
    INR = "INR"
    BRL = "BRL"
    ARS = "ARS"
    TRY = "TRY"
    RUB = "RUB"
    MXN = "MXN"
    CAD = "CAD"
    AUD = "AUD"
    HKD = "HKD"

    @classmethod
    def from_code(cls, code: str) -> "CanonicalCurrency":
        try:
            return cls(code.strip().upper())
        except ValueError:
            raise ValueError(f"Unsupported currency code: {code!r}") from None


REFERENCE_CURRENCY = CanonicalCurrency.USD

# Symbols that identify a single currency on their own
SYMBOL_CURRENCY = {
    "€": CanonicalCurrency.EUR,
    "£": CanonicalCurrency.GBP,
    "₺": CanonicalCurrency.TRY,
    "₽": CanonicalCurrency.RUB,
    "₹": CanonicalCurrency.INR,
    "₩": CanonicalCurrency.KRW,
    "R$": CanonicalCurrency.BRL,
    "US$": CanonicalCurrency.USD,
    "CA$": CanonicalCurrency.CAD,
    "C$": CanonicalCurrency.CAD,
    "CAD$": CanonicalCurrency.CAD,
    "MX$": CanonicalCurrency.MXN,
    "A$": CanonicalCurrency.AUD,
    "AU$": CanonicalCurrency.AUD,
    "AUD$": CanonicalCurrency.AUD,
    "HK$": CanonicalCurrency.HKD,
    "ARS$": CanonicalCurrency.ARS,
}

# A bare "$" is priced in whatever dollar/peso the region uses
DOLLAR_REGION_CURRENCY = {
    "US": CanonicalCurrency.USD,
    "CA": CanonicalCurrency.CAD,
    "MX": CanonicalCurrency.MXN,
    "AU": CanonicalCurrency.AUD,
    "AR": CanonicalCurrency.ARS,
    "HK": CanonicalCurrency.HKD,
}

YEN_SYMBOLS = ("¥", "￥")

# Yen prices are large whole numbers, yuan prices small decimals
YEN_MAGNITUDE_THRESHOLD = 1000


def _normalize_token(token: str | None) -> str:
    return (token or "").strip()


def is_recognized(token: str | None) -> bool:
    """
    True if resolve() maps the token by an explicit rule rather than
    falling back to USD. Empty tokens count as unrecognized.
    """
    tok = _normalize_token(token)
    if not tok:
        return False
    if tok in YEN_SYMBOLS or tok == "$" or tok in SYMBOL_CURRENCY:
        return True
    return tok.upper() in CanonicalCurrency.__members__


def resolve(
    token: str | None, region_code: str = "", raw_price: float = 0
) -> CanonicalCurrency:
    """
    Map a raw currency token to a CanonicalCurrency.

    - "¥" is JPY when the region is JP or the price is above 1000, else CNY.
    - "$" is looked up by region (MX -> MXN, CA -> CAD, ...), defaulting to USD.
    - Empty or unrecognized tokens fall back to USD.
    """
    tok = _normalize_token(token)
    region = (region_code or "").strip().upper()

    if not tok:
        return REFERENCE_CURRENCY

    if tok in YEN_SYMBOLS:
        if region == "JP" or (raw_price or 0) > YEN_MAGNITUDE_THRESHOLD:
            return CanonicalCurrency.JPY
        return CanonicalCurrency.CNY

    if tok == "$":
        return DOLLAR_REGION_CURRENCY.get(region, REFERENCE_CURRENCY)

    if tok in SYMBOL_CURRENCY:
        return SYMBOL_CURRENCY[tok]

    member = CanonicalCurrency.__members__.get(tok.upper())
    if member is not None:
        return member

    return REFERENCE_CURRENCY
