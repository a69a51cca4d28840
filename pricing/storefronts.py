# pricing/storefronts.py
from dataclasses import dataclass
from typing import Dict

from .rates import ESHOP_RATES_2025, STEAM_RATES_2024, RateTable

DEFAULT_BASELINE_USD = 19.99


@dataclass(frozen=True)
class Storefront:
    """
    Which nested price block a source entry is read from, and the rate
    snapshot and US baseline that storefront's table is compared against.
    """
    key: str
    price_field: str
    label: str
    rates: RateTable
    baseline: float = DEFAULT_BASELINE_USD


STEAM = Storefront(
    key="steam",
    price_field="steam",
    label="Steam",
    rates=STEAM_RATES_2024,
)

ESHOP = Storefront(
    key="eshop",
    price_field="eshop",
    label="Nintendo eShop",
    rates=ESHOP_RATES_2025,
)

STOREFRONTS: Dict[str, Storefront] = {
    STEAM.key: STEAM,
    ESHOP.key: ESHOP,
}


def get_storefront(key: str) -> Storefront:
    storefront = STOREFRONTS.get((key or "").strip().lower())
    if storefront is None:
        raise KeyError(
            f"Unknown storefront {key!r}; expected one of {sorted(STOREFRONTS)}"
        )
    return storefront
