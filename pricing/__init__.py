from .currency import CanonicalCurrency, REFERENCE_CURRENCY, is_recognized, resolve
from .display import DisplayMode, project
from .engine import EnrichmentDiagnostics, PriceComparison, enrich_all
from .errors import EmptyInput, PricingError, UnknownCurrency
from .models import BestDeal, EnrichedPriceRecord, Projection, RankedRow, RawPriceRecord
from .normalize import enrich
from .ranking import SortKey, best_deal, rank, savings_percent
from .rates import ESHOP_RATES_2025, STEAM_RATES_2024, RateTable
from .storefronts import STOREFRONTS, Storefront, get_storefront

__all__ = [
    "BestDeal",
    "CanonicalCurrency",
    "DisplayMode",
    "ESHOP_RATES_2025",
    "EmptyInput",
    "EnrichedPriceRecord",
    "EnrichmentDiagnostics",
    "PriceComparison",
    "PricingError",
    "Projection",
    "REFERENCE_CURRENCY",
    "RankedRow",
    "RateTable",
    "RawPriceRecord",
    "STEAM_RATES_2024",
    "STOREFRONTS",
    "SortKey",
    "Storefront",
    "UnknownCurrency",
    "best_deal",
    "enrich",
    "enrich_all",
    "get_storefront",
    "is_recognized",
    "project",
    "rank",
    "resolve",
    "savings_percent",
]
