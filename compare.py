import math
import os
import sys
from typing import Optional

from pricing.display import DisplayMode
from pricing.engine import PriceComparison
from pricing.errors import PricingError
from pricing.logger import get_logger
from pricing.ranking import SortKey
from pricing.report import build_text_report
from pricing.storefronts import Storefront, get_storefront
from sources import SourceError, load_document, parse_document

logger = get_logger(__name__)

PRICES_SOURCE = os.getenv("PRICES_SOURCE", "data/prices.json")
STOREFRONT = os.getenv("STOREFRONT", "steam").strip().lower()
BASELINE_USD = os.getenv("BASELINE_USD", "").strip()
SORT_KEY = os.getenv("SORT_KEY", "price")
DISPLAY_MODE = os.getenv("DISPLAY_MODE", "local")

# English names shown in the report; regions not listed fall back to the
# document's regionName, then the region code
REGION_NAMES = {
    "US": "United States",
    "CA": "Canada",
    "MX": "Mexico",
    "AR": "Argentina",
    "BR": "Brazil",
    "CN": "China",
    "HK": "Hong Kong",
    "JP": "Japan",
    "KR": "South Korea",
    "IN": "India",
    "TR": "Turkey",
    "RU": "Russia",
    "EU": "European Union",
    "UK": "United Kingdom",
    "GB": "United Kingdom",
    "DE": "Germany",
    "FR": "France",
    "IT": "Italy",
    "ES": "Spain",
    "AU": "Australia",
}


def load_storefront(key: str) -> Storefront:
    try:
        return get_storefront(key)
    except KeyError as e:
        logger.error("Invalid STOREFRONT: %s", e)
        raise SystemExit(1)


def parse_baseline(value: str) -> Optional[float]:
    if not value:
        return None
    try:
        baseline = float(value)
    except ValueError:
        logger.error("BASELINE_USD must be a number, got %r", value)
        raise SystemExit(1)
    if not math.isfinite(baseline) or baseline <= 0:
        logger.error("BASELINE_USD must be a positive finite number, got %r", value)
        raise SystemExit(1)
    return baseline


def parse_display_mode(value: str) -> DisplayMode:
    try:
        return DisplayMode.parse(value)
    except ValueError as e:
        logger.error("Invalid DISPLAY_MODE: %s", e)
        raise SystemExit(1)


def run_once(source: str | None = None) -> int:
    source = source or PRICES_SOURCE
    storefront = load_storefront(STOREFRONT)
    baseline = parse_baseline(BASELINE_USD)
    display_mode = parse_display_mode(DISPLAY_MODE)
    sort_key = SortKey.parse(SORT_KEY)
    if sort_key.value != SORT_KEY.strip().lower():
        logger.warning("Unknown SORT_KEY %r; sorting by price.", SORT_KEY)

    try:
        doc = parse_document(load_document(source), storefront)
    except SourceError as e:
        logger.error("Failed to load price document: %s", e)
        return 1

    if doc.skipped:
        logger.info(
            "%d entries in %s have no %s price; skipped.",
            doc.skipped, source, storefront.label,
        )

    comparison = PriceComparison(doc.records, storefront, baseline=baseline)
    if not len(comparison):
        logger.error("No %s prices found in %s.", storefront.label, source)
        return 1

    report = build_text_report(
        comparison,
        sort_key=sort_key,
        display_mode=display_mode,
        region_names=REGION_NAMES,
        last_updated=doc.last_updated,
        note=doc.note,
    )
    sys.stdout.write(report)
    return 0


if __name__ == "__main__":
    try:
        raise SystemExit(run_once())
    except PricingError as e:
        logger.error("Price comparison failed: %s", e)
        raise SystemExit(1)
    except Exception as e:
        logger.exception("Fatal price comparison error: %s", e)
        raise SystemExit(2)
