# pricing/engine.py
import math
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from .currency import is_recognized, resolve
from .display import DisplayMode, project
from .errors import UnknownCurrency
from .logger import get_logger
from .models import BestDeal, EnrichedPriceRecord, RankedRow, RawPriceRecord
from .normalize import Resolver, enrich
from .ranking import SortKey, best_deal, display_region_name, rank, savings_percent
from .rates import RateTable
from .storefronts import STEAM, Storefront

logger = get_logger(__name__)


@dataclass(frozen=True)
class EnrichmentDiagnostics:
    enriched: int = 0
    unpriced: int = 0
    unknown_currency: int = 0
    fallback_currency: int = 0

    @property
    def skipped(self) -> int:
        return self.unpriced + self.unknown_currency


def _has_price(record: RawPriceRecord) -> bool:
    price = record.price
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        return False
    return math.isfinite(price) and price > 0


def enrich_all(
    records: Iterable[RawPriceRecord],
    rates: RateTable,
    baseline: float,
    resolver: Resolver = resolve,
) -> Tuple[List[EnrichedPriceRecord], EnrichmentDiagnostics]:
    """
    Enrich a batch of raw records. Unpriced records are filtered out and
    records whose currency has no rate are skipped; both are counted in the
    returned diagnostics instead of failing the batch.
    """
    enriched: List[EnrichedPriceRecord] = []
    unpriced = unknown = fallback = 0

    for record in records:
        if not _has_price(record):
            unpriced += 1
            logger.debug("Skipping unpriced record for region %s", record.region)
            continue
        try:
            item = enrich(record, rates, baseline, resolver)
        except UnknownCurrency as e:
            unknown += 1
            logger.warning(
                "Skipping region %s (token %r): %s", record.region, record.currency, e
            )
            continue
        if not is_recognized(record.currency):
            fallback += 1
            logger.debug(
                "Region %s currency token %r not recognized; priced as USD.",
                record.region, record.currency,
            )
        enriched.append(item)

    diagnostics = EnrichmentDiagnostics(
        enriched=len(enriched),
        unpriced=unpriced,
        unknown_currency=unknown,
        fallback_currency=fallback,
    )
    return enriched, diagnostics


class PriceComparison:
    """
    One storefront's regional price table for a page session.

    Holds the raw records it was built from and the enriched records derived
    from them. Sorting and display mode are chosen per call, so one
    comparison can serve any number of views.
    """

    def __init__(
        self,
        records: Sequence[RawPriceRecord],
        storefront: Storefront = STEAM,
        rates: Optional[RateTable] = None,
        baseline: Optional[float] = None,
        resolver: Resolver = resolve,
    ):
        self.storefront = storefront
        self.rates = rates if rates is not None else storefront.rates
        self.baseline = float(baseline if baseline is not None else storefront.baseline)
        if not math.isfinite(self.baseline) or self.baseline <= 0:
            raise ValueError(f"Baseline must be a positive price, got {baseline!r}")
        self._resolver = resolver
        self._raw: Tuple[RawPriceRecord, ...] = tuple(records)

        enriched, self.diagnostics = enrich_all(
            self._raw, self.rates, self.baseline, resolver
        )
        self.records: Tuple[EnrichedPriceRecord, ...] = tuple(enriched)

        logger.info(
            "%s comparison: %d regions priced (%d unpriced, %d unknown currency) "
            "with rates %s and baseline $%.2f",
            storefront.label,
            self.diagnostics.enriched,
            self.diagnostics.unpriced,
            self.diagnostics.unknown_currency,
            self.rates.name,
            self.baseline,
        )

    def __len__(self) -> int:
        return len(self.records)

    @property
    def raw_records(self) -> Tuple[RawPriceRecord, ...]:
        return self._raw

    def with_rates(self, rates: RateTable) -> "PriceComparison":
        return PriceComparison(
            self._raw, self.storefront, rates, self.baseline, self._resolver
        )

    def with_baseline(self, baseline: float) -> "PriceComparison":
        return PriceComparison(
            self._raw, self.storefront, self.rates, baseline, self._resolver
        )

    def ranked(
        self,
        sort_key: SortKey = SortKey.PRICE,
        region_names: Optional[Mapping[str, str]] = None,
    ) -> List[EnrichedPriceRecord]:
        return rank(self.records, sort_key, region_names)

    def get_ranked_view(
        self,
        sort_key: SortKey = SortKey.PRICE,
        display_mode: DisplayMode = DisplayMode.LOCAL,
        region_names: Optional[Mapping[str, str]] = None,
    ) -> List[RankedRow]:
        """
        Rows for the price table in the requested order. The best-deal flag
        always marks the cheapest region, whatever the sort.
        """
        ordered = self.ranked(sort_key, region_names)
        if not ordered:
            return []
        cheapest = best_deal(self.records)

        return [
            RankedRow(
                position=i + 1,
                region=r.region,
                region_name=display_region_name(r, region_names),
                flag=r.flag,
                display=project(r, display_mode),
                reference_price=r.reference_price,
                savings=r.savings,
                url=r.url,
                is_best_deal=r is cheapest,
            )
            for i, r in enumerate(ordered)
        ]

    def get_best_deal(
        self, region_names: Optional[Mapping[str, str]] = None
    ) -> BestDeal:
        """Raises EmptyInput if no region has a usable price."""
        deal = best_deal(self.records)
        return BestDeal(
            region=deal.region,
            region_name=display_region_name(deal, region_names),
            price=deal.price,
            currency=deal.currency,
            reference_price=deal.reference_price,
            savings=deal.savings,
            savings_percent=savings_percent(deal.savings, self.baseline),
            url=deal.url,
            flag=deal.flag,
        )
