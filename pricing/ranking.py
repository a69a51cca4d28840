from enum import Enum
from typing import Iterable, List, Mapping, Optional

from .errors import EmptyInput
from .models import EnrichedPriceRecord


class SortKey(str, Enum):
    PRICE = "price"
    REGION = "region"
    SAVINGS = "savings"

    @classmethod
    def parse(cls, value: "str | SortKey | None") -> "SortKey":
        if isinstance(value, SortKey):
            return value
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.PRICE


def display_region_name(
    record: EnrichedPriceRecord, region_names: Optional[Mapping[str, str]] = None
) -> str:
    """Localized name if the caller supplied one, else the source name, else the code."""
    if region_names:
        name = region_names.get(record.region)
        if name:
            return name
    return record.region_name or record.region


def rank(
    records: Iterable[EnrichedPriceRecord],
    key: SortKey = SortKey.PRICE,
    region_names: Optional[Mapping[str, str]] = None,
) -> List[EnrichedPriceRecord]:
    """
    Return a new list ordered by the sort key. sorted() is stable, so
    records with equal keys keep their source order.
    """
    key = SortKey.parse(key)
    if key is SortKey.REGION:
        return sorted(
            records,
            key=lambda r: display_region_name(r, region_names).casefold(),
        )
    if key is SortKey.SAVINGS:
        return sorted(records, key=lambda r: -r.savings)
    return sorted(records, key=lambda r: r.reference_price)


def best_deal(records: Iterable[EnrichedPriceRecord]) -> EnrichedPriceRecord:
    ranked = rank(records, SortKey.PRICE)
    if not ranked:
        raise EmptyInput("No priced regions to pick a best deal from")
    return ranked[0]


def savings_percent(savings: float, baseline: float) -> float:
    return round(savings / baseline * 100.0, 1)
