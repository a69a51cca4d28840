"""
Turn a deserialized price document into RawPriceRecords.

Two shapes are accepted: a bare list of region entries, or an object with a
"regions" list alongside metadata (lastUpdated, dataVersion, gameStatus,
note). Each entry looks like:

    {"region": "JP", "currency": "¥", "regionName": "Japan", "flag": "🇯🇵",
     "steam": {"price": 2300, "url": "https://..."}}

Only entries with a present, positive price under the storefront's field
become records; the rest are counted as skipped.
"""
import datetime
from dataclasses import dataclass, field
from typing import Any, List, Optional

import pytz

from pricing.logger import get_logger
from pricing.models import RawPriceRecord
from pricing.storefronts import Storefront

logger = get_logger(__name__)


class SourceError(Exception):
    """The price document could not be loaded or has an unusable shape."""


@dataclass
class PriceDocument:
    storefront: Storefront
    records: List[RawPriceRecord] = field(default_factory=list)
    skipped: int = 0
    last_updated: Optional[datetime.datetime] = None
    data_version: str = ""
    game_status: str = ""
    note: str = ""


def parse_timestamp(value: Any) -> Optional[datetime.datetime]:
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        ts = datetime.datetime.fromisoformat(text)
    except ValueError:
        logger.debug("Ignoring unparseable lastUpdated value %r", value)
        return None
    if ts.tzinfo is None:
        return pytz.UTC.localize(ts)
    return ts.astimezone(pytz.UTC)


def _parse_price(value: Any) -> Optional[float]:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        price = float(value)
    elif isinstance(value, str):
        try:
            price = float(value.strip().replace(",", ""))
        except ValueError:
            return None
    else:
        return None
    if price != price or price <= 0:
        return None
    return price


def _parse_entry(entry: Any, price_field: str) -> Optional[RawPriceRecord]:
    if not isinstance(entry, dict):
        return None
    region = entry.get("region")
    if not isinstance(region, str) or not region.strip():
        return None
    block = entry.get(price_field)
    if not isinstance(block, dict):
        return None
    price = _parse_price(block.get("price"))
    if price is None:
        return None

    return RawPriceRecord(
        region=region.strip().upper(),
        currency=str(entry.get("currency") or "").strip(),
        price=price,
        url=str(block.get("url") or ""),
        region_name=str(entry.get("regionName") or ""),
        flag=str(entry.get("flag") or ""),
    )


def parse_document(doc: Any, storefront: Storefront) -> PriceDocument:
    if isinstance(doc, list):
        entries = doc
        meta: dict = {}
    elif isinstance(doc, dict):
        entries = doc.get("regions")
        if not isinstance(entries, list):
            raise SourceError("Price document object has no 'regions' list")
        meta = doc
    else:
        raise SourceError(
            f"Price document must be a list or object, got {type(doc).__name__}"
        )

    out = PriceDocument(
        storefront=storefront,
        last_updated=parse_timestamp(meta.get("lastUpdated")),
        data_version=str(meta.get("dataVersion") or ""),
        game_status=str(meta.get("gameStatus") or ""),
        note=str(meta.get("note") or ""),
    )

    for entry in entries:
        record = _parse_entry(entry, storefront.price_field)
        if record is None:
            out.skipped += 1
            continue
        out.records.append(record)

    logger.debug(
        "Parsed %d %s records (%d entries skipped)",
        len(out.records), storefront.label, out.skipped,
    )
    return out
