import datetime
from pathlib import Path
from typing import Mapping, Optional

import pytz
from jinja2 import Environment, FileSystemLoader

from .display import DisplayMode, format_local_price
from .engine import PriceComparison
from .errors import EmptyInput
from .ranking import SortKey

# Resolve template directory relative to this file
TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)


def now_utc_iso() -> str:
    return datetime.datetime.now(tz=pytz.UTC).isoformat(timespec="seconds")


def _savings_str(savings: float) -> str:
    if savings > 0:
        return f"Save ${savings:.2f}"
    return "No savings"


def build_text_report(
    comparison: PriceComparison,
    sort_key: SortKey = SortKey.PRICE,
    display_mode: DisplayMode = DisplayMode.LOCAL,
    region_names: Optional[Mapping[str, str]] = None,
    last_updated: Optional[datetime.datetime] = None,
    note: str = "",
) -> str:
    template = env.get_template("report.txt")
    rows = comparison.get_ranked_view(sort_key, display_mode, region_names)

    row_data = [
        {
            "position": row.position,
            "marker": "*" if row.is_best_deal else " ",
            "region": f"{row.flag} {row.region_name}".strip(),
            "price_str": row.display.text,
            "usd_str": f"${row.reference_price:.2f}",
            "savings_str": _savings_str(row.savings),
            "url": row.url,
        }
        for row in rows
    ]
    region_width = max([len(r["region"]) for r in row_data] + [len("Region")])
    price_width = max([len(r["price_str"]) for r in row_data] + [len("Price")])

    best = None
    try:
        deal = comparison.get_best_deal(region_names)
    except EmptyInput:
        deal = None
    if deal is not None:
        best = {
            "region": f"{deal.flag} {deal.region_name}".strip(),
            "price_str": f"{deal.currency}{format_local_price(deal.price)}",
            "usd_str": f"${deal.reference_price:.2f}",
            "savings_percent": f"{deal.savings_percent:.1f}",
            "url": deal.url,
        }

    diag = comparison.diagnostics
    ctx = {
        "title": f"{comparison.storefront.label} regional prices",
        "generated_at": now_utc_iso(),
        "last_updated": last_updated.isoformat() if last_updated else "",
        "note": note,
        "rates_name": comparison.rates.name,
        "baseline_str": f"${comparison.baseline:.2f}",
        "sort_key": SortKey.parse(sort_key).value,
        "display_mode": DisplayMode.parse(display_mode).value,
        "rows": row_data,
        "region_width": region_width,
        "price_width": price_width,
        "best": best,
        "diagnostics": diag,
    }

    return template.render(**ctx)
