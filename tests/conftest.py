import json

import pytest

from pricing.models import RawPriceRecord


STEAM_ENTRIES = [
    ("US", "$", 19.99),
    ("CN", "¥", 68),
    ("MX", "$", 227.99),
    ("AR", "$", 18999.0),
    ("TR", "₺", 399.99),
    ("RU", "₽", 1100),
    ("BR", "R$", 59.99),
    ("IN", "₹", 880),
    ("EU", "€", 19.5),
    ("UK", "£", 16.75),
    ("JP", "¥", 2300),
    ("KR", "₩", 21500),
]

ESHOP_ENTRIES = [
    ("US", "United States", "$", 19.99),
    ("CA", "Canada", "CAD$", 27.29),
    ("MX", "Mexico", "MX$", 227.99),
    ("BR", "Brazil", "R$", 59.99),
    ("GB", "United Kingdom", "£", 16.75),
    ("DE", "Germany", "€", 19.5),
    ("FR", "France", "€", 19.5),
    ("IT", "Italy", "€", 19.5),
    ("ES", "Spain", "€", 19.5),
    ("JP", "Japan", "¥", 2300),
    ("KR", "South Korea", "₩", 21500),
    ("AU", "Australia", "AUD$", 29.5),
]


@pytest.fixture
def steam_records():
    return [
        RawPriceRecord(
            region=region,
            currency=token,
            price=price,
            url=f"https://store.steampowered.com/app/1030300/?cc={region.lower()}",
        )
        for region, token, price in STEAM_ENTRIES
    ]


@pytest.fixture
def eshop_records():
    return [
        RawPriceRecord(
            region=region,
            currency=token,
            price=price,
            url=f"https://www.nintendo.com/{region.lower()}/store/products/silksong/",
            region_name=name,
        )
        for region, name, token, price in ESHOP_ENTRIES
    ]


@pytest.fixture
def eshop_document():
    return {
        "lastUpdated": "2025-09-10T08:00:00.000Z",
        "dataVersion": "2.0",
        "gameStatus": "released",
        "note": "Launch prices",
        "regions": [
            {
                "region": region,
                "regionName": name,
                "currency": token,
                "eshop": {
                    "price": price,
                    "url": f"https://www.nintendo.com/{region.lower()}/store/",
                },
            }
            for region, name, token, price in ESHOP_ENTRIES
        ],
    }


@pytest.fixture
def eshop_document_path(tmp_path, eshop_document):
    path = tmp_path / "switch-prices.json"
    path.write_text(json.dumps(eshop_document, ensure_ascii=False), encoding="utf-8")
    return path
