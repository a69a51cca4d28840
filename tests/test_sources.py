"""Tests for loading and parsing price documents."""

import datetime
import json

import pytest
import requests
from tenacity import stop_after_attempt, wait_none

import sources
from sources import SourceError, load_document, parse_document
from sources import remote
from pricing.storefronts import ESHOP, STEAM


class TestParseDocument:
    def test_object_with_metadata(self, eshop_document):
        doc = parse_document(eshop_document, ESHOP)
        assert len(doc.records) == 12
        assert doc.skipped == 0
        assert doc.data_version == "2.0"
        assert doc.game_status == "released"
        assert doc.note == "Launch prices"
        assert doc.last_updated == datetime.datetime(
            2025, 9, 10, 8, 0, tzinfo=datetime.timezone.utc
        )
        first = doc.records[0]
        assert first.region == "US"
        assert first.region_name == "United States"
        assert first.currency == "$"
        assert first.price == 19.99

    def test_bare_list(self):
        entries = [
            {"region": "TR", "currency": "₺", "steam": {"price": 399.99, "url": "u"}},
            {"region": "jp", "currency": "¥", "steam": {"price": "2,300"}},
        ]
        doc = parse_document(entries, STEAM)
        assert [r.region for r in doc.records] == ["TR", "JP"]
        assert doc.records[1].price == 2300.0
        assert doc.records[1].url == ""
        assert doc.last_updated is None

    def test_reads_only_the_storefront_block(self):
        entries = [
            {"region": "US", "currency": "$", "steam": {"price": 19.99}},
            {"region": "CA", "currency": "CAD$", "eshop": {"price": 27.29}},
        ]
        steam = parse_document(entries, STEAM)
        eshop = parse_document(entries, ESHOP)
        assert [r.region for r in steam.records] == ["US"]
        assert [r.region for r in eshop.records] == ["CA"]
        assert steam.skipped == 1
        assert eshop.skipped == 1

    def test_entries_without_usable_price_are_skipped(self):
        entries = [
            {"region": "US", "currency": "$", "steam": {"price": 19.99}},
            {"region": "CN", "currency": "¥", "steam": {"price": None}},
            {"region": "JP", "currency": "¥", "steam": {"price": 0}},
            {"region": "KR", "currency": "₩", "steam": {}},
            {"region": "BR", "currency": "R$", "steam": {"price": "n/a"}},
            {"region": "IN", "currency": "₹", "steam": {"price": True}},
            {"currency": "$", "steam": {"price": 9.99}},
            "not-an-entry",
        ]
        doc = parse_document(entries, STEAM)
        assert [r.region for r in doc.records] == ["US"]
        assert doc.skipped == 7

    def test_object_without_regions(self):
        with pytest.raises(SourceError):
            parse_document({"lastUpdated": "2025-09-10T08:00:00Z"}, ESHOP)

    def test_scalar_document(self):
        with pytest.raises(SourceError):
            parse_document("prices", STEAM)

    def test_bad_timestamp_is_ignored(self):
        doc = parse_document({"lastUpdated": "yesterday", "regions": []}, ESHOP)
        assert doc.last_updated is None

    def test_naive_timestamp_is_utc(self):
        doc = parse_document({"lastUpdated": "2025-09-04T00:00:00", "regions": []}, ESHOP)
        assert doc.last_updated.utcoffset() == datetime.timedelta(0)


class TestLocalLoader:
    def test_load_path(self, eshop_document_path, eshop_document):
        assert load_document(str(eshop_document_path)) == eshop_document

    def test_load_file_url(self, eshop_document_path, eshop_document):
        assert load_document(eshop_document_path.as_uri()) == eshop_document

    def test_missing_file(self, tmp_path):
        with pytest.raises(SourceError):
            load_document(str(tmp_path / "missing.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SourceError):
            load_document(str(path))


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=None):
        self.payload = payload
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        return json.loads(self.text)


class TestRemoteLoader:
    def test_dispatches_by_scheme(self):
        assert sources.LOADERS["https"] is remote.load_document
        assert sources.LOADERS["http"] is remote.load_document

    def test_fetches_json(self, monkeypatch, eshop_document):
        calls = []

        def fake_get(url, timeout):
            calls.append(url)
            return FakeResponse(eshop_document)

        monkeypatch.setattr(remote.SESSION, "get", fake_get)
        doc = load_document("https://example.com/data/switch-prices.json")
        assert doc == eshop_document
        assert calls == ["https://example.com/data/switch-prices.json"]

    def test_retries_then_gives_up(self, monkeypatch):
        calls = []

        def fake_get(url, timeout):
            calls.append(url)
            return FakeResponse(status_code=503, text="")

        monkeypatch.setattr(remote.SESSION, "get", fake_get)
        monkeypatch.setattr(
            remote,
            "_fetch",
            remote._fetch.retry_with(wait=wait_none(), stop=stop_after_attempt(3)),
        )
        with pytest.raises(SourceError):
            load_document("https://example.com/prices.json")
        assert len(calls) == 3

    def test_recovers_after_transient_error(self, monkeypatch, eshop_document):
        responses = [requests.ConnectionError("reset"), FakeResponse(eshop_document)]

        def fake_get(url, timeout):
            item = responses.pop(0)
            if isinstance(item, Exception):
                raise item
            return item

        monkeypatch.setattr(remote.SESSION, "get", fake_get)
        monkeypatch.setattr(
            remote, "_fetch", remote._fetch.retry_with(wait=wait_none())
        )
        assert load_document("https://example.com/prices.json") == eshop_document

    def test_invalid_json_body(self, monkeypatch):
        monkeypatch.setattr(
            remote.SESSION, "get", lambda url, timeout: FakeResponse(text="<html>")
        )
        with pytest.raises(SourceError):
            load_document("https://example.com/prices.json")
