"""Tests for station validation and the aviationweather.gov client."""

import pytest
import requests

import services.weather as weather
from services.weather import (
    InvalidStationError,
    StationNotFoundError,
    UpstreamFetchError,
    fetch_metar,
    fetch_taf,
    normalize_station,
)


class FakeResponse:
    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code

    @property
    def ok(self):
        return self.status_code < 400


class TestNormalizeStation:

    @pytest.mark.parametrize("raw, expected", [
        ("KORD", "KORD"),
        ("kjfk", "KJFK"),
        ("sfo", "SFO"),
    ])
    def test_valid(self, raw, expected):
        assert normalize_station(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "KO", "KORDX", "K0RD", "KO D", "KORD;", "KORD\n"])
    def test_invalid(self, raw):
        with pytest.raises(InvalidStationError):
            normalize_station(raw)


class TestFetch:

    def test_metar_request(self, monkeypatch):
        seen = {}

        def fake_get(url, params=None, timeout=None):
            seen.update(url=url, params=params, timeout=timeout)
            return FakeResponse("  KORD 041751Z 18008KT 10SM CLR 15/05 A3001\n")

        monkeypatch.setattr(weather.requests, "get", fake_get)

        assert fetch_metar("KORD") == "KORD 041751Z 18008KT 10SM CLR 15/05 A3001"
        assert seen["url"] == f"{weather.AVIATIONWEATHER_BASE}/metar"
        assert seen["params"] == {"ids": "KORD", "format": "raw"}
        assert seen["timeout"] == weather.REQUEST_TIMEOUT

    def test_taf_may_be_empty(self, monkeypatch):
        monkeypatch.setattr(weather.requests, "get", lambda url, **kw: FakeResponse("\n"))
        assert fetch_taf("KXYZ") == ""

    def test_http_error_means_not_found(self, monkeypatch):
        monkeypatch.setattr(weather.requests, "get", lambda url, **kw: FakeResponse("bad", 404))
        with pytest.raises(StationNotFoundError) as exc:
            fetch_metar("ZZZZ")
        assert str(exc.value) == 'No data found for station "ZZZZ".'

    def test_timeout(self, monkeypatch):
        def fake_get(url, **kw):
            raise requests.exceptions.Timeout("slow")

        monkeypatch.setattr(weather.requests, "get", fake_get)
        with pytest.raises(UpstreamFetchError):
            fetch_taf("KORD")

    def test_connection_error(self, monkeypatch):
        def fake_get(url, **kw):
            raise requests.exceptions.ConnectionError("down")

        monkeypatch.setattr(weather.requests, "get", fake_get)
        with pytest.raises(UpstreamFetchError):
            fetch_metar("KORD")
