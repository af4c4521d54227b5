import pytest
from fastapi.testclient import TestClient

import main
from services.recent import recent_searches

SAMPLE_METAR = "KORD 041751Z VRB03KT 1 1/2SM -RA BR BKN008 OVC015 05/M01 A2992"
SAMPLE_TAF = (
    "TAF KORD 041730Z 0418/0524 28012KT 6SM FEW050 "
    "FM042200 30015G25KT 5SM SCT040 TEMPO 0502/0506 3SM -SHRA BKN020"
)


@pytest.fixture(autouse=True)
def clear_recent_searches():
    recent_searches.clear()
    yield
    recent_searches.clear()


@pytest.fixture
def client():
    return TestClient(main.app)


@pytest.fixture
def upstream(monkeypatch):
    """Replace the aviationweather.gov fetchers used by the API."""
    reports = {"metar": SAMPLE_METAR, "taf": SAMPLE_TAF}
    calls = []

    def fake_metar(station):
        calls.append(("metar", station))
        return reports["metar"]

    def fake_taf(station):
        calls.append(("taf", station))
        return reports["taf"]

    monkeypatch.setattr(main, "fetch_metar", fake_metar)
    monkeypatch.setattr(main, "fetch_taf", fake_taf)
    return reports, calls
