"""
test_api.py
===========
End-to-end tests: report generator, karakas, FastAPI endpoints, PDF export.

Reference chart: 1988-07-18 18:46 IST, New Delhi (sidereal, Lahiri)
  Lagna Sagittarius 24°54', Jupiter in Taurus → first mahadasha Sagittarius, 5 years

Run with: python -m pytest chara_engine/ -v
"""

import logging
from datetime import date

import pytest
from fastapi.testclient import TestClient

from chara_engine import generate_chara_dasha, format_current_period, format_karakas
from chara_engine.core.errors import MissingLordPositionError
from chara_engine.core.karakas import compute_chara_karakas, karakamsha, navamsa_sign
from chara_engine.core.signs import ARIES, CAPRICORN, LEO
from chara_engine.demo import SAMPLE_ASCENDANT, SAMPLE_PLANETS
from chara_engine.logging_config import setup_logging
from main import app
from pdf_report import generate_pdf_report

BIRTH = date(1988, 7, 18)
ON_DATE = date(2024, 1, 1)

client = TestClient(app)


def _payload(**overrides):
    payload = {
        "birth_date": BIRTH.isoformat(),
        "ascendant_longitude": SAMPLE_ASCENDANT,
        "planets": dict(SAMPLE_PLANETS),
        "on_date": ON_DATE.isoformat(),
    }
    payload.update(overrides)
    return payload


@pytest.fixture(scope="module")
def sample_result():
    return generate_chara_dasha(BIRTH, SAMPLE_ASCENDANT, SAMPLE_PLANETS, ON_DATE)


# ---------------------------------------------------------------------------
# Karakas
# ---------------------------------------------------------------------------

def test_navamsa_sign():
    assert navamsa_sign(0.0) is ARIES
    assert navamsa_sign(30.0) is CAPRICORN      # Taurus starts from Capricorn
    assert navamsa_sign(53.60) is LEO


def test_chara_karakas_ranked_by_degree():
    karakas = compute_chara_karakas(SAMPLE_PLANETS)
    assert [k.planet for k in karakas] == [
        "Venus", "Moon", "Rahu", "Mercury", "Mars", "Jupiter", "Saturn", "Sun",
    ]
    assert karakas[0].karaka == "Atmakaraka"
    assert karakas[-1].karaka == "Darakaraka"
    assert karakamsha(karakas) is LEO


def test_chara_karakas_partial_chart():
    karakas = compute_chara_karakas({"Sun": 10.0, "Moon": 45.0, "Ketu": 29.0})
    assert [k.planet for k in karakas] == ["Moon", "Sun"]
    assert karakamsha([]) is None


# ---------------------------------------------------------------------------
# Report generator
# ---------------------------------------------------------------------------

def test_generate_chara_dasha_structure(sample_result):
    r = sample_result
    assert r["lagna"]["sign"] == "Sagittarius"
    assert r["lagna"]["is_odd"] is True
    assert r["direction"] == "forward"
    assert r["karakamsha"] == "Leo"
    assert len(r["mahadashas"]) == 24
    assert r["lord_positions"]["Aquarius"] == {"lord_sign": "Sagittarius", "years": 10}

    first = r["mahadashas"][0]
    assert first["sign"] == "Sagittarius"
    assert first["duration_years"] == 5
    assert first["start"] == "1988-07-18"
    assert first["end"] == "1993-07-17"
    assert [c["house_from_mahadasha"] for c in first["children"]] == list(range(1, 13))
    assert first["children"][-1]["end"] == first["end"]

    assert [m["sign"] for m in r["mahadashas"][:5]] == [
        "Sagittarius", "Capricorn", "Aquarius", "Pisces", "Aries",
    ]


def test_generate_chara_dasha_current(sample_result):
    current = sample_result["current"]
    maha, antar = current["mahadasha"], current["antardasha"]
    assert maha["sign"] == "Aries"
    assert maha["start"] <= ON_DATE.isoformat() <= maha["end"]
    assert antar["start"] <= ON_DATE.isoformat() <= antar["end"]
    assert 0.0 <= maha["progress_percent"] <= 100.0
    assert maha["remaining_days"] > 0

    summary = format_current_period(sample_result)
    assert "Mahadasha: Aries" in summary
    assert "Atmakaraka: Venus" in summary


def test_format_karakas(sample_result):
    text = format_karakas(sample_result)
    lines = text.splitlines()
    assert lines[0] == "=== CHARA KARAKAS (Jaimini Significators) ==="
    assert lines[2] == "Atmakaraka     : Venus      (23.60° in Taurus)"
    assert lines[9] == "Darakaraka     : Sun        (2.40° in Cancer)"
    assert lines[-1] == "Karakamsha: Leo"


def test_generate_chara_dasha_outside_tree():
    r = generate_chara_dasha(BIRTH, SAMPLE_ASCENDANT, SAMPLE_PLANETS, date(2200, 1, 1))
    assert r["current"] == {"mahadasha": None, "antardasha": None}
    assert format_current_period(r) == "No active Chara Dasha period"


def test_generate_chara_dasha_missing_lord():
    planets = {k: v for k, v in SAMPLE_PLANETS.items() if k != "Jupiter"}
    with pytest.raises(MissingLordPositionError):
        generate_chara_dasha(BIRTH, SAMPLE_ASCENDANT, planets, ON_DATE)

    r = generate_chara_dasha(BIRTH, SAMPLE_ASCENDANT, planets, ON_DATE,
                             own_sign_fallback=True)
    assert r["mahadashas"][0]["duration_years"] == 12


def test_generate_chara_dasha_limits():
    with pytest.raises(ValueError):
        generate_chara_dasha(BIRTH, SAMPLE_ASCENDANT, SAMPLE_PLANETS, ON_DATE,
                             number_of_cycles=11)
    with pytest.raises(ValueError):
        generate_chara_dasha(BIRTH, SAMPLE_ASCENDANT, SAMPLE_PLANETS, ON_DATE, levels=4)


def test_generate_chara_dasha_three_levels():
    r = generate_chara_dasha(BIRTH, SAMPLE_ASCENDANT, SAMPLE_PLANETS, ON_DATE,
                             number_of_cycles=1, levels=3)
    sub = r["mahadashas"][0]["children"][0]
    assert sub["children"]
    assert sub["children"][-1]["end"] == sub["end"]


# ---------------------------------------------------------------------------
# API
# ---------------------------------------------------------------------------

def test_health():
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_chara_dasha_endpoint():
    resp = client.post("/api/chara-dasha", json=_payload())
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["chara_dasha"]["lagna"]["sign"] == "Sagittarius"
    assert len(body["chara_dasha"]["mahadashas"]) == 24


def test_chara_dasha_current_endpoint():
    resp = client.post("/api/chara-dasha/current", json=_payload(dual_lord_rule="stronger"))
    assert resp.status_code == 200
    body = resp.json()
    assert body["direction"] == "forward"
    assert body["current"]["mahadasha"]["sign"] == "Aries"


def test_chara_dasha_endpoint_missing_lord():
    planets = {k: v for k, v in SAMPLE_PLANETS.items() if k != "Jupiter"}
    resp = client.post("/api/chara-dasha", json=_payload(planets=planets))
    assert resp.status_code == 400
    assert "Sagittarius" in resp.json()["detail"]


@pytest.mark.parametrize("override", [
    {"dual_lord_rule": "loudest"},
    {"number_of_cycles": 0},
    {"levels": 4},
    {"ascendant_longitude": 360.0},
    {"birth_date": "not-a-date"},
])
def test_chara_dasha_endpoint_validation(override):
    resp = client.post("/api/chara-dasha", json=_payload(**override))
    assert resp.status_code == 422


def test_pdf_endpoint(sample_result):
    resp = client.post("/api/pdf", json={"result": sample_result, "name": "Sample"})
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/pdf"
    assert resp.content[:4] == b"%PDF"


def test_pdf_endpoint_malformed_result():
    resp = client.post("/api/pdf", json={"result": {"current": {"mahadasha": {"sign": "Aries"}}}})
    assert resp.status_code == 400


def test_generate_pdf_report_outside_tree():
    r = generate_chara_dasha(BIRTH, SAMPLE_ASCENDANT, SAMPLE_PLANETS, date(2200, 1, 1),
                             number_of_cycles=1)
    assert generate_pdf_report(r, "Native")[:4] == b"%PDF"


def test_chara_dasha_endpoint_late_birth_date():
    resp = client.post("/api/chara-dasha", json=_payload(birth_date="9950-01-01"))
    assert resp.status_code == 400
    assert "9999-12-31" in resp.json()["detail"]


def test_pdf_endpoint_null_fields(sample_result):
    result = dict(sample_result, direction=None)
    result["meta"] = {"input": dict(sample_result["meta"]["input"], dual_lord_rule=None)}
    resp = client.post("/api/pdf", json={"result": result})
    assert resp.status_code == 200
    assert resp.content[:4] == b"%PDF"


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def test_setup_logging_unknown_level():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    try:
        setup_logging("chatty", format_json=False)
        assert root.level == logging.INFO
        setup_logging("debug", format_json=True)
        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
