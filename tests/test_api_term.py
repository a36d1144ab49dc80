"""
Tests for the /term API endpoint.

These tests use FastAPI TestClient with the clock dependency pinned to a
fixed moment so time-remaining fields are deterministic.
"""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from api.deps import get_clock
from api.main import app

FIXED_NOW = datetime(2025, 1, 1)

client = TestClient(app)


@pytest.fixture(autouse=True)
def fixed_clock():
    app.dependency_overrides[get_clock] = lambda: (lambda: FIXED_NOW)
    yield
    app.dependency_overrides.clear()


def test_health():
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_utility_term():
    resp = client.post("/term", json={
        "patentType": "utility",
        "filingDate": "2020-01-01",
        "grantDate": "2022-01-01",
        "hasDomesticBenefit": False,
    })
    assert resp.status_code == 200
    body = resp.json()
    assert body["expirationDate"] == "2040-01-01"
    assert body["termBasis"] == "20 years from filing date"
    assert body["maintenanceFees"] == {
        "first": "2026-01-01", "second": "2030-01-01", "third": "2034-01-01",
    }
    assert body["daysUntilExpiration"] == 5478
    assert body["yearsUntilExpiration"] == 15.0
    assert body["isExpired"] is False
    first = body["feeSchedule"][0]
    assert first["windowOpens"] == "2025-07-01"
    assert first["graceEnds"] == "2026-07-01"
    assert first["status"] == "NOT_YET_OPEN"


def test_snake_case_keys_accepted():
    resp = client.post("/term", json={
        "patent_type": "utility",
        "filing_date": "2020-01-01",
        "grant_date": "2022-01-01",
        "has_domestic_benefit": True,
        "eefd": "2018-06-01",
    })
    assert resp.status_code == 200
    assert resp.json()["termBasis"] == "20 years from Earliest Effective Filing Date"


def test_design_has_no_fee_schedule():
    resp = client.post("/term", json={
        "patentType": "design", "filingDate": "2016-01-01", "grantDate": "2017-01-01",
    })
    body = resp.json()
    assert body["expirationDate"] == "2032-01-01"
    assert body["maintenanceFees"] is None
    assert body["feeSchedule"] == []


def test_pre_gatt_expired():
    resp = client.post("/term", json={
        "patentType": "utility", "filingDate": "1990-01-01", "grantDate": "1993-01-01",
    })
    body = resp.json()
    assert body["isExpired"] is True
    assert body["termBasis"] == "17 years from grant date (pre-GATT)"
    assert [w["status"] for w in body["feeSchedule"]] == ["LAPSED", "LAPSED", "LAPSED"]


def test_missing_dates_rejected():
    resp = client.post("/term", json={"patentType": "utility", "filingDate": "2020-01-01"})
    assert resp.status_code == 422
    assert "grant_date" in resp.json()["detail"]


def test_unknown_type_rejected():
    resp = client.post("/term", json={
        "patentType": "trademark", "filingDate": "2020-01-01", "grantDate": "2022-01-01",
    })
    assert resp.status_code == 422
    assert "utility" in resp.json()["detail"]


def test_term_past_calendar_end_rejected():
    resp = client.post("/term", json={
        "patentType": "utility", "filingDate": "9990-01-01", "grantDate": "9995-01-01",
    })
    assert resp.status_code == 422
    detail = resp.json()["detail"]
    assert "outside the supported range" in detail
    assert "patentType" not in detail


def test_fee_grace_period_past_calendar_end_rejected():
    resp = client.post("/term", json={
        "patentType": "utility", "filingDate": "9979-12-01", "grantDate": "9987-10-01",
    })
    assert resp.status_code == 422
    assert "outside the supported range" in resp.json()["detail"]
