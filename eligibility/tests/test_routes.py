from fastapi.testclient import TestClient

import eligibility.routes as routes
from main import app

client = TestClient(app)


def test_assess_full_report(applicant_data) -> None:
    response = client.post("/eligibility", json={"applicant": applicant_data})

    assert response.status_code == 200
    body = response.json()
    assert body["outcome"]["score"] == 86
    assert body["chance_band"] == "High Chance"
    assert len(body["outcome"]["details"]) == 6
    assert body["outcome"]["details"][0]["category"] == "Country Assessment"
    assert body["financial_requirements"] == {
        "base_amount": 21041,
        "additional_funds": 24505,
        "currency": "AUD",
    }
    assert body["program_requirement"]["met"] is True


def test_assess_simple_format(applicant_data) -> None:
    response = client.post("/eligibility", json={"applicant": applicant_data, "format": "simple"})

    assert response.status_code == 200
    body = response.json()
    assert body["score"] == 86
    assert body["chance_band"] == "High Chance"
    assert body["categories"]["Study & Experience"] == "21/25"


def test_invalid_applicant_is_rejected(applicant_data) -> None:
    applicant_data["english_proficiency"] = "DUOLINGO"

    response = client.post("/eligibility", json={"applicant": applicant_data})

    assert response.status_code == 400
    assert "Invalid applicant" in response.json()["detail"]


def test_unexpected_error_returns_500(applicant_data, monkeypatch) -> None:
    def fail(applicant):
        raise RuntimeError("scoring failed")

    monkeypatch.setattr(routes.engine, "evaluate", fail)

    response = client.post("/eligibility", json={"applicant": applicant_data})

    assert response.status_code == 500
    assert response.json() == {"error": "scoring failed"}


def test_reference_countries() -> None:
    response = client.get("/eligibility/reference/countries")

    assert response.status_code == 200
    codes = {c["code"] for c in response.json()}
    assert {"US", "GB", "IN"} <= codes


def test_country_documents() -> None:
    response = client.get("/eligibility/reference/countries/in/documents")

    assert response.status_code == 200
    body = response.json()
    assert body["country"]["name"] == "India"
    assert "Police clearance certificate" in body["documents"]
    assert body["financial_requirements"]["base_amount"] == 30000


def test_unknown_country_documents_is_404() -> None:
    response = client.get("/eligibility/reference/countries/ZZ/documents")

    assert response.status_code == 404


def test_reference_levels_fields_and_bands() -> None:
    levels = client.get("/eligibility/reference/levels").json()
    assert [level["key"] for level in levels] == ["CERTIFICATE", "DIPLOMA", "BACHELORS", "MASTERS", "PHD"]

    fields = client.get("/eligibility/reference/fields").json()
    assert fields[0]["key"] == "IT"

    bands = client.get("/eligibility/reference/bands").json()
    assert bands == {"High Chance": 80, "Moderate Chance": 60, "Low Chance": 0}


def test_health_checks() -> None:
    assert client.get("/health").json() == {"status": "ok"}

    body = client.get("/eligibility/health").json()
    assert body["status"] == "ok"
    assert body["engine"] == "eligibility"
