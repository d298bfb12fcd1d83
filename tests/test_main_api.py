# tests/test_main_api.py
import pytest
import yaml
from fastapi.testclient import TestClient

from main import app, build_engine, create_app
from src.core.config import AssessmentSettings
from services.counselor_assessment.definitions import DEFAULT_CATALOG_DATA
from services.counselor_assessment.models import CatalogValidationError


def small_catalog(wiscar_count: int = 6) -> dict:
    """Two psychometric, one technical and the first `wiscar_count` WISCAR questions (w1..w6 cover every dimension)."""
    return {
        "psychometric": DEFAULT_CATALOG_DATA["psychometric"][:2],
        "technical": DEFAULT_CATALOG_DATA["technical"][:1],
        "wiscar-framework": DEFAULT_CATALOG_DATA["wiscar-framework"][:wiscar_count],
        "answer_key": {"t1": 1},
    }


def write_catalog(tmp_path, data) -> str:
    catalog_file = tmp_path / "catalog.yaml"
    catalog_file.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
    return str(catalog_file)


def walk_with_top_answers(client, prefix, question_ids):
    client.post(f"{prefix}/assessment/start")
    body = None
    for question_id in question_ids:
        value = 1 if question_id == "t1" else 5
        client.post(f"{prefix}/assessment/answers", json={"question_id": question_id, "value": value})
        body = client.post(f"{prefix}/assessment/advance").json()
    return body


def test_health_check():
    with TestClient(app) as client:
        response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_default_app_serves_built_in_catalog():
    with TestClient(app) as client:
        response = client.get("/api/v1/assessment")
    assert response.status_code == 200
    assert response.json()["total_questions"] == 20


def test_custom_prefix_and_catalog(tmp_path):
    settings = AssessmentSettings(catalog_path=write_catalog(tmp_path, small_catalog()), api_prefix="/v2", log_level="DEBUG")
    question_ids = ["p1", "p2", "t1", "w1", "w2", "w3", "w4", "w5", "w6"]

    with TestClient(create_app(settings)) as client:
        assert client.get("/api/v1/assessment").status_code == 404
        assert client.get("/v2/assessment").json()["total_questions"] == 9

        body = walk_with_top_answers(client, "/v2", question_ids)
        assert body["is_complete"] is True

        results = client.get("/v2/assessment/results").json()
        assert results["overall_confidence_score"] == pytest.approx(100.0)
        assert results["recommendation"] == "Yes"


def test_unanswered_dimensions_pull_down_custom_catalog_results(tmp_path):
    """With only w1 (will) in the catalog, the other five dimensions stay at 0 in the pooled mean."""
    settings = AssessmentSettings(catalog_path=write_catalog(tmp_path, small_catalog(wiscar_count=1)))

    with TestClient(create_app(settings)) as client:
        body = walk_with_top_answers(client, "/api/v1", ["p1", "p2", "t1", "w1"])
        assert body["is_complete"] is True

        results = client.get("/api/v1/assessment/results").json()
        assert results["dimension_scores"]["will"] == pytest.approx(100.0)
        assert results["overall_confidence_score"] == pytest.approx((100.0 + 100.0 + 100.0 / 6) / 3)
        assert results["recommendation"] == "Maybe"


def test_catalog_with_wrong_rating_scale_fails_at_startup(tmp_path):
    data = small_catalog()
    data["psychometric"] = [dict(q, scale=10) for q in data["psychometric"]]
    settings = AssessmentSettings(catalog_path=write_catalog(tmp_path, data))
    with pytest.raises(CatalogValidationError, match="5-point scaled rating"):
        with TestClient(create_app(settings)):
            pass


def test_bad_catalog_fails_at_startup(tmp_path):
    settings = AssessmentSettings(catalog_path=str(tmp_path / "missing.yaml"))
    with pytest.raises(CatalogValidationError):
        with TestClient(create_app(settings)):
            pass


def test_build_engine_defaults_to_built_in_bank():
    engine = build_engine(AssessmentSettings(catalog_path=None))
    assert engine.total_questions() == 20


def test_apps_hold_separate_sessions():
    first = create_app(AssessmentSettings())
    second = create_app(AssessmentSettings())
    with TestClient(first) as a, TestClient(second) as b:
        a.post("/api/v1/assessment/start")
        assert a.get("/api/v1/assessment").json()["section"] == "psychometric"
        assert b.get("/api/v1/assessment").json()["section"] == "intro"
