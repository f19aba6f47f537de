import pytest
from fastapi.testclient import TestClient

from main import app

client = TestClient(app)

pytestmark = [pytest.mark.api, pytest.mark.usefixtures("fresh_registry")]


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["jobs"] == 5


def test_recommendations():
    response = client.get("/recommendations", params={"candidate_id": "1"})
    assert response.status_code == 200
    data = response.json()
    assert data["candidate_id"] == "1"
    ids = [r["job_id"] for r in data["recommendations"]]
    assert ids == ["101", "103", "104", "102", "105"]
    assert data["count"] == 5
    top = data["recommendations"][0]
    assert top["score"] == 85
    assert top["missing_skills"] == ["Spring"]
    assert top["job"]["company"] == "Finlytics"
    assert top["job"]["location"] == "Bengaluru, India"
    assert top["job"]["experience_level"] == "Mid-level (2-5 years)"
    assert top["job"]["required_skills"] == ["Java", "Spring Boot", "Spring", "Postgresql"]
    scores = [r["score"] for r in data["recommendations"]]
    assert scores == sorted(scores, reverse=True)
    assert all(s > 0 for s in scores)


def test_recommendations_limit():
    response = client.get("/recommendations", params={"candidate_id": "1", "limit": 2})
    assert response.status_code == 200
    assert [r["job_id"] for r in response.json()["recommendations"]] == ["101", "103"]


def test_recommendations_rejects_non_positive_limit():
    response = client.get("/recommendations", params={"candidate_id": "1", "limit": 0})
    assert response.status_code == 400
    assert "limit" in response.json()["detail"]


def test_recommendations_unknown_candidate():
    response = client.get("/recommendations", params={"candidate_id": "999"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Candidate not found with id: 999"


def test_skill_gap_analysis():
    response = client.get("/skill-gap-analysis", params={"candidate_id": "1", "job_id": "102"})
    assert response.status_code == 200
    data = response.json()
    assert data["match_percentage"] == 0
    assert data["job"]["company"] == "Stratus Labs"
    priorities = {g["skill"]: g["priority"] for g in data["missing_skills"]}
    assert priorities["Python"] == "HIGH"
    assert priorities["Aws"] == "HIGH"
    assert priorities["Docker"] == "LOW"
    assert data["recommendations"][-1] == "🎯 Priority skills to learn: Python, Aws"


def test_skill_gap_analysis_fallback_skills():
    response = client.get("/skill-gap-analysis", params={"candidate_id": "1", "job_id": "105"})
    assert response.status_code == 200
    assert response.json()["match_percentage"] == 50


def test_skill_gap_analysis_unknown_job():
    response = client.get("/skill-gap-analysis", params={"candidate_id": "1", "job_id": "nope"})
    assert response.status_code == 404


def test_skill_gap_analysis_requires_job_id():
    response = client.get("/skill-gap-analysis", params={"candidate_id": "1"})
    assert response.status_code == 422
