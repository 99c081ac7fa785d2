"""
Integration tests for the programme analysis API.
"""

import pytest
from fastapi.testclient import TestClient

from main import create_app


@pytest.fixture
def client():
    return TestClient(create_app())


def _milestone(milestone_id: str, **fields) -> dict:
    return {"id": milestone_id, "name": f"Milestone {milestone_id}", **fields}


def test_health_check(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_report_endpoint(client):
    payload = {
        "today": "2024-01-10",
        "milestones": [
            _milestone("A", trade="Carpentry", planned_start="2024-01-01", planned_end="2024-01-05"),
            _milestone(
                "B",
                trade="Carpentry",
                planned_start="2024-01-03",
                planned_end="2024-01-07",
                dependencies=["A"],
            ),
        ],
    }

    response = client.post("/api/programme/report", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["milestone_count"] == 2
    assert body["overall_health_percent"] == 75
    assert body["conflicts"][0]["overlap_days"] == 2
    assert body["conflicts"][0]["milestone_ids"] == ["A", "B"]
    assert body["critical_path"]["path"] == ["A", "B"]
    assert body["critical_path"]["duration"] == 8
    assert "B" in body["per_milestone_issues"]


def test_critical_path_endpoint_with_cycle(client):
    payload = {
        "milestones": [
            _milestone("A", dependencies=["B"]),
            _milestone("B", dependencies=["A"]),
        ]
    }

    response = client.post("/api/programme/critical-path", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["duration"] == 2
    assert any("Circular dependency" in risk for risk in body["risk_factors"])


def test_health_score_endpoint(client):
    payload = {
        "today": "2024-01-10",
        "milestone": _milestone("A", status="delayed", delay_risk_flag=True, planned_date="2024-01-09"),
    }

    response = client.post("/api/programme/health-score", json=payload)

    assert response.status_code == 200
    assert response.json() == {"milestone_id": "A", "score": 25, "band": "critical"}


def test_optimal_start_endpoint(client):
    payload = {
        "milestone": _milestone("B", dependencies=["A"]),
        "milestones": [_milestone("A", planned_start="2024-03-01", planned_end="2024-03-10")],
    }

    response = client.post("/api/programme/optimal-start", json=payload)

    assert response.status_code == 200
    assert response.json() == {"milestone_id": "B", "start_date": "2024-03-11"}


def test_validate_endpoint(client):
    payload = {
        "milestone": _milestone("A", planned_start="2024-03-10", planned_end="2024-03-01"),
        "milestones": [],
    }

    response = client.post("/api/programme/validate", json=payload)

    assert response.status_code == 200
    assert response.json() == ["Start date must precede end date."]


def test_invalid_status_is_rejected(client):
    payload = {"milestones": [_milestone("A", status="on-hold")]}

    response = client.post("/api/programme/conflicts", json=payload)

    assert response.status_code == 422


def test_template_programme_endpoint(client):
    payload = {"project_id": "project-1", "project_type": "residential", "start_date": "2024-01-01"}

    response = client.post("/api/programme/templates/programme", json=payload)

    assert response.status_code == 201
    body = response.json()
    assert len(body) == 13
    assert body[0]["name"] == "Site Establishment"
    assert body[0]["planned_start"] == "2024-01-01"


def test_unknown_template_returns_404(client):
    response = client.post(
        "/api/programme/templates/moon-landing",
        json={"project_id": "project-1"},
    )

    assert response.status_code == 404


def test_list_templates(client):
    response = client.get("/api/programme/templates")

    assert response.status_code == 200
    assert any(t["id"] == "site-establishment" for t in response.json())
