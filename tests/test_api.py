"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from pertplan.interfaces.api import create_app


@pytest.fixture
def client():
    return TestClient(create_app())


@pytest.fixture
def sample_client(sample_project):
    return TestClient(create_app(sample_project))


class TestProjectEndpoints:
    def test_root(self, client):
        assert client.get("/").json()["name"] == "pertplan"

    def test_initial_project(self, client):
        data = client.get("/api/project").json()
        assert data["projectName"] == "New Project Estimation"
        assert [m["id"] for m in data["milestones"]] == ["A"]

    def test_load_snapshot(self, client, sample_project):
        response = client.post("/api/project", json=sample_project.to_snapshot())
        assert response.status_code == 200
        assert response.json()["clientName"] == "Acme"
        assert client.get("/api/project").json() == sample_project.to_snapshot()

    def test_load_invalid_snapshot(self, client):
        response = client.post("/api/project", json={"projectName": "X"})
        assert response.status_code == 400
        assert "milestones" in response.json()["detail"]

    def test_summary(self, sample_client):
        data = sample_client.get("/api/summary").json()
        assert data["grand_total"] == pytest.approx(27.6)
        assert [m["id"] for m in data["milestones"]] == ["A", "B"]


class TestCommandEndpoint:
    def test_add_task(self, client):
        response = client.post("/api/commands", json={"type": "AddTask", "milestoneId": "A"})
        assert response.status_code == 200
        data = response.json()
        assert data["changed"] is True
        assert data["project"]["milestones"][0]["tasks"][0]["id"] == "A1"

    def test_commands_accumulate(self, client):
        client.post("/api/commands", json={"type": "AddTask", "milestoneId": "A"})
        client.post(
            "/api/commands",
            json={"type": "UpdateEstimate", "milestoneId": "A", "taskId": "A1", "which": "mostLikely", "value": 6},
        )
        data = client.get("/api/summary").json()
        # E = 4, overhead on 4 = 0.6
        assert data["grand_total"] == pytest.approx(4.6)

    def test_unknown_target_reports_unchanged(self, client):
        response = client.post("/api/commands", json={"type": "DeleteMilestone", "milestoneId": "Q"})
        assert response.status_code == 200
        assert response.json()["changed"] is False

    @pytest.mark.parametrize(
        "payload",
        [
            {"type": "UpdateTask", "milestoneId": "A", "taskId": "A1", "field": "estimates.mostLikely", "value": "6"},
            {"type": "UpdateTask", "milestoneId": "A", "taskId": "A1", "field": "isEnabled", "value": "false"},
            {"type": "UpdateMilestone", "milestoneId": "A", "field": "name", "value": True},
        ],
    )
    def test_wrong_value_type_leaves_session_usable(self, client, payload):
        client.post("/api/commands", json={"type": "AddTask", "milestoneId": "A"})
        response = client.post("/api/commands", json=payload)
        assert response.status_code == 200
        assert response.json()["changed"] is False

        assert client.get("/api/summary").status_code == 200
        assert client.get("/api/export/csv").status_code == 200
        assert client.get("/api/export/report").status_code == 200
        assert client.get("/api/project").json()["milestones"][0]["tasks"][0]["isEnabled"] is True

    def test_invalid_command(self, client):
        response = client.post("/api/commands", json={"type": "Explode"})
        assert response.status_code == 422


class TestExportEndpoints:
    def test_json(self, sample_client, sample_project):
        response = sample_client.get("/api/export/json")
        assert response.headers["content-type"].startswith("application/json")
        assert "pert-estimation.json" in response.headers["content-disposition"]
        assert response.json() == sample_project.to_snapshot()

    def test_csv(self, sample_client):
        response = sample_client.get("/api/export/csv")
        assert response.headers["content-type"].startswith("text/csv")
        assert "Website_Redmine_Import.csv" in response.headers["content-disposition"]
        assert response.text.startswith("Subject,Description,Target version,Estimated time\n")

    def test_report(self, sample_client):
        data = sample_client.get("/api/export/report").json()
        assert data["title"] == "Acme - Website"
        assert [t["id"] for t in data["milestones"][0]["tasks"]] == ["A1", "A3", "A-mgmt"]
        assert "remarks" not in data
