import json
from unittest.mock import MagicMock

import pytest

from travel_planner.dependencies import get_planner
from travel_planner.domain import TravelPlanner
from travel_planner.exceptions import LLMServiceError
from travel_planner.infrastructure.interfaces import LLMService
from travel_planner.main import app

PLAN = {
    "title": "西安两日游",
    "budget_analysis": {"total_estimate": "1500元", "breakdown": []},
    "daily_plan": [{"day": 1, "activities": []}, {"day": 2, "activities": []}],
}


@pytest.fixture
def llm():
    llm = MagicMock(spec=LLMService)
    app.dependency_overrides[get_planner] = lambda: TravelPlanner(llm)
    return llm


def test_health(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.text == "AI Travel Planner backend is running"


def test_plan(client, llm):
    llm.complete_json.return_value = json.dumps(PLAN)

    response = client.post("/api/llm/plan", json={"destination": "西安", "days": 2})

    assert response.status_code == 200
    assert response.json()["title"] == "西安两日游"
    assert len(response.json()["daily_plan"]) == 2


def test_plan_rejects_invalid_request(client, llm):
    response = client.post("/api/llm/plan", json={"destination": "西安", "days": 0})

    assert response.status_code == 422
    llm.complete_json.assert_not_called()


def test_plan_llm_failure(client, llm):
    llm.complete_json.side_effect = LLMServiceError("timeout")

    response = client.post("/api/llm/plan", json={"destination": "西安", "days": 2})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate plan"}


def test_extract(client, llm):
    llm.complete_json.return_value = json.dumps({"destination": "西安", "days": 2})

    response = client.post("/api/llm/extract", json={"text": "去西安两天"})

    assert response.status_code == 200
    assert response.json()["destination"] == "西安"
    assert response.json()["budget"] is None


@pytest.mark.parametrize("body", [{}, {"text": ""}])
def test_extract_missing_text(client, llm, body):
    response = client.post("/api/llm/extract", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Missing text"}


def test_extract_llm_failure(client, llm):
    llm.complete_json.side_effect = LLMServiceError("timeout")

    response = client.post("/api/llm/extract", json={"text": "去西安"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to extract travel info"}
