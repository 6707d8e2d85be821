import json
from unittest.mock import MagicMock

import pytest

from travel_planner.domain import TravelInfo, TravelPlanner, TravelRequest
from travel_planner.exceptions import CacheServiceError, LLMServiceError
from travel_planner.infrastructure.interfaces import CacheService, LLMService

PLAN = {
    "title": "杭州三日游",
    "budget_analysis": {
        "total_estimate": "3000元",
        "breakdown": [{"category": "住宿", "cost": "1200元"}],
    },
    "daily_plan": [
        {
            "day": 1,
            "theme": "西湖",
            "activities": [
                {
                    "time": "09:00",
                    "activity": "游西湖",
                    "location": {"name": "西湖", "lat": 30.25, "lng": 120.15},
                }
            ],
        }
    ],
}

REQUEST = TravelRequest(destination="杭州", days=3, budget=3000)


@pytest.fixture
def llm():
    return MagicMock(spec=LLMService)


@pytest.fixture
def cache():
    cache = MagicMock(spec=CacheService)
    cache.get.return_value = None
    return cache


def test_generate_plan_calls_llm_and_caches(llm, cache):
    llm.complete_json.return_value = json.dumps(PLAN)

    plan = TravelPlanner(llm, cache).generate_plan(REQUEST)

    assert plan.title == "杭州三日游"
    assert plan.daily_plan[0].activities[0].location.name == "西湖"
    key, value = cache.set.call_args.args
    assert len(key) == 64
    assert json.loads(value)["title"] == "杭州三日游"
    assert "杭州" in llm.complete_json.call_args.args[1]


def test_generate_plan_uses_cache_hit(llm, cache):
    cache.get.return_value = json.dumps(PLAN)

    plan = TravelPlanner(llm, cache).generate_plan(REQUEST)

    assert plan.title == "杭州三日游"
    llm.complete_json.assert_not_called()


def test_same_request_uses_same_cache_key(llm, cache):
    llm.complete_json.return_value = json.dumps(PLAN)
    planner = TravelPlanner(llm, cache)

    planner.generate_plan(REQUEST)
    planner.generate_plan(TravelRequest(destination="杭州", days=3, budget=3000))

    first, second = (call.args[0] for call in cache.get.call_args_list)
    assert first == second


def test_generate_plan_survives_cache_outage(llm, cache):
    cache.get.side_effect = CacheServiceError("plan:x", "get")
    cache.set.side_effect = CacheServiceError("plan:x", "set")
    llm.complete_json.return_value = json.dumps(PLAN)

    assert TravelPlanner(llm, cache).generate_plan(REQUEST).title == "杭州三日游"


def test_generate_plan_without_cache(llm):
    llm.complete_json.return_value = json.dumps(PLAN)

    assert TravelPlanner(llm).generate_plan(REQUEST).title == "杭州三日游"


def test_generate_plan_rejects_malformed_reply(llm, cache):
    llm.complete_json.return_value = json.dumps({"title": "missing days"})

    with pytest.raises(LLMServiceError):
        TravelPlanner(llm, cache).generate_plan(REQUEST)

    cache.set.assert_not_called()


def test_extract_travel_info(llm):
    llm.complete_json.return_value = json.dumps(
        {
            "destination": "成都",
            "days": 4,
            "budget": 5000,
            "companions": "",
            "preferences": "美食",
        }
    )

    info = TravelPlanner(llm).extract_travel_info("我想和家人去成都玩四天")

    assert info == TravelInfo(
        destination="成都", days=4, budget=5000, companions=None, preferences="美食"
    )


def test_extract_fills_missing_and_zero_fields_with_none(llm):
    llm.complete_json.return_value = json.dumps({"destination": "厦门", "budget": 0})

    info = TravelPlanner(llm).extract_travel_info("去厦门")

    assert info.model_dump() == {
        "destination": "厦门",
        "days": None,
        "budget": None,
        "companions": None,
        "preferences": None,
    }


@pytest.mark.parametrize("reply", ["not json", "[1, 2]", '"成都"'])
def test_extract_falls_back_to_preferences(llm, reply):
    llm.complete_json.return_value = reply

    info = TravelPlanner(llm).extract_travel_info("随便走走")

    assert info == TravelInfo(preferences="随便走走")


def test_extract_propagates_llm_failure(llm):
    llm.complete_json.side_effect = LLMServiceError("down")

    with pytest.raises(LLMServiceError):
        TravelPlanner(llm).extract_travel_info("去西安")


def test_extract_drops_only_invalid_fields(llm):
    llm.complete_json.return_value = json.dumps(
        {
            "destination": "成都",
            "days": 5,
            "budget": "2万",
            "companions": "一个人",
            "preferences": "火锅",
        },
        ensure_ascii=False,
    )

    info = TravelPlanner(llm).extract_travel_info("去成都玩五天 预算2万 一个人 吃火锅")

    assert info == TravelInfo(
        destination="成都", days=5, budget=None, companions="一个人", preferences="火锅"
    )


def test_generate_plan_accepts_numeric_costs(llm):
    plan = json.loads(json.dumps(PLAN))
    plan["budget_analysis"]["total_estimate"] = 3000
    plan["budget_analysis"]["breakdown"][0]["cost"] = 1200.5
    llm.complete_json.return_value = json.dumps(plan)

    result = TravelPlanner(llm).generate_plan(REQUEST)

    assert result.budget_analysis.total_estimate == "3000"
    assert result.budget_analysis.breakdown[0].cost == "1200.5"
