"""Core business logic for itinerary generation and travel-info extraction."""

import hashlib
import json

from pydantic import ValidationError

from travel_planner.exceptions import CacheServiceError, LLMServiceError
from travel_planner.infrastructure.interfaces import CacheService, LLMService
from travel_planner.logging import setup_logging

from .models import TravelInfo, TravelPlan, TravelRequest
from .prompts import (
    EXTRACTOR_SYSTEM_PROMPT,
    PLANNER_SYSTEM_PROMPT,
    build_extract_prompt,
    build_plan_prompt,
)

logger = setup_logging()


class TravelPlanner:
    """Turns trip descriptions into itineraries using an LLM."""

    def __init__(
        self, llm_service: LLMService, cache_service: CacheService | None = None
    ):
        self._llm = llm_service
        self._cache = cache_service

    def generate_plan(self, request: TravelRequest) -> TravelPlan:
        """
        Generates an itinerary, using cache when available.

        Args:
            request: Destination, duration, budget and preferences.

        Returns:
            The validated itinerary.

        Raises:
            LLMServiceError: If the LLM call fails or its reply is not a plan.
        """
        request_json = request.model_dump_json().encode("utf-8")
        cache_key = hashlib.sha256(request_json).hexdigest()

        cached = self._cache_get(cache_key)
        if cached:
            logger.info("Plan retrieved from cache", extra={"key": cache_key})
            return TravelPlan.model_validate_json(cached)

        reply = self._llm.complete_json(
            PLANNER_SYSTEM_PROMPT, build_plan_prompt(request)
        )
        try:
            plan = TravelPlan.model_validate_json(reply)
        except ValidationError as e:
            logger.exception("LLM reply is not a valid itinerary")
            raise LLMServiceError("LLM reply is not a valid itinerary", cause=e) from e

        self._cache_set(cache_key, plan.model_dump_json())
        logger.info(
            "Plan generated",
            extra={"destination": request.destination, "days": len(plan.daily_plan)},
        )
        return plan

    def extract_travel_info(self, text: str) -> TravelInfo:
        """
        Extracts trip fields from a noisy transcript.

        Every field is present in the result; anything the model left out or
        returned empty becomes ``None``, and so does a field of the wrong type;
        the other fields are kept. A reply that is not a JSON object degrades
        to the whole text as ``preferences``.

        Raises:
            LLMServiceError: If the LLM call itself fails.
        """
        reply = self._llm.complete_json(
            EXTRACTOR_SYSTEM_PROMPT, build_extract_prompt(text)
        )

        try:
            data = json.loads(reply)
        except json.JSONDecodeError:
            logger.warning("Extraction reply is not JSON, using text as preferences")
            return TravelInfo(preferences=text)

        if not isinstance(data, dict):
            logger.warning(
                "Extraction reply is not an object, using text as preferences"
            )
            return TravelInfo(preferences=text)

        fields = {}
        for name in TravelInfo.model_fields:
            value = data.get(name) or None
            try:
                fields[name] = getattr(TravelInfo.model_validate({name: value}), name)
            except ValidationError:
                logger.warning(
                    "Dropping invalid extracted field",
                    extra={"field": name, "value": repr(value)},
                )
                fields[name] = None
        return TravelInfo(**fields)

    def _cache_get(self, key: str) -> str | None:
        if self._cache is None:
            return None
        try:
            return self._cache.get(key)
        except CacheServiceError:
            logger.warning("Plan cache unavailable, calling LLM", extra={"key": key})
            return None

    def _cache_set(self, key: str, value: str) -> None:
        if self._cache is None:
            return
        try:
            self._cache.set(key, value)
        except CacheServiceError:
            logger.warning("Plan not cached", extra={"key": key})
