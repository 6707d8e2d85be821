"""Prompt templates for itinerary generation and travel-info extraction."""

from .models import TravelRequest

PLANNER_SYSTEM_PROMPT = "You are a helpful travel planner."
EXTRACTOR_SYSTEM_PROMPT = "You are a helpful entity extraction assistant."

_PLAN_TEMPLATE = """\
Act as a professional travel planner. Create a detailed travel plan for the
following request.

Request:
- Destination: {destination}
- Days: {days}
- Budget (CNY): {budget}
- Companions: {companions}
- Preferences: {preferences}

Write all text values in Simplified Chinese. Give real coordinates for every
location. Return only a JSON object with exactly this structure and no text
outside it:
{{
  "title": "<days>-day trip to <destination>",
  "budget_analysis": {{
    "total_estimate": "about XXXX CNY",
    "breakdown": [
      {{"category": "Flights/transport", "cost": "XXXX CNY", "notes": "..."}},
      {{"category": "Accommodation", "cost": "XXXX CNY", "notes": "..."}},
      {{"category": "Food", "cost": "XXXX CNY", "notes": "..."}},
      {{"category": "Tickets", "cost": "XXXX CNY", "notes": "..."}},
      {{"category": "Other", "cost": "XXXX CNY", "notes": "..."}}
    ]
  }},
  "daily_plan": [
    {{
      "day": 1,
      "theme": "Arrival and first look at the city",
      "activities": [
        {{"time": "Afternoon", "activity": "Arrive at <airport/station>", "description": "...", "location": {{"name": "...", "lat": 0.0, "lng": 0.0}}}},
        {{"time": "Evening", "activity": "Hotel check-in", "description": "...", "location": {{"name": "...", "lat": 0.0, "lng": 0.0}}}}
      ]
    }}
  ]
}}
One entry in "daily_plan" per day.
"""

_EXTRACT_TEMPLATE = """\
You are an information extraction assistant. The text below is a raw voice
transcript and may contain pauses, repetitions, slips and filler words.

Step 1: work out what the user actually wants.
Raw text: "{text}"

Step 2: return the key travel information as JSON.
* All keys must be present.
* Use null for anything not mentioned.
* Normalize units ("a week" -> 7, "20k" -> 20000, "five days" -> 5).

{{
  "destination": string or null,
  "days": number or null,
  "budget": number or null,
  "companions": string or null,
  "preferences": string or null
}}

Example:
Raw text: "um... I want to go to... Chengdu... yeah Chengdu... five days... hotpot... see the pandas"
JSON:
{{"destination": "Chengdu", "days": 5, "budget": null, "companions": null, "preferences": "eat hotpot, see the pandas"}}

Keep the values in the language of the raw text. Return only the final JSON
object, without explanations, markdown or your analysis.
"""


def _or_unspecified(value: object) -> str:
    return "not specified" if value in (None, "") else str(value)


def build_plan_prompt(request: TravelRequest) -> str:
    return _PLAN_TEMPLATE.format(
        destination=request.destination,
        days=request.days,
        budget=_or_unspecified(request.budget),
        companions=_or_unspecified(request.companions),
        preferences=_or_unspecified(request.preferences),
    )


def build_extract_prompt(text: str) -> str:
    return _EXTRACT_TEMPLATE.format(text=text)
