"""Domain layer exports."""

from .models import (
    FrameStatus,
    RecognitionFragment,
    TravelInfo,
    TravelPlan,
    TravelRequest,
)
from .transcript_accumulator import TranscriptAccumulator
from .travel_planner import TravelPlanner

__all__ = [
    "FrameStatus",
    "RecognitionFragment",
    "TranscriptAccumulator",
    "TravelInfo",
    "TravelPlan",
    "TravelPlanner",
    "TravelRequest",
]
