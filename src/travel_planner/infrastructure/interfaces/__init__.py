"""Infrastructure interface exports."""

from .audio_transcoder import AudioTranscoder
from .cache_service import CacheService
from .llm_service import LLMService

__all__ = ["AudioTranscoder", "CacheService", "LLMService"]
