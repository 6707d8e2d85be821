"""Infrastructure layer exports."""

from .deepseek_llm import DeepSeekLLMService
from .iflytek_auth import build_auth_url
from .iflytek_session import StreamingTranscriptionSession
from .moviepy_transcoder import MoviepyTranscoder
from .redis_cache import RedisCacheService

__all__ = [
    "DeepSeekLLMService",
    "MoviepyTranscoder",
    "RedisCacheService",
    "StreamingTranscriptionSession",
    "build_auth_url",
]
