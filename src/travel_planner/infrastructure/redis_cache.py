"""Redis-backed plan cache."""

import redis

from travel_planner.exceptions import CacheServiceError
from travel_planner.logging import setup_logging

from .interfaces import CacheService

logger = setup_logging()


class RedisCacheService(CacheService):
    """Stores plans as ``{namespace}:{key}`` strings with an expiry."""

    def __init__(self, client: redis.Redis, ttl_seconds: int, namespace: str = "plan"):
        self._client = client
        self._ttl_seconds = ttl_seconds
        self._namespace = namespace

    def _redis_key(self, key: str) -> str:
        return f"{self._namespace}:{key}"

    def get(self, key: str) -> str | None:
        redis_key = self._redis_key(key)
        try:
            cached = self._client.get(redis_key)
        except redis.RedisError as e:
            logger.exception("Plan cache read failed", extra={"key": redis_key})
            raise CacheServiceError(redis_key, "get", cause=e) from e

        logger.debug(
            "Plan cache lookup",
            extra={"key": redis_key, "hit": cached is not None},
        )
        return cached

    def set(self, key: str, value: str) -> None:
        redis_key = self._redis_key(key)
        try:
            self._client.setex(redis_key, self._ttl_seconds, value)
        except redis.RedisError as e:
            logger.exception("Plan cache write failed", extra={"key": redis_key})
            raise CacheServiceError(redis_key, "set", cause=e) from e
