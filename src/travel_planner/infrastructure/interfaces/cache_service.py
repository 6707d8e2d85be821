"""Interface for the generated-plan cache."""

from abc import ABC, abstractmethod


class CacheService(ABC):
    """Key/value store for serialized itineraries, keyed by request digest."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """
        Returns the cached JSON for ``key``, or None on a miss.

        Raises:
            CacheServiceError: If the backend cannot be reached.
        """

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Stores ``value`` under ``key``; entries expire after the backend TTL."""
