"""FastAPI dependency injection configuration."""

from functools import lru_cache
from typing import Annotated, Generator

import redis
from fastapi import Depends
from openai import OpenAI
from sqlalchemy.engine import Engine
from sqlmodel import Session as DBSession
from sqlmodel import SQLModel, create_engine

from travel_planner.config import AppConfig, load_config
from travel_planner.domain import TravelPlanner
from travel_planner.handlers import VoiceTranscriptionHandler
from travel_planner.infrastructure import (
    DeepSeekLLMService,
    MoviepyTranscoder,
    RedisCacheService,
)
from travel_planner.infrastructure.interfaces import CacheService
from travel_planner.logging import setup_logging
from travel_planner.repositories import ExpenseRepository, ItineraryRepository

logger = setup_logging()


@lru_cache
def get_config() -> AppConfig:
    """Returns the process-wide configuration."""
    return load_config()


@lru_cache
def get_engine() -> Engine:
    """Creates the database engine and the tables on first use."""
    config = get_config().postgres
    engine = create_engine(config.url, pool_pre_ping=True)
    SQLModel.metadata.create_all(engine)
    logger.info("Database initialized", extra={"host": config.host})
    return engine


def get_db_session() -> Generator[DBSession, None, None]:
    """Yields a request-scoped database session."""
    with DBSession(get_engine()) as session:
        yield session


DBSessionDep = Annotated[DBSession, Depends(get_db_session)]


def get_itinerary_repository(db_session: DBSessionDep) -> ItineraryRepository:
    return ItineraryRepository(db_session)


def get_expense_repository(db_session: DBSessionDep) -> ExpenseRepository:
    return ExpenseRepository(db_session)


@lru_cache
def get_cache() -> CacheService | None:
    """Returns the Redis plan cache, or None when caching is disabled."""
    config = get_config().redis
    if not config.enabled:
        logger.info("Plan cache disabled")
        return None
    client = redis.Redis(host=config.host, port=config.port, decode_responses=True)
    return RedisCacheService(client, config.cache_ttl_seconds)


@lru_cache
def get_planner() -> TravelPlanner:
    """Returns the configured travel planner."""
    config = get_config().llm
    client = OpenAI(api_key=config.api_key, base_url=config.base_url)
    return TravelPlanner(DeepSeekLLMService(client, config.model_name), get_cache())


@lru_cache
def get_voice_handler() -> VoiceTranscriptionHandler:
    """Returns the configured voice transcription handler."""
    config = get_config()
    return VoiceTranscriptionHandler(
        config.iflytek,
        MoviepyTranscoder(),
        config.server.temp_dir,
    )
