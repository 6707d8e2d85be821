import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session as DBSession
from sqlmodel import SQLModel, create_engine

from travel_planner.config import IflytekConfig
from travel_planner.dependencies import get_db_session
from travel_planner.main import app


@pytest.fixture
def iflytek_config() -> IflytekConfig:
    return IflytekConfig(
        app_id="test-app",
        api_key="test-key",
        api_secret="test-secret",
        frame_interval_seconds=0.001,
        timeout_seconds=2.0,
    )


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def db_client(engine, client):
    def override_db_session():
        with DBSession(engine) as session:
            yield session

    app.dependency_overrides[get_db_session] = override_db_session
    return client
