# tests/conftest.py

import os

# Settings are read at import time, so the environment has to be in place
# before anything from pawsroam is imported.
os.environ["ENV"] = "local"
os.environ["DATABASE_URL_LOCAL"] = "sqlite://"
os.environ["DATABASE_URL_PROD"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-jwt-secret"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import pawsroam.models  # noqa: F401  (registers every table on Base.metadata)
from pawsroam.db.base_class import Base
from pawsroam.db.session import get_db
from pawsroam.main import app
from pawsroam.services.rating_aggregator import RatingAggregator, get_rating_aggregator


# --- Test Database Setup ---
# A fresh in-memory database per test. StaticPool keeps a single connection so
# every session (request, background task, test body) sees the same data.
@pytest.fixture(scope="function")
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture(scope="function")
def aggregator(session_factory):
    return RatingAggregator(session_factory)


# --- Test Client Fixtures ---
@pytest.fixture(scope="function")
def client(db_session, aggregator):
    """
    TestClient wired to the per-test database. Background tasks (rating
    recomputes) have finished by the time a request returns.
    """

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_rating_aggregator] = lambda: aggregator

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
