"""Pytest fixtures for speechbase tests."""

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from speechbase.app.dependencies import get_db
from speechbase.app.main import create_app
from speechbase.database import SpeechStore
from speechbase.database.models import SpeechKeywordModel, SpeechModel  # noqa: F401
from speechbase.database.session import register_unicode_lower
from speechbase.domain.models import Speech
from speechbase.domain_service import SpeechService


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    register_unicode_lower(engine)
    SQLModel.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    """Create a database session for testing."""
    with Session(engine) as session:
        yield session


@pytest.fixture
def store(session: Session) -> SpeechStore:
    """Create a SpeechStore instance."""
    return SpeechStore(session)


@pytest.fixture
def service(store: SpeechStore) -> SpeechService:
    """Create a SpeechService instance."""
    return SpeechService(store)


@pytest.fixture
def sample_speeches(store: SpeechStore) -> dict[str, Speech]:
    """Three speeches shared by search tests: R1, R2, R3."""
    r1 = store.save(
        Speech(
            text="This is a test speech about technology",
            author="John Doe",
            author_email="john@example.com",
            keywords={"tech", "innovation"},
            speech_date=date(2024, 1, 15),
        )
    )
    r2 = store.save(
        Speech(
            text="Another speech about climate change",
            author="Jane Smith",
            author_email="jane@example.com",
            keywords={"climate"},
            speech_date=date(2024, 2, 20),
        )
    )
    r3 = store.save(
        Speech(
            text="Speech about technology and innovation",
            author="John Miller",
            author_email="miller@example.com",
            keywords={"tech", "future"},
            speech_date=date(2024, 3, 10),
        )
    )
    return {"R1": r1, "R2": r2, "R3": r3}


@pytest.fixture
def client(session: Session):
    """Create test client with the database session overridden."""
    app = create_app()

    def get_db_override():
        yield session

    app.dependency_overrides[get_db] = get_db_override
    yield TestClient(app)
    app.dependency_overrides.clear()
