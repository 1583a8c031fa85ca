"""
Pytest fixtures shared by unit and integration tests.

Every test gets a fresh in-memory SQLite database. StaticPool keeps a single
connection so the schema, the test session and the Flask app all see the
same data.
"""
from collections.abc import Generator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from venturedesk.core.auth import create_api_key
from venturedesk.core.database import Base, SessionLocal, bind_session_factory
from venturedesk.main import app as flask_app
from venturedesk.models import registry  # noqa: F401 - registers every table


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine) -> Generator[Session, None, None]:
    factory = sessionmaker(bind=engine, autoflush=False)
    db = factory()
    yield db
    db.close()


@pytest.fixture
def client(engine):
    """Flask test client whose get_db() sessions use the test engine."""
    bind_session_factory(engine)
    flask_app.config["TESTING"] = True
    try:
        with flask_app.test_client() as c:
            yield c
    finally:
        SessionLocal.configure(bind=None)


@pytest.fixture
def api_key(session) -> str:
    return create_api_key(session, "tests", ["*"]).key


@pytest.fixture
def news_only_key(session) -> str:
    return create_api_key(session, "news editor", ["news:write"]).key
