from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from venturedesk.core.config import settings


class Base(DeclarativeBase):
    pass


@lru_cache
def get_engine() -> Engine:
    """Build the process-wide engine on first use."""
    return create_engine(settings.require("DATABASE_URL"), pool_pre_ping=True)


SessionLocal = sessionmaker(autoflush=False)


def bind_session_factory(engine: Engine) -> None:
    """Point SessionLocal at a specific engine (tests, alternate databases)."""
    SessionLocal.configure(bind=engine)


@contextmanager
def get_db() -> Generator[Session, None, None]:
    """Context manager for database session."""
    if SessionLocal.kw.get("bind") is None:
        bind_session_factory(get_engine())
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
