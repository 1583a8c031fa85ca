from __future__ import annotations

import logging

from sqlalchemy import delete, func
from sqlalchemy.orm import Session

from venturedesk.data import fixtures
from venturedesk.models.candidate import Candidate
from venturedesk.models.job import Job, JobRole, JobTag
from venturedesk.models.news import CuratedLink
from venturedesk.models.portfolio import Investment, InvestmentCategory
from venturedesk.services.migrate import MigrationReport, migrate_records

logger = logging.getLogger(__name__)

# Insertion order; cleanup walks it backwards.
FIXTURE_TABLES = (
    (JobTag, fixtures.TEST_JOB_TAGS),
    (JobRole, fixtures.TEST_JOB_ROLES),
    (Job, fixtures.TEST_JOBS),
    (Candidate, fixtures.TEST_CANDIDATES),
    (CuratedLink, fixtures.TEST_CURATED_LINKS),
    (InvestmentCategory, fixtures.TEST_INVESTMENT_CATEGORIES),
    (Investment, fixtures.TEST_INVESTMENTS),
)


def clean_test_data(session: Session, prefix: str = fixtures.TEST_PREFIX) -> dict[str, int]:
    """Delete rows whose id starts with prefix, and only those."""
    logger.info("Cleaning existing test data...")
    deleted: dict[str, int] = {}
    for model, _ in reversed(FIXTURE_TABLES):
        # substr keeps the match exact; LIKE is case-insensitive on SQLite
        result = session.execute(
            delete(model)
            .where(func.substr(model.id, 1, len(prefix)) == prefix)
            .execution_options(synchronize_session=False)
        )
        deleted[model.__tablename__] = result.rowcount
    session.commit()
    logger.info("  ✓ Cleaned test data (%d rows)", sum(deleted.values()))
    return deleted


def seed_test_data(session: Session) -> list[MigrationReport]:
    """Insert every fixture row, leaving rows that already exist untouched."""
    logger.info("Seeding test data...")
    return [
        migrate_records(session, model, rows, label=model.__tablename__)
        for model, rows in FIXTURE_TABLES
    ]
