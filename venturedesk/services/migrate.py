"""
Seeding engine: copy static records into their tables.

Inserts are attempted one record at a time. A uniqueness violation means the
record was migrated by an earlier run and is counted as skipped; any other
error is logged with the record key and counted as failed.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional, TypeVar

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from venturedesk.core.database import Base
from venturedesk.data.reference import VocabularyEntry, slug_to_label, to_slug
from venturedesk.models.job import Job, JobRole, JobTag

logger = logging.getLogger(__name__)

T = TypeVar("T")

UNIQUE_VIOLATION = "23505"


class MigrationOutcome(str, enum.Enum):
    created = "created"
    updated = "updated"
    skipped = "skipped"
    failed = "failed"


@dataclass
class MigrationReport:
    label: str
    # One entry per record handled, in order; keys may repeat.
    outcomes: list[tuple[str, MigrationOutcome]] = field(default_factory=list)

    def record(self, key: str, outcome: MigrationOutcome) -> None:
        self.outcomes.append((key, outcome))

    @property
    def by_key(self) -> dict[str, MigrationOutcome]:
        """Last outcome per key, for lookups."""
        return dict(self.outcomes)

    def count(self, outcome: MigrationOutcome) -> int:
        return sum(1 for _, o in self.outcomes if o is outcome)

    @property
    def created(self) -> int:
        return self.count(MigrationOutcome.created)

    @property
    def updated(self) -> int:
        return self.count(MigrationOutcome.updated)

    @property
    def skipped(self) -> int:
        return self.count(MigrationOutcome.skipped)

    @property
    def failed(self) -> int:
        return self.count(MigrationOutcome.failed)

    def summary(self) -> str:
        parts = [f"{self.created} created"]
        if self.updated:
            parts.append(f"{self.updated} updated")
        parts += [f"{self.skipped} skipped", f"{self.failed} failed"]
        return f"{self.label}: " + ", ".join(parts)


def is_unique_violation(exc: IntegrityError) -> bool:
    """True for duplicate primary keys and unique constraint hits, on Postgres or SQLite."""
    orig = getattr(exc, "orig", None)
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate is not None:
        return sqlstate == UNIQUE_VIOLATION
    message = str(orig if orig is not None else exc)
    return "UNIQUE constraint failed" in message or "duplicate key" in message


def _record_key(row: dict[str, Any]) -> str:
    for name in ("id", "slug", "title", "name"):
        if row.get(name):
            return str(row[name])
    return "<unknown>"


def insert_or_skip(session: Session, model: type[Base], row: dict[str, Any]) -> MigrationOutcome:
    """Insert one row; a duplicate key is reported as skipped, other errors propagate."""
    payload = {k: v for k, v in row.items() if not (k == "id" and v is None)}
    try:
        session.execute(insert(model).values(**payload))
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        if is_unique_violation(exc):
            return MigrationOutcome.skipped
        raise
    return MigrationOutcome.created


def migrate_records(
    session: Session,
    model: type[Base],
    records: Iterable[T],
    to_row: Optional[Callable[[T], dict[str, Any]]] = None,
    label: Optional[str] = None,
) -> MigrationReport:
    """Insert every record, continuing past duplicates and failures."""
    report = MigrationReport(label=label or model.__tablename__)
    records = list(records)
    logger.info("Migrating %d %s...", len(records), report.label)

    for record in records:
        row = to_row(record) if to_row else dict(record)
        key = _record_key(row)
        try:
            outcome = insert_or_skip(session, model, row)
        except Exception as exc:
            session.rollback()
            logger.error("  ❌ Failed to migrate %s %s: %s", report.label, key, exc)
            outcome = MigrationOutcome.failed
        else:
            if outcome is MigrationOutcome.created:
                logger.info("  ✅ %s", key)
            else:
                logger.info("  - Skipped (exists): %s", key)
        report.record(key, outcome)

    return report


def seed_lookup(
    session: Session,
    model: type[Base],
    entries: Iterable[VocabularyEntry],
    update_existing: bool = False,
) -> MigrationReport:
    """Seed a slug-keyed vocabulary table.

    With update_existing the label (and color, where the table has one) of an
    existing slug is overwritten; otherwise existing slugs are left alone.
    """
    report = MigrationReport(label=model.__tablename__)
    has_color = "color" in model.__table__.columns

    for entry in entries:
        try:
            existing = session.execute(select(model).where(model.slug == entry.slug)).scalar_one_or_none()
            if existing is None:
                row = {"slug": entry.slug, "label": entry.label}
                if has_color:
                    row["color"] = entry.color
                outcome = insert_or_skip(session, model, row)
            elif update_existing:
                existing.label = entry.label
                if has_color:
                    existing.color = entry.color
                session.commit()
                outcome = MigrationOutcome.updated
            else:
                outcome = MigrationOutcome.skipped
        except Exception as exc:
            session.rollback()
            logger.error("  ✗ %s: %s", entry.slug, exc)
            outcome = MigrationOutcome.failed
        else:
            if outcome is MigrationOutcome.created:
                logger.info("  ✓ %s", entry.slug)
            elif outcome is MigrationOutcome.updated:
                logger.info("  ↻ Updated: %s", entry.slug)
            else:
                logger.info("  - Skipped (exists): %s", entry.slug)
        report.record(entry.slug, outcome)

    return report


def collect_job_vocabulary(session: Session) -> tuple[list[VocabularyEntry], list[VocabularyEntry]]:
    """Roles and tags already used by jobs but absent from the role/tag tables.

    Returns (roles, tags). Departments become roles; unknown tag slugs get a
    title-cased label.
    """
    known_roles = set(session.scalars(select(JobRole.slug)))
    known_tags = set(session.scalars(select(JobTag.slug)))

    roles: dict[str, VocabularyEntry] = {}
    for department in session.scalars(select(Job.department).where(Job.department.is_not(None)).distinct()):
        department = department.strip()
        slug = to_slug(department)
        if slug and slug not in known_roles and slug not in roles:
            roles[slug] = VocabularyEntry(slug, department)

    tags: dict[str, VocabularyEntry] = {}
    for job_tags in session.scalars(select(Job.tags).where(Job.tags.is_not(None))):
        for tag in job_tags or []:
            if tag and tag not in known_tags and tag not in tags:
                tags[tag] = VocabularyEntry(tag, slug_to_label(tag))

    return list(roles.values()), list(tags.values())
