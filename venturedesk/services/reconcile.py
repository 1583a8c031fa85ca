"""
Backfill engine: apply a desired-state map onto one column of existing rows.

Each key is handled on its own. A missing key is reported as not found, a
failing key is rolled back and logged, and neither stops the batch.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from sqlalchemy import inspect
from sqlalchemy.orm import Session

from venturedesk.core.database import Base

logger = logging.getLogger(__name__)


class BackfillOutcome(str, enum.Enum):
    updated = "updated"
    unchanged = "unchanged"
    not_found = "not_found"
    failed = "failed"


@dataclass(frozen=True)
class Backfill:
    """A typed backfill request: which table, which column, which values."""

    model: type[Base]
    field: str
    values: Mapping[str, Any]
    key_column: str = "id"

    def __post_init__(self) -> None:
        columns = inspect(self.model).columns
        for name in (self.field, self.key_column):
            if name not in columns:
                raise ValueError(f"{self.model.__tablename__} has no column {name!r}")


@dataclass
class BackfillReport:
    table: str
    field: str
    outcomes: dict[str, BackfillOutcome] = field(default_factory=dict)

    def count(self, outcome: BackfillOutcome) -> int:
        return sum(1 for o in self.outcomes.values() if o is outcome)

    @property
    def updated(self) -> int:
        return self.count(BackfillOutcome.updated)

    @property
    def unchanged(self) -> int:
        return self.count(BackfillOutcome.unchanged)

    @property
    def not_found(self) -> int:
        return self.count(BackfillOutcome.not_found)

    @property
    def failed(self) -> int:
        return self.count(BackfillOutcome.failed)

    def summary(self) -> str:
        return (
            f"{self.table}.{self.field}: {self.updated} updated, {self.unchanged} unchanged, "
            f"{self.not_found} not found, {self.failed} failed"
        )


def _apply_one(session: Session, request: Backfill, key: str, value: Any) -> BackfillOutcome:
    key_attr = getattr(request.model, request.key_column)
    rows = session.query(request.model).filter(key_attr == key).all()
    if not rows:
        return BackfillOutcome.not_found

    stale = [row for row in rows if getattr(row, request.field) != value]
    if not stale:
        return BackfillOutcome.unchanged

    for row in stale:
        setattr(row, request.field, value)
    session.commit()
    return BackfillOutcome.updated


def backfill(session: Session, request: Backfill) -> BackfillReport:
    """Write request.values into request.field, one key at a time."""
    table = request.model.__tablename__
    report = BackfillReport(table=table, field=request.field)

    for key, value in request.values.items():
        try:
            outcome = _apply_one(session, request, key, value)
        except Exception as exc:
            session.rollback()
            logger.error("✗ Error updating %s %s: %s", table, key, exc)
            outcome = BackfillOutcome.failed
        else:
            if outcome is BackfillOutcome.updated:
                logger.info("✓ Updated: %s", key)
            elif outcome is BackfillOutcome.unchanged:
                logger.info("- Already matches: %s", key)
            else:
                logger.warning("✗ Not found: %s", key)
        report.outcomes[key] = outcome

    return report
