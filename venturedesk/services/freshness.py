"""
News freshness: keep the is_fresh flag of news-like rows in step with their date.

A row is fresh when its date falls strictly after now minus FRESH_WINDOW_DAYS.
Only rows whose flag disagrees with that rule are written, so a second run
with the same clock changes nothing.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from sqlalchemy import update
from sqlalchemy.orm import Session

from venturedesk.models.misc import BlogPost
from venturedesk.models.news import Announcement, CuratedLink

logger = logging.getLogger(__name__)

FRESH_WINDOW_DAYS = 7

NEWS_MODELS = (CuratedLink, Announcement, BlogPost)


def fresh_cutoff(now: datetime) -> datetime:
    return now - timedelta(days=FRESH_WINDOW_DAYS)


def should_be_fresh(date: datetime, now: datetime) -> bool:
    return date > fresh_cutoff(now)


@dataclass
class FreshnessStats:
    table: str
    marked_fresh: int = 0
    marked_stale: int = 0


@dataclass
class FreshnessReport:
    cutoff: datetime
    tables: list[FreshnessStats] = field(default_factory=list)

    @property
    def changed(self) -> int:
        return sum(s.marked_fresh + s.marked_stale for s in self.tables)

    def summary(self) -> str:
        parts = [f"{s.table}: +{s.marked_fresh} fresh, -{s.marked_stale} stale" for s in self.tables]
        return "; ".join(parts)

    def as_dict(self) -> dict[str, Any]:
        return {
            "cutoff": self.cutoff.isoformat(),
            "tables": {
                s.table: {"marked_fresh": s.marked_fresh, "marked_stale": s.marked_stale}
                for s in self.tables
            },
        }


def reconcile_news_freshness(session: Session, now: Optional[datetime] = None) -> FreshnessReport:
    """Flip is_fresh on every news table where it disagrees with the date window."""
    now = now or datetime.now(timezone.utc)
    cutoff = fresh_cutoff(now)
    report = FreshnessReport(cutoff=cutoff)

    for model in NEWS_MODELS:
        stats = FreshnessStats(table=model.__tablename__)
        try:
            stats.marked_fresh = session.execute(
                update(model)
                .where(model.date > cutoff, model.is_fresh.is_(False))
                .values(is_fresh=True, updated_at=now)
                .execution_options(synchronize_session=False)
            ).rowcount
            stats.marked_stale = session.execute(
                update(model)
                .where(model.date <= cutoff, model.is_fresh.is_(True))
                .values(is_fresh=False, updated_at=now)
                .execution_options(synchronize_session=False)
            ).rowcount
            session.commit()
        except Exception:
            session.rollback()
            logger.error("  ❌ Failed to reconcile freshness for %s", stats.table)
            raise
        logger.info("  ✅ %s: %d marked fresh, %d marked stale", stats.table, stats.marked_fresh, stats.marked_stale)
        report.tables.append(stats)

    return report
