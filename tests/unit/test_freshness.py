"""Unit tests for the news freshness reconciliation (SQLite)."""
from datetime import datetime, timedelta

import pytest

from venturedesk.models.misc import BlogPost
from venturedesk.models.news import Announcement, CuratedLink
from venturedesk.services.freshness import fresh_cutoff, reconcile_news_freshness, should_be_fresh

# SQLite hands back naive datetimes, so the clock is naive too
NOW = datetime(2025, 3, 10, 12, 0, 0)
CUTOFF = NOW - timedelta(days=7)


def _link(link_id, date, is_fresh=False):
    return CuratedLink(id=link_id, title=link_id, url="https://e.com", source="S", date=date,
                       category="research", is_fresh=is_fresh)


def _stats(report, table):
    return next(s for s in report.tables if s.table == table)


class TestWindow:
    def test_cutoff_is_seven_days_back(self):
        assert fresh_cutoff(NOW) == CUTOFF

    def test_cutoff_itself_is_stale(self):
        assert not should_be_fresh(CUTOFF, NOW)
        assert should_be_fresh(CUTOFF + timedelta(seconds=1), NOW)


class TestReconcile:
    def test_boundary_rows(self, session):
        session.add_all([
            _link("at-cutoff", CUTOFF, is_fresh=True),
            _link("just-after", CUTOFF + timedelta(seconds=1)),
        ])
        session.commit()

        report = reconcile_news_freshness(session, NOW)

        session.expire_all()
        assert session.get(CuratedLink, "at-cutoff").is_fresh is False
        assert session.get(CuratedLink, "just-after").is_fresh is True
        stats = _stats(report, "curated_links")
        assert (stats.marked_fresh, stats.marked_stale) == (1, 1)

    def test_only_rows_needing_a_change_are_counted(self, session):
        session.add_all([
            _link("new-already-fresh", NOW - timedelta(days=1), is_fresh=True),
            _link("old-already-stale", NOW - timedelta(days=30)),
            _link("new-not-flagged", NOW - timedelta(days=2)),
        ])
        session.commit()

        report = reconcile_news_freshness(session, NOW)

        stats = _stats(report, "curated_links")
        assert (stats.marked_fresh, stats.marked_stale) == (1, 0)
        assert report.changed == 1

    def test_changed_rows_get_updated_at_now(self, session):
        session.add(_link("recent", NOW - timedelta(hours=1)))
        session.commit()

        reconcile_news_freshness(session, NOW)

        session.expire_all()
        assert session.get(CuratedLink, "recent").updated_at == NOW

    def test_second_run_changes_nothing(self, session):
        session.add_all([_link("recent", NOW - timedelta(days=1)), _link("old", NOW - timedelta(days=9), True)])
        session.commit()

        reconcile_news_freshness(session, NOW)
        second = reconcile_news_freshness(session, NOW)

        assert second.changed == 0

    def test_rows_go_stale_as_the_clock_moves(self, session):
        session.add(_link("recent", NOW - timedelta(days=6)))
        session.commit()
        reconcile_news_freshness(session, NOW)

        report = reconcile_news_freshness(session, NOW + timedelta(days=1))

        session.expire_all()
        assert session.get(CuratedLink, "recent").is_fresh is False
        assert _stats(report, "curated_links").marked_stale == 1

    def test_every_news_table_is_reconciled(self, session):
        recent = NOW - timedelta(days=1)
        session.add_all([
            _link("l1", recent),
            Announcement(id="a1", title="Mainnet", url="https://e.com", company="Monad", platform="x",
                         date=recent, category="launch"),
            BlogPost(slug="hello", title="Hello", content="# Hello", date=recent),
        ])
        session.commit()

        report = reconcile_news_freshness(session, NOW)

        assert [s.table for s in report.tables] == ["curated_links", "announcements", "blog_posts"]
        assert all(s.marked_fresh == 1 for s in report.tables)
        session.expire_all()
        assert session.get(BlogPost, "hello").is_fresh is True

    def test_as_dict(self, session):
        report = reconcile_news_freshness(session, NOW)

        data = report.as_dict()
        assert data["cutoff"] == CUTOFF.isoformat()
        assert data["tables"]["announcements"] == {"marked_fresh": 0, "marked_stale": 0}

    def test_new_rows_default_to_not_fresh(self, session):
        session.add(_link("fresh-off-the-press", NOW))
        session.commit()
        session.expire_all()
        assert session.get(CuratedLink, "fresh-off-the-press").is_fresh is False


@pytest.mark.parametrize("days, fresh", [(0, True), (6, True), (7, False), (30, False)])
def test_should_be_fresh_by_age(days, fresh):
    assert should_be_fresh(NOW - timedelta(days=days), NOW) is fresh
