"""Unit tests for the seeding engine (SQLite)."""
import logging

import pytest
from sqlalchemy.exc import IntegrityError

from venturedesk.data import seed
from venturedesk.data.reference import JOB_ROLES, JOB_TAGS, VocabularyEntry
from venturedesk.models.candidate import Candidate
from venturedesk.models.job import Job, JobRole, JobTag
from venturedesk.models.portfolio import Affiliation, Investment
from venturedesk.services.migrate import (
    MigrationOutcome,
    collect_job_vocabulary,
    insert_or_skip,
    is_unique_violation,
    migrate_records,
    seed_lookup,
)


class _Orig(Exception):
    def __init__(self, message, sqlstate=None):
        super().__init__(message)
        self.sqlstate = sqlstate


def _integrity_error(orig):
    return IntegrityError("INSERT INTO jobs ...", {}, orig)


class TestIsUniqueViolation:
    def test_postgres_sqlstate(self):
        assert is_unique_violation(_integrity_error(_Orig("dup", sqlstate="23505")))

    def test_other_postgres_constraint(self):
        assert not is_unique_violation(_integrity_error(_Orig("null value", sqlstate="23502")))

    def test_sqlite_message(self):
        assert is_unique_violation(_integrity_error(Exception("UNIQUE constraint failed: jobs.id")))

    def test_sqlite_not_null_message(self):
        assert not is_unique_violation(_integrity_error(Exception("NOT NULL constraint failed: jobs.link")))


class TestInsertOrSkip:
    def test_duplicate_is_skipped(self, session):
        row = {"id": "a", "title": "T", "company": "C", "link": "https://x", "category": "network"}
        assert insert_or_skip(session, Job, row) is MigrationOutcome.created
        assert insert_or_skip(session, Job, row) is MigrationOutcome.skipped
        assert session.query(Job).count() == 1

    def test_non_duplicate_error_propagates(self, session):
        with pytest.raises(IntegrityError):
            insert_or_skip(session, Job, {"id": "a", "title": "T", "company": "C", "category": "network"})

    def test_missing_id_is_generated(self, session):
        row = {"id": None, "title": "T", "company": "C", "link": "https://x", "category": "network"}
        insert_or_skip(session, Job, row)
        job = session.query(Job).one()
        assert job.id and len(job.id) == 32


class TestMigrateRecords:
    def test_second_run_skips_everything(self, session):
        first = migrate_records(session, Job, seed.JOBS, lambda r: r.to_row(), label="jobs")
        second = migrate_records(session, Job, seed.JOBS, lambda r: r.to_row(), label="jobs")

        assert first.created == len(seed.JOBS)
        assert second.created == 0
        assert second.skipped == len(seed.JOBS)
        assert session.query(Job).count() == len(seed.JOBS)

    def test_portfolio_reruns_are_duplicate_free(self, session):
        for _ in range(2):
            migrate_records(session, Investment, seed.INVESTMENTS, lambda r: r.to_row())
            migrate_records(session, Affiliation, seed.AFFILIATIONS, lambda r: r.to_row())

        assert session.query(Investment).count() == len(seed.INVESTMENTS)
        assert session.query(Affiliation).count() == len(seed.AFFILIATIONS)
        assert session.get(Investment, "prime-intellect").tier == "1"

    def test_failure_is_isolated(self, session):
        records = [
            {"id": "ok-1", "title": "A", "company": "C", "link": "https://a", "category": "portfolio"},
            {"id": "broken", "title": "B", "company": "C", "category": "portfolio"},
            {"id": "ok-2", "title": "C", "company": "C", "link": "https://c", "category": "network"},
        ]

        report = migrate_records(session, Job, records, label="jobs")

        assert report.created == 2
        assert report.failed == 1
        assert report.by_key["broken"] is MigrationOutcome.failed
        assert {j.id for j in session.query(Job)} == {"ok-1", "ok-2"}

    def test_anonymous_candidate_stores_alias_only(self, session):
        migrate_records(session, Candidate, seed.CANDIDATES, lambda r: r.to_row())

        anon = session.get(Candidate, "candidate-anon-zk")
        assert anon.name == "ZK Researcher"
        assert session.query(Candidate).filter(Candidate.name == "Hidden Name").count() == 0

    def test_not_looking_candidate_is_unavailable(self, session):
        migrate_records(session, Candidate, seed.CANDIDATES, lambda r: r.to_row())

        candidate = session.get(Candidate, "candidate-fullstack")
        assert candidate.availability == "not-looking"
        assert candidate.available is False

    def test_failure_counted_when_records_share_a_key(self, session):
        records = [
            {"title": "Engineer", "company": "C", "category": "portfolio"},
            {"title": "Engineer", "company": "C", "link": "https://c", "category": "portfolio"},
        ]

        report = migrate_records(session, Job, records, label="jobs")

        assert report.failed == 1
        assert report.created == 1
        assert report.summary() == "jobs: 1 created, 0 skipped, 1 failed"

    def test_repeated_record_counts_create_and_skip(self, session):
        row = {"id": "x", "title": "T", "company": "C", "link": "https://x", "category": "network"}

        report = migrate_records(session, Job, [row, row], label="jobs")

        assert (report.created, report.skipped) == (1, 1)
        assert report.outcomes == [("x", MigrationOutcome.created), ("x", MigrationOutcome.skipped)]
        assert report.by_key == {"x": MigrationOutcome.skipped}

    def test_summary_mentions_counts(self, session):
        report = migrate_records(session, Job, seed.JOBS[:1], lambda r: r.to_row(), label="jobs")
        assert report.summary() == "jobs: 1 created, 0 skipped, 0 failed"


class TestSeedLookup:
    def test_insert_then_skip(self, session):
        first = seed_lookup(session, JobRole, JOB_ROLES)
        second = seed_lookup(session, JobRole, JOB_ROLES)

        assert first.created == len(JOB_ROLES)
        assert second.skipped == len(JOB_ROLES)

    def test_log_line_matches_outcome(self, session, caplog):
        roles = [VocabularyEntry("design", "Design")]
        seed_lookup(session, JobRole, roles)
        caplog.clear()

        with caplog.at_level(logging.INFO, logger="venturedesk.services.migrate"):
            seed_lookup(session, JobRole, roles)
            seed_lookup(session, JobRole, roles, update_existing=True)

        messages = [r.getMessage().strip() for r in caplog.records if r.name == "venturedesk.services.migrate"]
        assert messages == ["- Skipped (exists): design", "↻ Updated: design"]

    def test_update_existing_refreshes_label_and_color(self, session):
        session.add(JobTag(slug="ai", label="Artificial Intelligence", color="gray"))
        session.commit()

        report = seed_lookup(session, JobTag, JOB_TAGS, update_existing=True)

        tag = session.query(JobTag).filter(JobTag.slug == "ai").one()
        assert report.by_key["ai"] is MigrationOutcome.updated
        assert (tag.label, tag.color) == ("AI", "purple")
        assert report.created == len(JOB_TAGS) - 1

    def test_roles_table_has_no_color(self, session):
        seed_lookup(session, JobRole, [VocabularyEntry("design", "Design", "rose")])
        assert session.query(JobRole).one().label == "Design"


class TestCollectJobVocabulary:
    def test_finds_unknown_departments_and_tags(self, session):
        migrate_records(session, Job, seed.JOBS, lambda r: r.to_row())
        session.add(JobTag(slug="ai", label="AI"))
        session.add(JobRole(slug="research", label="Research"))
        session.commit()

        roles, tags = collect_job_vocabulary(session)

        role_slugs = {r.slug for r in roles}
        tag_slugs = {t.slug for t in tags}
        assert "design" in role_slugs
        assert "research" not in role_slugs
        assert "mev" in tag_slugs
        assert "ai" not in tag_slugs
        assert next(t for t in tags if t.slug == "mev").label == "Mev"
