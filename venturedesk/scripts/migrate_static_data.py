"""
Copy the hard-coded jobs, candidates and curated links into the database.

Usage:
    venturedesk-migrate-static-data

Records that already exist are skipped. Exits 1 if any record failed for a
reason other than being a duplicate.
"""
import sys

from venturedesk.core.database import get_db
from venturedesk.core.logsetup import configure_logging
from venturedesk.data import seed
from venturedesk.models.candidate import Candidate
from venturedesk.models.job import Job
from venturedesk.models.news import CuratedLink
from venturedesk.services.migrate import migrate_records


def main() -> None:
    configure_logging()
    print("Starting migration...\n")

    with get_db() as db:
        reports = [
            migrate_records(db, Job, seed.JOBS, lambda r: r.to_row(), label="jobs"),
            migrate_records(db, Candidate, seed.CANDIDATES, lambda r: r.to_row(), label="candidates"),
            migrate_records(db, CuratedLink, seed.CURATED_LINKS, lambda r: r.to_row(), label="curated links"),
        ]

    print("\nMigration complete!")
    print("Summary:")
    for report in reports:
        print(f"  {report.summary()}")

    if any(report.failed for report in reports):
        sys.exit(1)


if __name__ == "__main__":
    main()
