"""
Backfill job descriptions collected from company career pages.

Usage:
    venturedesk-backfill-descriptions

Keys missing from the jobs table are reported and skipped; the script exits 0
either way.
"""
from venturedesk.core.database import get_db
from venturedesk.core.logsetup import configure_logging
from venturedesk.data.descriptions import JOB_DESCRIPTIONS
from venturedesk.models.job import Job
from venturedesk.services.reconcile import Backfill, backfill


def main() -> None:
    configure_logging()
    print("Starting job description backfill...\n")

    with get_db() as db:
        report = backfill(db, Backfill(Job, "description", JOB_DESCRIPTIONS))

    print(f"\nDone! {report.summary()}")


if __name__ == "__main__":
    main()
