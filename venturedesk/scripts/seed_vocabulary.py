"""
Seed the job tag, job role and investment category tables.

Usage:
    venturedesk-seed-vocabulary

Tags and roles are upserted (labels refreshed); investment categories are
insert-only. Departments and tags already used by jobs but missing from the
tables are added afterwards.
"""
import sys

from venturedesk.core.database import get_db
from venturedesk.core.logsetup import configure_logging
from venturedesk.data.reference import JOB_ROLES, JOB_TAGS, investment_category_entries
from venturedesk.models.job import JobRole, JobTag
from venturedesk.models.portfolio import InvestmentCategory
from venturedesk.services.migrate import collect_job_vocabulary, seed_lookup


def main() -> None:
    configure_logging()

    with get_db() as db:
        print("Seeding job_tags...")
        reports = [seed_lookup(db, JobTag, JOB_TAGS, update_existing=True)]
        print("Seeding job_roles...")
        reports.append(seed_lookup(db, JobRole, JOB_ROLES, update_existing=True))
        print("Seeding investment_categories...")
        reports.append(seed_lookup(db, InvestmentCategory, investment_category_entries()))

        print("\nExtracting existing departments and tags from jobs...")
        roles, tags = collect_job_vocabulary(db)
        reports.append(seed_lookup(db, JobRole, roles))
        reports.append(seed_lookup(db, JobTag, tags))

    print("\n✅ Seeding complete!")
    for report in reports:
        print(f"  {report.summary()}")

    if any(report.failed for report in reports):
        sys.exit(1)


if __name__ == "__main__":
    main()
