"""
Copy the hard-coded investments and affiliations into the database.

Usage:
    venturedesk-migrate-portfolio
"""
import sys

from venturedesk.core.database import get_db
from venturedesk.core.logsetup import configure_logging
from venturedesk.data import seed
from venturedesk.models.portfolio import Affiliation, Investment
from venturedesk.services.migrate import migrate_records


def main() -> None:
    configure_logging()
    print("🚀 Starting migration...")

    with get_db() as db:
        investments = migrate_records(db, Investment, seed.INVESTMENTS, lambda r: r.to_row(), label="investments")
        affiliations = migrate_records(db, Affiliation, seed.AFFILIATIONS, lambda r: r.to_row(), label="affiliations")

    print("\n📊 Migration complete!")
    print(f"   Investments: {investments.created}/{len(seed.INVESTMENTS)} created, {investments.skipped} already migrated")
    print(f"   Affiliations: {affiliations.created}/{len(seed.AFFILIATIONS)} created, {affiliations.skipped} already migrated")

    if investments.failed or affiliations.failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
