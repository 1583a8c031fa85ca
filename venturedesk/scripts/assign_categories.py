"""
Assign category labels to investments, matched by investment title.

Usage:
    venturedesk-assign-categories
"""
from venturedesk.core.database import get_db
from venturedesk.core.logsetup import configure_logging
from venturedesk.data.reference import INVESTMENT_CATEGORY_ASSIGNMENTS
from venturedesk.models.portfolio import Investment
from venturedesk.services.reconcile import Backfill, backfill


def main() -> None:
    configure_logging()
    print("Assigning categories to investments...\n")

    with get_db() as db:
        request = Backfill(Investment, "categories", INVESTMENT_CATEGORY_ASSIGNMENTS, key_column="title")
        report = backfill(db, request)

    print(f"\nDone! {report.summary()}")


if __name__ == "__main__":
    main()
