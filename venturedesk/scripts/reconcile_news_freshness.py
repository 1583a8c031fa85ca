"""
Recompute the is_fresh flag of curated links, announcements and blog posts.

Usage:
    venturedesk-reconcile-news-freshness

Meant to run on a schedule. Prints a JSON summary; exits 1 if the database
update failed.
"""
import json
import logging
import sys

from venturedesk.core.database import get_db
from venturedesk.core.logsetup import configure_logging
from venturedesk.services.freshness import reconcile_news_freshness

logger = logging.getLogger(__name__)


def main() -> None:
    configure_logging()

    try:
        with get_db() as db:
            report = reconcile_news_freshness(db)
    except Exception as exc:
        logger.exception("News freshness reconciliation failed")
        print(json.dumps({"ok": False, "error": str(exc)}))
        sys.exit(1)

    print(json.dumps({"ok": True, **report.as_dict()}))


if __name__ == "__main__":
    main()
