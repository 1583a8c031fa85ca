#!/usr/bin/env python3
"""Seed deterministic rows for end-to-end tests.

Usage:
    venturedesk-seed-test-data            # clean, then seed
    venturedesk-seed-test-data --clean    # delete test rows only (also with --seed)
    venturedesk-seed-test-data --seed     # insert test rows only
"""
from __future__ import annotations

import argparse
import logging
import sys

from venturedesk.core.database import get_db
from venturedesk.core.logsetup import configure_logging
from venturedesk.services.fixtures import clean_test_data, seed_test_data

logger = logging.getLogger(__name__)


def run(clean: bool, seed: bool) -> None:
    with get_db() as db:
        if clean:
            clean_test_data(db)
        if seed:
            for report in seed_test_data(db):
                print(f"  {report.summary()}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Seed or remove end-to-end test rows (ids prefixed 'test-').")
    parser.add_argument("--clean", action="store_true", help="Only delete existing test rows (wins over --seed)")
    parser.add_argument("--seed", action="store_true", help="Only insert test rows")
    args = parser.parse_args(argv)

    configure_logging()
    clean = args.clean or not args.seed
    seed = not args.clean

    try:
        run(clean=clean, seed=seed)
    except Exception:
        logger.exception("❌ Error seeding test data")
        sys.exit(1)

    print("\n✅ Test data seeding complete!")


if __name__ == "__main__":
    main()
