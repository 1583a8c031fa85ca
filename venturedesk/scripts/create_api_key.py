#!/usr/bin/env python3
"""Create an API key for the admin API and print it once."""
from __future__ import annotations

import argparse

from venturedesk.core.auth import create_api_key
from venturedesk.core.config import settings
from venturedesk.core.database import get_db


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Create an admin API key.")
    parser.add_argument("name", nargs="?", default="Admin", help="Label for the key")
    parser.add_argument(
        "permissions",
        nargs="?",
        default="*",
        help="Comma-separated permissions, e.g. jobs:write,news:write (default: *)",
    )
    args = parser.parse_args(argv)
    permissions = [p.strip() for p in args.permissions.split(",") if p.strip()]

    with get_db() as db:
        api_key = create_api_key(db, args.name, permissions)
        key, name, granted = api_key.key, api_key.name, api_key.permissions

    print("\n✅ API Key created successfully!\n")
    print("Name:", name)
    print("Permissions:", ", ".join(granted or []))
    print("\n🔑 API Key (save this, it won't be shown again):\n")
    print(key)
    print("\nUsage:")
    print(f'  curl -H "{settings.API_KEY_HEADER}: {key}" http://localhost:{settings.API_PORT}/api/v1/jobs')


if __name__ == "__main__":
    main()
