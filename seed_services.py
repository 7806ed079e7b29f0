#!/usr/bin/env python3
"""
Insert service records into the AppyDaveApp SQLite database.

Pending migrations are applied first, so the command also works on a
fresh database file.

Usage:
    python seed_services.py --defaults
    python seed_services.py --db ./appydave.db --name "Search Service" --description "Indexes content"

``--defaults`` inserts the standard seed records and does nothing when
the table already holds records, unless ``--force`` is given.

Exit codes: 0 on success, 1 when the database is unavailable, 2 when
the record fails validation.
"""

import argparse
import sqlite3
import sys
from typing import List, Optional

from appydave_api.app.core.config import get_settings
from appydave_api.app.core.db import Database, init_db
from appydave_api.app.core.errors import StorageUnavailable, ValidationError
from appydave_api.app.services.service_repository import SQLiteServiceRepository, seed_default_services


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Seed AppyDaveApp service records (SQLite).")
    ap.add_argument("--db", help="Path to SQLite DB file. Defaults to DATABASE_URL.")
    group = ap.add_mutually_exclusive_group(required=True)
    group.add_argument("--defaults", action="store_true", help="Insert the default service records")
    group.add_argument("--name", help="Name of a single service to insert")
    ap.add_argument("--description", help="Description of the service given by --name")
    ap.add_argument("--force", action="store_true", help="Insert defaults even if records exist")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    database = Database(args.db or settings.database_url, timeout=settings.database_timeout)
    repository = SQLiteServiceRepository(database)

    try:
        init_db(database)
        if args.defaults:
            created = seed_default_services(repository, force=args.force)
        else:
            created = [repository.create(args.name, args.description or "")]
    except sqlite3.Error as exc:
        print(f"[!] Database unavailable: {exc}", file=sys.stderr)
        return 1
    except StorageUnavailable as exc:
        print(f"[!] {exc.message}", file=sys.stderr)
        return 1
    except ValidationError as exc:
        fields = ", ".join(err["field"] for err in exc.details or [])
        print(f"[!] {exc.message}: {fields}", file=sys.stderr)
        return 2

    for service in created:
        print(f"[+] Created service {service.id}: {service.name}")
    if not created:
        print("[=] Services already present; nothing inserted.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
