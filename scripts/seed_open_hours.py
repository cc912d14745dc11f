#!/usr/bin/env python3
"""Seed the default weekly opening hours.

Idempotent: goes through the same upsert-by-day as POST /api/open-hours, so
re-running only rewrites the seeded days.

Usage:
    python -m scripts.seed_open_hours
    python -m scripts.seed_open_hours --create-tables
"""

import argparse
import asyncio
import os
import sys

# Add parent to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

from site_api.settings import Settings
from site_api.stores import RecordStore

load_dotenv()

# Day -> (open, close). Times are free-form, as the API accepts them.
DEFAULT_HOURS = {
    "Monday": ("09:00", "18:00"),
    "Tuesday": ("09:00", "18:00"),
    "Wednesday": ("09:00", "18:00"),
    "Thursday": ("09:00", "20:00"),
    "Friday": ("09:00", "20:00"),
    "Saturday": ("10:00", "16:00"),
    "Sunday": ("Closed", "Closed"),
}


async def seed_open_hours(create_tables: bool = False) -> None:
    settings = Settings()
    store = RecordStore(settings.async_database_url)
    await store.open()
    try:
        if create_tables:
            await store.create_tables()

        print("Seeding open hours...")
        for day, (open_at, close_at) in DEFAULT_HOURS.items():
            hour = await store.open_hours.upsert_by_key("day", day, {"open": open_at, "close": close_at})
            print(f"  {hour.day}: {hour.open} - {hour.close}")
        print("Done.")
    finally:
        await store.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--create-tables", action="store_true", help="create missing tables first")
    args = parser.parse_args()
    asyncio.run(seed_open_hours(create_tables=args.create_tables))
