#!/usr/bin/env python3
"""
Standalone database initialization script
Creates the foods / categories / meals tables and seeds default categories
"""

import argparse
import logging
import os
import sys

# Ensure we're using the right Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from app.config import settings
from domain.models import Database
from services.category_service import CategoryService

logger = logging.getLogger("mealtrack.scripts.init_db")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Initialize the MealTrack database")
    parser.add_argument(
        "--database-url", default=settings.database_url, help="SQLAlchemy URL"
    )
    parser.add_argument(
        "--drop", action="store_true", help="Drop existing tables first (destroys data)"
    )
    parser.add_argument(
        "--no-seed", action="store_true", help="Skip default category seeding"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level.upper(), format=settings.log_format)

    database = Database(args.database_url, echo=settings.db_echo)
    try:
        if args.drop:
            database.drop_schema()
        database.init_schema()
        if not args.no_seed:
            with database.session() as db:
                categories = CategoryService.ensure_defaults(db, settings.default_categories)
            print(f"  • Categories: {', '.join(c.name for c in categories)}")
        return 0
    except Exception:
        logger.exception("Database initialization failed")
        return 1
    finally:
        database.dispose()


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("MealTrack Database Initialization")
    print("=" * 60 + "\n")

    exit_code = main()

    if exit_code == 0:
        print("\nSUCCESS! Tables foods, categories and meals are ready.\n")
    else:
        print("\nFAILED! Check the errors above.\n")

    sys.exit(exit_code)
