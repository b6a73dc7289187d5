"""
Database initialization script.
Creates every RingConnect table directly from the models, or applies the
Alembic migrations with --migrate.
Run this as: python init_db.py [--migrate]
"""

import argparse
import logging
import sys

from sqlalchemy import inspect

from ringconnect.core.config import settings
from ringconnect.db.session import engine
from ringconnect.db.init_db import create_all_tables, init_db

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger("db-init")

def main() -> int:
    parser = argparse.ArgumentParser(description="Initialize the RingConnect database")
    parser.add_argument("--migrate", action="store_true", help="Apply Alembic migrations instead of create_all")
    args = parser.parse_args()

    logger.info(f"Initializing database at: {settings.DATABASE_URL}")
    if args.migrate:
        init_db()
    elif not create_all_tables():
        logger.error("Database initialization failed")
        return 1

    logger.info(f"Tables: {sorted(inspect(engine).get_table_names())}")
    logger.info("Database initialization completed successfully")
    return 0

if __name__ == "__main__":
    sys.exit(main())
