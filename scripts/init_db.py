#!/usr/bin/env python3
"""
Standalone database initialization script
Creates the schema and seeds default ingredient and recipe categories
"""

import sys
import logging
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("pantrypal.init_db")


def main() -> int:
    from sqlalchemy import inspect
    from sqlalchemy.exc import SQLAlchemyError

    from app.config import settings
    from domain.models.database import engine
    from main import bootstrap_database

    logger.info("Initializing %s", settings.database_url)
    try:
        seeded = bootstrap_database()
    except SQLAlchemyError as exc:
        logger.error("Failed to initialize database: %s", exc)
        return 1

    tables = inspect(engine).get_table_names()
    logger.info("Tables ready (%d): %s", len(tables), ", ".join(tables))
    logger.info("Seeded %d default categories", seeded)
    return 0


if __name__ == "__main__":
    sys.exit(main())
