"""
Script to create the catalog tables

Run this script to create the genres and movies tables:
    python -m app.migrations.create_all_tables
"""

import logging

from app.database import create_tables

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s [%(name)s] %(message)s")
    logger.info("Creating catalog tables...")
    try:
        create_tables()
    except Exception:
        logger.error("Error creating tables", exc_info=True)
        raise


if __name__ == "__main__":
    main()
