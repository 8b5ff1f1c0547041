#!/usr/bin/env python3
"""Load the skill catalog YAML into the database.

Usage:
    python -m scripts.seed_skill_catalog [path/to/catalog.yaml]

Environment variables:
    DATABASE_URL: SQLAlchemy URL of the catalog database (optional)
"""
import argparse
import logging
import sys

from scripts.bootstrap import get_session, init_db, load_yaml, seed_skill_catalog, settings, start_script

logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed the skill catalog")
    parser.add_argument(
        "catalog",
        nargs="?",
        default=str(settings.skill_catalog_file),
        help="YAML file with a top-level 'skills' list",
    )
    args = parser.parse_args()

    start_script(__name__)

    data = load_yaml(args.catalog)
    entries = data.get("skills", [])
    logger.info("Loaded %d catalog entries from %s", len(entries), args.catalog)

    init_db()
    with get_session() as session:
        counts = seed_skill_catalog(session, entries)

    logger.info("Catalog ready: %d skills, %d aliases", counts["skills"], counts["aliases"])
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as e:
        logger.error("Error: %s", e)
        sys.exit(1)
