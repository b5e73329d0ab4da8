"""Utility script to create or reset the configured database schema."""
from __future__ import annotations

import argparse
import logging

from gitter.core.settings import settings
from gitter.db.session import create_tables, drop_tables

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Create the Gitter tables, optionally dropping them first."""
    parser = argparse.ArgumentParser(description="Create the Gitter database schema.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="drop every table before creating it again (destroys all posts and users)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level.upper())
    if args.reset:
        logger.warning("Dropping all tables in %s", settings.database_url)
        drop_tables()
    create_tables()
    logger.info("Database initialized at %s", settings.database_url)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
