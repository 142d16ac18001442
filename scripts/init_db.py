#!/usr/bin/env python3
"""
CLI tool: Create the database schema.

Creates every missing table (admin, categories, portfolios and their
child tables). Existing tables are left untouched.

Usage:
    python scripts/init_db.py [--database-url=postgresql+asyncpg://...]
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.core.config import settings
from app.infrastructure.database import build_engine, create_schema
from app.shared.logging import configure_logging

logger = logging.getLogger(__name__)


async def run(database_url: str) -> None:
    engine = build_engine(database_url)
    try:
        await create_schema(engine)
    finally:
        await engine.dispose()


def main():
    """Create missing tables on the configured database."""
    parser = argparse.ArgumentParser(description="Create the showcase database schema")
    parser.add_argument(
        "--database-url",
        default=None,
        help="Async database URL (default: from settings)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args()
    configure_logging(args.log_level)

    try:
        asyncio.run(run(args.database_url or settings.get_database_url()))
        return 0
    except Exception:
        logger.exception("Schema creation failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
