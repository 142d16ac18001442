#!/usr/bin/env python3
"""
CLI tool: Provision an admin account.

The API has no sign-up route; admins are created here. The password
is read from a prompt unless --password is given, and stored as a
bcrypt hash.

Usage:
    python scripts/create_admin.py --email=me@example.com --firstname=Jane --lastname=Doe
"""

import argparse
import asyncio
import getpass
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.core.config import settings
from app.infrastructure.admin.admin_repository import SqlAdminRepository
from app.infrastructure.admin.security import BcryptPasswordHasher
from app.infrastructure.database import build_engine
from app.shared.logging import configure_logging

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


async def run(database_url: str, email: str, firstname: str, lastname: str, password: str) -> int:
    engine = build_engine(database_url)
    repo = SqlAdminRepository(engine)
    try:
        if await repo.get_by_email(email) is not None:
            logger.error("An admin with email %s already exists", email)
            return 1
        admin_id = await repo.add(
            firstname, lastname, email, BcryptPasswordHasher().hash(password)
        )
    finally:
        await engine.dispose()
    logger.info("Created admin id=%s email=%s", admin_id, email)
    return 0


def main():
    """Create one admin account."""
    parser = argparse.ArgumentParser(description="Create an admin account")
    parser.add_argument("--email", required=True)
    parser.add_argument("--firstname", required=True)
    parser.add_argument("--lastname", required=True)
    parser.add_argument("--password", default=None, help="Prompted when omitted")
    parser.add_argument(
        "--database-url",
        default=None,
        help="Async database URL (default: from settings)",
    )
    args = parser.parse_args()
    configure_logging("INFO")

    password = args.password or getpass.getpass("Password: ")
    if len(password) < MIN_PASSWORD_LENGTH:
        logger.error("Password must be at least %d characters", MIN_PASSWORD_LENGTH)
        return 1

    try:
        return asyncio.run(
            run(
                args.database_url or settings.get_database_url(),
                args.email.strip(),
                args.firstname.strip(),
                args.lastname.strip(),
                password,
            )
        )
    except Exception:
        logger.exception("Admin creation failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
