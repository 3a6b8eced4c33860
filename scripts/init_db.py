#!/usr/bin/env python3
"""Create the database schema and seed the first super_admin.

Usage:
    python scripts/init_db.py
    python scripts/init_db.py --skip-seed
    python scripts/init_db.py --email owner@example.com --password 'S3cret!!'

Defaults come from env.yaml (SEED_ADMIN_NAME, SEED_ADMIN_EMAIL,
SEED_ADMIN_PASSWORD). An existing user with the same email is left untouched.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add project root to path for imports
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from sqlmodel import SQLModel  # noqa: E402

from config import ApplicationConfig  # noqa: E402
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork  # noqa: E402
from src.api.utils.logging import configure_logging  # noqa: E402
from src.app.services.password_hasher import PasswordHasher  # noqa: E402
from src.depends import AsyncSessionLocal, engine  # noqa: E402
from src.domain.entities import User, UserRole  # noqa: E402

logger = logging.getLogger("init_db")


async def create_schema() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database schema created")


async def seed_super_admin(name: str, email: str, password: str) -> str:
    """Insert a super_admin unless the email is taken. Returns 'created' or 'exists'."""
    hasher = PasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)

    async with AsyncSessionLocal() as session:
        async with SqlAlchemyUnitOfWork(session) as uow:
            if await uow.users.get_by_email(email) is not None:
                logger.info(f"User {email} already exists, skipping seed")
                return "exists"

            user = User(
                name=name,
                email=email,
                password_hash=hasher.hash(password),
                role=UserRole.super_admin,
            )
            await uow.users.create(user)
            await uow.commit()

    logger.info(f"Seeded super_admin {email}")
    return "created"


async def main(args: argparse.Namespace) -> None:
    try:
        await create_schema()
        if not args.skip_seed:
            await seed_super_admin(args.name, args.email, args.password)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create tables and seed a super_admin")
    parser.add_argument("--name", default=ApplicationConfig.SEED_ADMIN_NAME)
    parser.add_argument("--email", default=ApplicationConfig.SEED_ADMIN_EMAIL)
    parser.add_argument("--password", default=ApplicationConfig.SEED_ADMIN_PASSWORD)
    parser.add_argument("--skip-seed", action="store_true", help="Only create tables")

    configure_logging(ApplicationConfig.LOG_LEVEL)
    asyncio.run(main(parser.parse_args()))
