"""
Adapter: Admin account repository.

Implements AdminRepository port on the ``admin`` table.
"""

from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.engine import RowMapping
from sqlalchemy.ext.asyncio import AsyncEngine

from app.domain.admin.entities import AdminAccount
from app.domain.admin.ports import AdminRepository
from app.infrastructure.admin.tables import admins


def _to_account(row: RowMapping) -> AdminAccount:
    return AdminAccount(
        admin_id=row["admin_id"],
        firstname=row["admin_firstname"],
        lastname=row["admin_lastname"],
        email=row["admin_email"],
        password_hash=row["admin_password"],
        created_at=row["created_at"],
    )


class SqlAdminRepository(AdminRepository):
    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def get_by_email(self, email: str) -> Optional[AdminAccount]:
        query = select(admins).where(admins.c.admin_email == email)
        async with self._engine.connect() as conn:
            row = (await conn.execute(query)).mappings().first()
        return _to_account(row) if row else None

    async def get(self, admin_id: int) -> Optional[AdminAccount]:
        query = select(admins).where(admins.c.admin_id == admin_id)
        async with self._engine.connect() as conn:
            row = (await conn.execute(query)).mappings().first()
        return _to_account(row) if row else None

    async def update_name(self, admin_id: int, firstname: str, lastname: str) -> bool:
        async with self._engine.begin() as conn:
            result = await conn.execute(
                update(admins)
                .where(admins.c.admin_id == admin_id)
                .values(admin_firstname=firstname, admin_lastname=lastname)
            )
        return result.rowcount > 0

    async def add(self, firstname: str, lastname: str, email: str, password_hash: str) -> int:
        """Insert an admin account. Used by the provisioning script."""
        async with self._engine.begin() as conn:
            result = await conn.execute(
                admins.insert().values(
                    admin_firstname=firstname,
                    admin_lastname=lastname,
                    admin_email=email,
                    admin_password=password_hash,
                )
            )
        return result.inserted_primary_key[0]
