"""SQLAlchemy implementation of the admin user repository."""

import logging

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.admin_user import AdminUser
from core.exceptions import ConflictError, NotFoundError
from core.interfaces.repositories import AdminUserRepository
from infrastructure.database.models.admin_user import AdminUser as AdminUserModel
from infrastructure.database.models.base import utcnow

logger = logging.getLogger(__name__)


def _to_entity(row: AdminUserModel) -> AdminUser:
    return AdminUser(
        id=row.id,
        email=row.email,
        password_hash=row.password_hash,
        name=row.name,
        created_at=row.created_at,
        updated_at=row.updated_at,
        deleted_at=row.deleted_at,
    )


class SQLAlchemyAdminUserRepository(AdminUserRepository):
    """Admin user persistence over an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def _live(self):
        return select(AdminUserModel).where(AdminUserModel.deleted_at.is_(None))

    async def _get_row(self, user_id: int) -> AdminUserModel:
        result = await self.db.execute(self._live().where(AdminUserModel.id == user_id))
        row = result.scalar_one_or_none()
        if row is None:
            raise NotFoundError("Admin user not found")
        return row

    async def get_by_email(self, email: str) -> AdminUser:
        result = await self.db.execute(
            self._live().where(AdminUserModel.email == email.strip().lower())
        )
        row = result.scalar_one_or_none()
        if row is None:
            raise NotFoundError("Admin user not found")
        return _to_entity(row)

    async def get_by_id(self, user_id: int) -> AdminUser:
        return _to_entity(await self._get_row(user_id))

    async def create(self, user: AdminUser) -> AdminUser:
        row = AdminUserModel(
            email=user.email.strip().lower(),
            password_hash=user.password_hash,
            name=user.name,
        )
        self.db.add(row)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise ConflictError("An admin with this email already exists") from e
        await self.db.refresh(row)
        logger.info("Created admin user %s", row.email)
        return _to_entity(row)

    async def update(self, user: AdminUser) -> AdminUser:
        if user.id is None:
            raise NotFoundError("Admin user not found")
        row = await self._get_row(user.id)
        row.email = user.email.strip().lower()
        row.password_hash = user.password_hash
        row.name = user.name
        row.updated_at = utcnow()
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise ConflictError("An admin with this email already exists") from e
        await self.db.refresh(row)
        return _to_entity(row)

    async def delete(self, user_id: int) -> None:
        result = await self.db.execute(
            update(AdminUserModel)
            .where(AdminUserModel.id == user_id, AdminUserModel.deleted_at.is_(None))
            .values(deleted_at=utcnow())
        )
        if result.rowcount == 0:
            await self.db.rollback()
            raise NotFoundError("Admin user not found")
        await self.db.commit()

    async def list_all(self) -> list[AdminUser]:
        result = await self.db.execute(self._live().order_by(AdminUserModel.id))
        return [_to_entity(row) for row in result.scalars().all()]

    async def count(self) -> int:
        result = await self.db.execute(
            select(func.count(AdminUserModel.id)).where(AdminUserModel.deleted_at.is_(None))
        )
        return result.scalar_one()
