"""Developer Repository — SQLAlchemy async implementation of DeveloperRepository.

Invariants:
    - Every mutating method commits before returning (one logical transaction per call)
    - find_by_email returns the first match; duplicates can exist after updates
    - find_all_active_by_specialty never yields a DELETED row

Design Decisions:
    - save() uses add() for new rows and merge() for rows with an id: merge gives
      insert-or-update by primary key without a prior SELECT in the caller
    - List queries are async generators so callers consume rows lazily
"""

import logging
from typing import AsyncIterator

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from devregistry.core.domain_types import DeveloperId, DeveloperStatus
from devregistry.models.developer import Developer

logger = logging.getLogger(__name__)


class SqlAlchemyDeveloperRepository:
    """Developer persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, developer_id: DeveloperId) -> Developer | None:
        return await self.db.get(Developer, developer_id)

    async def find_by_email(self, email: str) -> Developer | None:
        result = await self.db.execute(
            select(Developer).where(Developer.email == email).limit(1),
        )
        return result.scalars().first()

    async def find_all(self) -> AsyncIterator[Developer]:
        result = await self.db.execute(select(Developer))
        for developer in result.scalars():
            yield developer

    async def find_all_active_by_specialty(
        self, specialty: str,
    ) -> AsyncIterator[Developer]:
        result = await self.db.execute(
            select(Developer).where(
                Developer.specialty == specialty,
                Developer.status == DeveloperStatus.ACTIVE,
            ),
        )
        for developer in result.scalars():
            yield developer

    async def save(self, developer: Developer) -> Developer:
        """Insert when id is None, otherwise upsert by primary key."""
        if developer.id is None:
            self.db.add(developer)
            stored = developer
        else:
            stored = await self.db.merge(developer)
        await self.db.commit()
        await self.db.refresh(stored)
        return stored

    async def delete_by_id(self, developer_id: DeveloperId) -> None:
        await self.db.execute(
            delete(Developer).where(Developer.id == developer_id),
        )
        await self.db.commit()

    async def delete_all(self) -> None:
        await self.db.execute(delete(Developer))
        await self.db.commit()
        logger.info("All developers deleted")
