"""Developer Service — lifecycle rules for developer records.

Invariants:
    - create: email must not match ANY stored row (ACTIVE or DELETED); status forced to ACTIVE
    - update: id must exist; every field overwritten; email uniqueness NOT re-checked
    - soft delete: status flips ACTIVE -> DELETED, row stays retrievable
    - hard delete: row removed permanently
    - ids outside the id column range are reported as not found, without a query
    - Every failure is terminal for the request (no retries, no fallbacks)

Design Decisions:
    - Duplicate check and insert are two separate store calls; two concurrent creates
      with the same email can both succeed. Accepted: a unique index would also
      reject updates, which are allowed to duplicate emails
    - Omitted status on update keeps the stored status (status column is NOT NULL)
    - Service holds no state besides its repository: one instance per request
"""

import logging
from typing import AsyncIterator

from devregistry.core.domain_types import (
    DeveloperId, DeveloperStatus, is_storable_developer_id,
)
from devregistry.core.errors import DeveloperNotFoundError, DuplicateEmailError
from devregistry.core.repository_protocols import DeveloperRepository
from devregistry.models.developer import Developer

logger = logging.getLogger(__name__)


class DeveloperService:
    """Validates and orchestrates developer mutations and reads."""

    def __init__(self, repository: DeveloperRepository):
        self.repository = repository

    async def create_developer(self, developer: Developer) -> Developer:
        await self._check_email_available(developer.email)
        developer.id = None
        developer.status = DeveloperStatus.ACTIVE
        created = await self.repository.save(developer)
        logger.info(
            "Developer created", extra={"developer_id": created.id},
        )
        return created

    async def update_developer(self, developer: Developer) -> Developer:
        existing = await self._get_or_raise(developer.id)
        if developer.status is None:
            developer.status = existing.status
        updated = await self.repository.save(developer)
        logger.info(
            "Developer updated", extra={"developer_id": updated.id},
        )
        return updated

    def list_developers(self) -> AsyncIterator[Developer]:
        """All developers regardless of status, in store order."""
        return self.repository.find_all()

    def list_active_by_specialty(self, specialty: str) -> AsyncIterator[Developer]:
        """ACTIVE developers whose specialty matches exactly."""
        return self.repository.find_all_active_by_specialty(specialty)

    async def get_developer(self, developer_id: DeveloperId) -> Developer:
        return await self._get_or_raise(developer_id)

    async def soft_delete_developer(self, developer_id: DeveloperId) -> None:
        developer = await self._get_or_raise(developer_id)
        developer.status = DeveloperStatus.DELETED
        await self.repository.save(developer)
        logger.info(
            "Developer soft-deleted", extra={"developer_id": developer_id},
        )

    async def hard_delete_developer(self, developer_id: DeveloperId) -> None:
        await self._get_or_raise(developer_id)
        await self.repository.delete_by_id(developer_id)
        logger.info(
            "Developer hard-deleted", extra={"developer_id": developer_id},
        )

    # ─── Helpers ─────────────────────────────────────────────────

    async def _check_email_available(self, email: str) -> None:
        if await self.repository.find_by_email(email) is not None:
            logger.warning("Duplicate developer email rejected")
            raise DuplicateEmailError(email)

    async def _get_or_raise(self, developer_id: DeveloperId | None) -> Developer:
        developer = (
            await self.repository.find_by_id(developer_id)
            if developer_id is not None
            and is_storable_developer_id(developer_id)
            else None
        )
        if developer is None:
            raise DeveloperNotFoundError(developer_id)
        return developer
