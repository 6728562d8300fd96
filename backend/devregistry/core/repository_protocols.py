"""Boundary Protocols — contracts between the lifecycle service and persistence.

Invariants:
    - services/ depend on DeveloperRepository, never on a concrete store
    - All IO operations are async; list queries stream results as async iterators
    - save() is insert-or-update: id None inserts, id set upserts by primary key

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - delete_all() lives on the contract for test setup only; no route calls it
"""

from typing import AsyncIterator, Protocol

from devregistry.core.domain_types import DeveloperId
from devregistry.models.developer import Developer


class DeveloperRepository(Protocol):
    """Contract for developer persistence — implemented by infrastructure."""
    async def find_by_id(self, developer_id: DeveloperId) -> Developer | None: ...
    async def find_by_email(self, email: str) -> Developer | None: ...
    def find_all(self) -> AsyncIterator[Developer]: ...
    def find_all_active_by_specialty(
        self, specialty: str,
    ) -> AsyncIterator[Developer]: ...
    async def save(self, developer: Developer) -> Developer: ...
    async def delete_by_id(self, developer_id: DeveloperId) -> None: ...
    async def delete_all(self) -> None: ...
