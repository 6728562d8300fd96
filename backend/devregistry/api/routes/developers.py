"""Developer Routes — HTTP mapping for the developer lifecycle.

Invariants:
    - Routes never contain business rules (delegated to DeveloperService)
    - Domain failures surface as DeveloperRegistryError, mapped by api/error_handlers.py
    - Responses omit null fields (id before persistence, status when unset)

Design Decisions:
    - Service built per request from the request-scoped AsyncSession (no shared state)
    - DELETE defaults to soft delete; ?isHard=true removes the row
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from devregistry.core.domain_types import DeveloperId
from devregistry.infrastructure.database import get_db
from devregistry.infrastructure.developer_repository import (
    SqlAlchemyDeveloperRepository,
)
from devregistry.schemas.developer import DeveloperDto, ErrorResponse
from devregistry.services.developer_service import DeveloperService

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/v1/developers",
    tags=["developers"],
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)


def get_developer_service(
    db: AsyncSession = Depends(get_db),
) -> DeveloperService:
    return DeveloperService(SqlAlchemyDeveloperRepository(db))


@router.post(
    "", response_model=DeveloperDto, response_model_exclude_none=True,
)
async def create_developer(
    body: DeveloperDto,
    service: DeveloperService = Depends(get_developer_service),
):
    """Create a developer. Fails with DEVELOPER_DUPLICATE_EMAIL on a known email."""
    created = await service.create_developer(body.to_entity())
    return DeveloperDto.from_entity(created)


@router.put(
    "", response_model=DeveloperDto, response_model_exclude_none=True,
)
async def update_developer(
    body: DeveloperDto,
    service: DeveloperService = Depends(get_developer_service),
):
    """Overwrite an existing developer. Fails with DEVELOPER_NOT_FOUND."""
    updated = await service.update_developer(body.to_entity())
    return DeveloperDto.from_entity(updated)


@router.get(
    "", response_model=list[DeveloperDto], response_model_exclude_none=True,
)
async def list_developers(
    service: DeveloperService = Depends(get_developer_service),
):
    """List every developer, including soft-deleted ones."""
    return [
        DeveloperDto.from_entity(d) async for d in service.list_developers()
    ]


@router.get(
    "/specialty/{specialty}",
    response_model=list[DeveloperDto],
    response_model_exclude_none=True,
)
async def list_active_by_specialty(
    specialty: str,
    service: DeveloperService = Depends(get_developer_service),
):
    """List ACTIVE developers with the given specialty."""
    return [
        DeveloperDto.from_entity(d)
        async for d in service.list_active_by_specialty(specialty)
    ]


@router.get(
    "/{developer_id}",
    response_model=DeveloperDto,
    response_model_exclude_none=True,
)
async def get_developer(
    developer_id: int,
    service: DeveloperService = Depends(get_developer_service),
):
    """Get a developer by id. Fails with DEVELOPER_NOT_FOUND."""
    developer = await service.get_developer(DeveloperId(developer_id))
    return DeveloperDto.from_entity(developer)


@router.delete("/{developer_id}")
async def delete_developer(
    developer_id: int,
    is_hard: bool = Query(False, alias="isHard"),
    service: DeveloperService = Depends(get_developer_service),
):
    """Soft delete by default; hard delete when isHard=true."""
    if is_hard:
        await service.hard_delete_developer(DeveloperId(developer_id))
    else:
        await service.soft_delete_developer(DeveloperId(developer_id))
    return Response(status_code=status.HTTP_200_OK)
