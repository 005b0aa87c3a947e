"""
Page API endpoints.

Reading is public; every mutation needs an admin bearer token.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from auth import dependencies as auth_dependencies

from . import schemas, service

router = APIRouter()


@router.get("/pages", response_model=list[schemas.PageWithSubpages])
async def list_pages() -> list[dict]:
    return await service.list_pages_with_subpages()


@router.post("/pages", response_model=schemas.PageResponse)
async def create_page(
    request: schemas.PageCreateRequest,
    admin: dict = Depends(auth_dependencies.get_current_admin),
) -> dict:
    return await service.create_page(request, admin=admin)


@router.put("/pages/{page_id}", response_model=schemas.PageUpdateResponse)
async def update_page(
    page_id: int,
    request: schemas.PageUpdateRequest,
    admin: dict = Depends(auth_dependencies.get_current_admin),
) -> dict:
    return await service.update_page(page_id, request, admin=admin)


@router.delete("/pages/{page_id}", response_model=schemas.MessageResponse)
async def delete_page(
    page_id: int,
    admin: dict = Depends(auth_dependencies.get_current_admin),
) -> dict:
    return await service.delete_page(page_id, admin=admin)
