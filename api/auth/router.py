"""
Login endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter

from . import schemas, service

router = APIRouter()


@router.post("/login", response_model=schemas.TokenResponse)
async def login(request: schemas.LoginRequest) -> schemas.TokenResponse:
    return await service.login(request)
