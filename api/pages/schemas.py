"""
Pydantic schemas for page endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class PageCreateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=500)
    content: str
    parent_id: int | None = Field(default=None, ge=1)


class PageUpdateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=500)
    content: str


class PageResponse(BaseModel):
    # Legacy rows may hold NULL title or content.
    id: int
    title: str | None
    content: str | None
    parent_id: int | None = None


class PageWithSubpages(PageResponse):
    # Always present, empty when the page has no subpages.
    subpages: list[PageResponse] = Field(default_factory=list)


class PageUpdateResponse(BaseModel):
    id: int
    title: str
    content: str


class MessageResponse(BaseModel):
    message: str
