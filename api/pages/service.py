"""
Page business logic.

Pages form two levels: top-level pages (no parent) and their direct
subpages. Subpages are never expanded further.
"""

from __future__ import annotations

import asyncio
import logging

from . import repository, schemas

logger = logging.getLogger(__name__)


def _to_page(row: dict) -> dict:
    parent_id = row.get("parent_id")
    return {
        "id": int(row["id"]),
        "title": row["title"],
        "content": row["content"],
        "parent_id": int(parent_id) if parent_id is not None else None,
    }


async def list_pages_with_subpages() -> list[dict]:
    """
    Return every top-level page with its `subpages` attached.

    Subpage queries run concurrently. The first failure fails the whole
    listing; queries already in flight are left to finish on their own.
    """
    top_level = await repository.list_top_level_pages()
    subpage_rows = await asyncio.gather(
        *(repository.list_subpages(int(row["id"])) for row in top_level)
    )

    pages: list[dict] = []
    for row, subpages in zip(top_level, subpage_rows):
        page = _to_page(row)
        page["subpages"] = [_to_page(sub) for sub in subpages or []]
        pages.append(page)
    return pages


async def create_page(payload: schemas.PageCreateRequest, *, admin: dict) -> dict:
    # parent_id is not checked here; referential rules belong to the store.
    row = await repository.insert_page(
        title=payload.title,
        content=payload.content,
        parent_id=payload.parent_id,
    )
    page = _to_page(row)
    logger.info(
        "page_created id=%s parent_id=%s username=%s",
        page["id"],
        page["parent_id"],
        admin["username"],
    )
    return page


async def update_page(page_id: int, payload: schemas.PageUpdateRequest, *, admin: dict) -> dict:
    row = await repository.update_page(page_id, title=payload.title, content=payload.content)
    if row is None:
        # Missing ids are not an error.
        logger.info("page_update_noop id=%s username=%s", page_id, admin["username"])
    else:
        logger.info("page_updated id=%s username=%s", page_id, admin["username"])
    return {"id": page_id, "title": payload.title, "content": payload.content}


async def delete_page(page_id: int, *, admin: dict) -> dict:
    found = await repository.delete_page(page_id)
    logger.info("page_deleted id=%s found=%s username=%s", page_id, found, admin["username"])
    return {"message": "Page deleted"}
