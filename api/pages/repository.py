"""
Page persistence (raw SQL).

Every function runs exactly one statement; there are no multi-statement
transactions.
"""

from __future__ import annotations

from core import db


async def list_top_level_pages() -> list[dict]:
    # No ORDER BY: callers get the store's natural order.
    return await db.fetch_all(
        """
        SELECT id, title, content, parent_id
        FROM pages
        WHERE parent_id IS NULL
        """
    )


async def list_subpages(parent_id: int) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT id, title, content, parent_id
        FROM pages
        WHERE parent_id = $1
        """,
        parent_id,
    )


async def insert_page(*, title: str, content: str, parent_id: int | None) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO pages (title, content, parent_id)
        VALUES ($1, $2, $3)
        RETURNING id, title, content, parent_id
        """,
        title,
        content,
        parent_id,
    )
    if row is None:
        raise RuntimeError("Failed to insert page.")
    return row


async def update_page(page_id: int, *, title: str, content: str) -> dict | None:
    """
    Update title/content only. Returns None when no row has `page_id`.
    """
    return await db.fetch_one(
        """
        UPDATE pages
        SET title = $2,
            content = $3
        WHERE id = $1
        RETURNING id, title, content
        """,
        page_id,
        title,
        content,
    )


async def delete_page(page_id: int) -> bool:
    # Subpages pointing at this row are left in place.
    status = await db.execute(
        """
        DELETE FROM pages
        WHERE id = $1
        """,
        page_id,
    )
    return status.rsplit(" ", 1)[-1] != "0"
