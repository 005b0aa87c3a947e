"""
Admin credential lookups. The `admins` table is provisioned outside this
service; nothing here writes to it.
"""

from __future__ import annotations

from core import db


async def get_admin_by_username(username: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT username, password
        FROM admins
        WHERE username = $1
        LIMIT 1
        """,
        username,
    )
