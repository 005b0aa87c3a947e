"""
Static front-end fallback.

Include this router last: its catch-all GET route must not shadow the API.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import FileResponse

from . import config

router = APIRouter()


@router.get("/{full_path:path}", include_in_schema=False)
async def frontend(full_path: str) -> FileResponse:
    base = config.static_dir().resolve()

    if full_path:
        try:
            candidate = (base / full_path).resolve()
            # Only serve files that live under the static directory.
            is_asset = base in candidate.parents and candidate.is_file()
        except (OSError, ValueError):
            # NUL bytes or over-long names: not a file, serve the index.
            is_asset = False
        if is_asset:
            return FileResponse(candidate)

    index = base / "index.html"
    if not index.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    return FileResponse(index)
