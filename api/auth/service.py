"""
Auth business logic.
"""

from __future__ import annotations

import logging

from core import errors

from . import repository, schemas, security

logger = logging.getLogger(__name__)


async def login(payload: schemas.LoginRequest) -> schemas.TokenResponse:
    admin_row = await repository.get_admin_by_username(payload.username)

    # Unknown user and wrong password get the same answer.
    password_hash = str(admin_row.get("password") or "") if admin_row is not None else ""
    if admin_row is None or not security.verify_password(payload.password, password_hash):
        logger.warning("login_failed username=%s", payload.username)
        raise errors.InvalidCredentials()

    username = str(admin_row["username"])
    token = security.build_access_token(username=username)
    logger.info("login_succeeded username=%s", username)
    return schemas.TokenResponse(token=token)


def get_admin_from_access_token(access_token: str) -> dict:
    """
    Stateless check: a valid signature and expiry is all it takes to be admin.
    """
    try:
        payload = security.decode_access_token(access_token)
    except security.AuthSecurityError as exc:
        logger.info("token_rejected reason=%s", exc)
        raise errors.InvalidToken() from exc

    username = str(payload.get("username") or "").strip()
    if not username:
        raise errors.InvalidToken()
    return {"username": username}
