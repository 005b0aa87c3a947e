"""
Error types surfaced to API clients.

Each error carries its HTTP status and the message rendered as
`{"message": ...}` by the handler registered in `main.py`.
"""

from __future__ import annotations


class ApiError(RuntimeError):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.message
        super().__init__(self.message)


class InvalidCredentials(ApiError):
    status_code = 401
    message = "Invalid credentials"


class MissingToken(ApiError):
    status_code = 401
    message = "Missing token"


class InvalidToken(ApiError):
    status_code = 403
    message = "Invalid or expired token"


# Never retried; the underlying driver error is only logged.
class StoreError(ApiError):
    status_code = 500
    message = "Database error"
