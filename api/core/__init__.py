"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every feature uses (DB wiring,
settings, error types, the front-end fallback). Keep page SQL and auth logic
in their own feature packages (`pages/`, `auth/`).
"""
