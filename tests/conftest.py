import bcrypt
import pytest
from fastapi.testclient import TestClient

from auth import repository as auth_repository
from auth import security
from core import errors
from main import app
from pages import repository as pages_repository

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "correct"


class FakePageStore:
    """In-memory stand-in for the `pages` table, one dict per row."""

    def __init__(self):
        self.rows = {}
        self.next_id = 1
        self.failing_parents = set()

    def add(self, title, content="", parent_id=None):
        row = {"id": self.next_id, "title": title, "content": content, "parent_id": parent_id}
        self.rows[row["id"]] = row
        self.next_id += 1
        return dict(row)

    async def list_top_level_pages(self):
        return [dict(r) for r in self.rows.values() if r["parent_id"] is None]

    async def list_subpages(self, parent_id):
        if parent_id in self.failing_parents:
            raise errors.StoreError()
        return [dict(r) for r in self.rows.values() if r["parent_id"] == parent_id]

    async def insert_page(self, *, title, content, parent_id):
        return self.add(title, content, parent_id)

    async def update_page(self, page_id, *, title, content):
        row = self.rows.get(page_id)
        if row is None:
            return None
        row["title"] = title
        row["content"] = content
        return {"id": page_id, "title": title, "content": content}

    async def delete_page(self, page_id):
        return self.rows.pop(page_id, None) is not None


@pytest.fixture(scope="session")
def admin_password_hash():
    # Low cost factor keeps the suite fast.
    return bcrypt.hashpw(ADMIN_PASSWORD.encode(), bcrypt.gensalt(rounds=4)).decode()


@pytest.fixture(autouse=True)
def settings_env(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "test-secret")
    monkeypatch.delenv("SECRET_KEY", raising=False)
    monkeypatch.delenv("JWT_ALG", raising=False)
    monkeypatch.delenv("ACCESS_TOKEN_EXPIRE_MIN", raising=False)


@pytest.fixture(autouse=True)
def page_store(monkeypatch):
    store = FakePageStore()
    for name in ("list_top_level_pages", "list_subpages", "insert_page", "update_page", "delete_page"):
        monkeypatch.setattr(pages_repository, name, getattr(store, name))
    return store


@pytest.fixture(autouse=True)
def admins(monkeypatch, admin_password_hash):
    table = {ADMIN_USERNAME: {"username": ADMIN_USERNAME, "password": admin_password_hash}}

    async def get_admin_by_username(username):
        row = table.get(username)
        return dict(row) if row is not None else None

    monkeypatch.setattr(auth_repository, "get_admin_by_username", get_admin_by_username)
    return table


@pytest.fixture
def client():
    # Not used as a context manager, so the lifespan (real DB pool) never starts.
    return TestClient(app)


@pytest.fixture
def auth_headers():
    token = security.build_access_token(username=ADMIN_USERNAME)
    return {"Authorization": f"Bearer {token}"}
