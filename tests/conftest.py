"""Pytest configuration helpers.

This conftest puts `backend/` on `sys.path` so tests can import the
`storyboarder` package without installing it, and points the app at a
throwaway SQLite database before any storyboarder module is imported.
"""
import os
import sys
import tempfile
import uuid


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
BACKEND = os.path.join(ROOT, "backend")
if BACKEND not in sys.path:
    sys.path.insert(0, BACKEND)

DB_PATH = os.path.join(tempfile.mkdtemp(prefix="storyboarder-tests-"), "storyboard.db")
os.environ["DB_URL"] = f"sqlite+aiosqlite:///{DB_PATH}"
os.environ["AUTO_CREATE_TABLES"] = "true"
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ["DEBUG"] = "false"
os.environ.pop("JWT_AUDIENCE", None)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402


class StoryboardApi:
    """Thin wrapper over the HTTP routes; create helpers assert success."""

    def __init__(self, client: TestClient):
        self.client = client

    def create_project(self, headers, **body):
        body.setdefault("title", "Issue 1")
        res = self.client.post("/api/projects", json=body, headers=headers)
        assert res.status_code == 201, res.text
        return res.json()["data"]["project"]

    def create_page(self, headers, project_id, **body):
        body.setdefault("pageNumber", 1)
        res = self.client.post(f"/api/projects/{project_id}/pages", json=body, headers=headers)
        assert res.status_code == 201, res.text
        return res.json()["data"]["page"]

    def create_panel(self, headers, project_id, page_id, **body):
        body.setdefault("panelIndex", 0)
        res = self.client.post(
            f"/api/projects/{project_id}/pages/{page_id}/panels", json=body, headers=headers
        )
        assert res.status_code == 201, res.text
        return res.json()["data"]["panel"]

    def list_projects(self, headers):
        return self.client.get("/api/projects", headers=headers)

    def list_pages(self, headers, project_id):
        return self.client.get(f"/api/projects/{project_id}/pages", headers=headers)

    def list_panels(self, headers, project_id, page_id):
        return self.client.get(
            f"/api/projects/{project_id}/pages/{page_id}/panels", headers=headers
        )


@pytest.fixture
def client():
    from storyboarder.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def api(client):
    return StoryboardApi(client)


@pytest.fixture
def make_user():
    """Factory for auth headers of a fresh, unique user."""
    from storyboarder.auth import create_access_token

    def _make(user_id=None):
        user_id = user_id or f"user-{uuid.uuid4().hex[:12]}"
        return {"Authorization": f"Bearer {create_access_token(user_id)}"}

    return _make


@pytest.fixture
def owner(make_user):
    return make_user()


@pytest.fixture
def stranger(make_user):
    return make_user()


@pytest.fixture
def db_path():
    return DB_PATH
