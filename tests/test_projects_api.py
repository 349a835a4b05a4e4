import sqlite3
from datetime import datetime


def test_create_project_returns_envelope_with_generated_id(client, owner):
    res = client.post(
        "/api/projects",
        json={"title": "Issue 1", "genre": "noir", "format": "webtoon"},
        headers=owner,
    )
    assert res.status_code == 201
    body = res.json()
    assert body["success"] is True
    project = body["data"]["project"]
    assert len(project["id"]) == 36
    assert project["title"] == "Issue 1"
    assert project["genre"] == "noir"
    assert project["description"] is None
    assert project["targetAudience"] is None
    assert project["createdAt"] == project["updatedAt"]


def test_create_project_rejects_empty_title(client, owner):
    res = client.post("/api/projects", json={"title": ""}, headers=owner)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "BAD_REQUEST"


def test_list_projects_only_returns_callers_projects(api, owner, stranger):
    mine = [api.create_project(owner, title=f"Mine {i}") for i in range(2)]
    api.create_project(stranger, title="Theirs")

    res = api.list_projects(owner)
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["total"] == 2
    assert {p["id"] for p in data["items"]} == {p["id"] for p in mine}


def test_list_projects_empty_for_new_user(api, make_user):
    data = api.list_projects(make_user()).json()["data"]
    assert data == {"items": [], "total": 0}


def test_partial_update_preserves_other_fields(api, client, owner):
    project = api.create_project(
        owner, title="Issue 1", description="Pilot", genre="sci-fi"
    )

    res = client.patch(
        f"/api/projects/{project['id']}", json={"title": "Issue One"}, headers=owner
    )
    assert res.status_code == 200
    updated = res.json()["data"]["project"]
    assert updated["title"] == "Issue One"
    assert updated["description"] == "Pilot"
    assert updated["genre"] == "sci-fi"
    assert updated["createdAt"] == project["createdAt"]
    assert datetime.fromisoformat(updated["updatedAt"]) >= datetime.fromisoformat(project["updatedAt"])

    listed = api.list_projects(owner).json()["data"]["items"]
    assert listed[0]["title"] == "Issue One"
    assert listed[0]["description"] == "Pilot"


def test_update_with_no_fields_fails_validation(api, client, owner):
    project = api.create_project(owner)
    res = client.patch(f"/api/projects/{project['id']}", json={}, headers=owner)
    assert res.status_code == 400
    assert "At least one field must be provided to update." in res.json()["error"]["message"]


def test_update_of_foreign_project_is_not_found(api, client, owner, stranger):
    project = api.create_project(owner, title="Original")

    res = client.patch(
        f"/api/projects/{project['id']}", json={"title": "Hijacked"}, headers=stranger
    )
    assert res.status_code == 404
    assert res.json()["error"] == {"code": "NOT_FOUND", "message": "Project not found."}
    assert api.list_projects(owner).json()["data"]["items"][0]["title"] == "Original"


def test_foreign_and_missing_projects_look_the_same(api, client, owner, stranger):
    project = api.create_project(owner)
    foreign = client.patch(f"/api/projects/{project['id']}", json={"title": "x"}, headers=stranger)
    missing = client.patch("/api/projects/does-not-exist", json={"title": "x"}, headers=stranger)
    assert foreign.status_code == missing.status_code == 404
    assert foreign.json() == missing.json()


def test_delete_project_cascades_to_pages_and_panels(api, client, owner, db_path):
    project = api.create_project(owner)
    page = api.create_page(owner, project["id"])
    api.create_panel(owner, project["id"], page["id"], dialogue="Hello")
    api.create_panel(owner, project["id"], page["id"], panelIndex=1)

    res = client.delete(f"/api/projects/{project['id']}", headers=owner)
    assert res.status_code == 200
    assert res.json() == {"success": True}

    assert api.list_projects(owner).json()["data"]["total"] == 0
    assert api.list_pages(owner, project["id"]).status_code == 404

    with sqlite3.connect(db_path) as conn:
        pages = conn.execute(
            "SELECT COUNT(*) FROM comic_pages WHERE project_id = ?", (project["id"],)
        ).fetchone()[0]
        panels = conn.execute(
            "SELECT COUNT(*) FROM comic_panels WHERE page_id = ?", (page["id"],)
        ).fetchone()[0]
    assert pages == 0
    assert panels == 0


def test_delete_foreign_project_is_not_found(api, client, owner, stranger):
    project = api.create_project(owner)
    res = client.delete(f"/api/projects/{project['id']}", headers=stranger)
    assert res.status_code == 404
    assert api.list_projects(owner).json()["data"]["total"] == 1


def test_project_text_fields_have_no_length_cap(api, owner):
    long_text = "x" * 1000
    project = api.create_project(
        owner, title=long_text, genre=long_text, format=long_text, targetAudience=long_text
    )
    assert project["title"] == long_text
    assert project["targetAudience"] == long_text
