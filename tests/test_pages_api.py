import sqlite3


def test_create_page_in_owned_project(api, client, owner):
    project = api.create_project(owner)
    res = client.post(
        f"/api/projects/{project['id']}/pages",
        json={"pageNumber": 1, "title": "Splash", "notes": "full bleed"},
        headers=owner,
    )
    assert res.status_code == 201
    page = res.json()["data"]["page"]
    assert page["projectId"] == project["id"]
    assert page["pageNumber"] == 1
    assert page["title"] == "Splash"
    assert page["thumbnailUrl"] is None
    assert page["createdAt"] == page["updatedAt"]


def test_page_number_must_be_positive(api, client, owner):
    project = api.create_project(owner)
    res = client.post(
        f"/api/projects/{project['id']}/pages", json={"pageNumber": 0}, headers=owner
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "BAD_REQUEST"


def test_duplicate_page_numbers_are_allowed(api, owner):
    project = api.create_project(owner)
    api.create_page(owner, project["id"], pageNumber=2)
    api.create_page(owner, project["id"], pageNumber=2)
    assert api.list_pages(owner, project["id"]).json()["data"]["total"] == 2


def test_create_page_in_foreign_project_is_not_found(api, client, owner, stranger):
    project = api.create_project(owner)
    res = client.post(
        f"/api/projects/{project['id']}/pages", json={"pageNumber": 1}, headers=stranger
    )
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "Project not found."
    assert api.list_pages(owner, project["id"]).json()["data"]["total"] == 0


def test_list_pages_ordered_by_page_number(api, owner):
    project = api.create_project(owner)
    for number in (3, 1, 2):
        api.create_page(owner, project["id"], pageNumber=number)

    data = api.list_pages(owner, project["id"]).json()["data"]
    assert data["total"] == 3
    assert [p["pageNumber"] for p in data["items"]] == [1, 2, 3]


def test_list_pages_of_foreign_project_is_not_found(api, owner, stranger):
    project = api.create_project(owner)
    api.create_page(owner, project["id"])
    assert api.list_pages(stranger, project["id"]).status_code == 404


def test_update_page_partial(api, client, owner):
    project = api.create_project(owner)
    page = api.create_page(owner, project["id"], title="Opening", notes="rain")

    res = client.patch(
        f"/api/projects/{project['id']}/pages/{page['id']}",
        json={"thumbnailUrl": "https://cdn.example.com/p1.png"},
        headers=owner,
    )
    assert res.status_code == 200
    updated = res.json()["data"]["page"]
    assert updated["thumbnailUrl"] == "https://cdn.example.com/p1.png"
    assert updated["title"] == "Opening"
    assert updated["notes"] == "rain"
    assert updated["pageNumber"] == 1


def test_update_page_with_no_fields_fails_validation(api, client, owner):
    project = api.create_project(owner)
    page = api.create_page(owner, project["id"])
    res = client.patch(
        f"/api/projects/{project['id']}/pages/{page['id']}", json={}, headers=owner
    )
    assert res.status_code == 400


def test_page_under_wrong_project_is_not_found(api, client, owner):
    first = api.create_project(owner, title="First")
    second = api.create_project(owner, title="Second")
    page = api.create_page(owner, first["id"])

    res = client.patch(
        f"/api/projects/{second['id']}/pages/{page['id']}",
        json={"title": "moved?"},
        headers=owner,
    )
    assert res.status_code == 404
    assert res.json()["error"] == {"code": "NOT_FOUND", "message": "Page not found."}

    res = client.delete(f"/api/projects/{second['id']}/pages/{page['id']}", headers=owner)
    assert res.status_code == 404
    assert api.list_pages(owner, first["id"]).json()["data"]["total"] == 1


def test_delete_page_removes_its_panels(api, client, owner, db_path):
    project = api.create_project(owner)
    page = api.create_page(owner, project["id"])
    other = api.create_page(owner, project["id"], pageNumber=2)
    for index in range(3):
        api.create_panel(owner, project["id"], page["id"], panelIndex=index)
    survivor = api.create_panel(owner, project["id"], other["id"])

    res = client.delete(f"/api/projects/{project['id']}/pages/{page['id']}", headers=owner)
    assert res.status_code == 200
    assert res.json() == {"success": True}

    with sqlite3.connect(db_path) as conn:
        remaining = conn.execute(
            "SELECT COUNT(*) FROM comic_panels WHERE page_id = ?", (page["id"],)
        ).fetchone()[0]
    assert remaining == 0

    pages = api.list_pages(owner, project["id"]).json()["data"]
    assert [p["id"] for p in pages["items"]] == [other["id"]]
    panels = api.list_panels(owner, project["id"], other["id"]).json()["data"]
    assert [p["id"] for p in panels["items"]] == [survivor["id"]]


def test_delete_page_without_panels(api, client, owner):
    project = api.create_project(owner)
    page = api.create_page(owner, project["id"])
    res = client.delete(f"/api/projects/{project['id']}/pages/{page['id']}", headers=owner)
    assert res.status_code == 200


def test_delete_page_twice_is_not_found(api, client, owner):
    project = api.create_project(owner)
    page = api.create_page(owner, project["id"])
    url = f"/api/projects/{project['id']}/pages/{page['id']}"
    assert client.delete(url, headers=owner).status_code == 200
    assert client.delete(url, headers=owner).status_code == 404


def test_delete_page_with_panels_respects_foreign_keys(api, client, owner):
    project = api.create_project(owner)
    page = api.create_page(owner, project["id"])
    api.create_panel(owner, project["id"], page["id"], dialogue="Hello")

    res = client.delete(f"/api/projects/{project['id']}/pages/{page['id']}", headers=owner)
    assert res.status_code == 200, res.text
    assert api.list_pages(owner, project["id"]).json()["data"]["total"] == 0


def test_long_titles_and_thumbnail_urls_are_accepted(api, client, owner):
    project = api.create_project(owner)
    long_title = "T" * 600
    long_url = "https://cdn.example.com/" + "a" * 2000 + ".png"

    page = api.create_page(owner, project["id"], title=long_title, thumbnailUrl=long_url)
    assert page["title"] == long_title
    assert page["thumbnailUrl"] == long_url
