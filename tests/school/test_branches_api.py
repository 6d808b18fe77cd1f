"""分校接口集成测试：默认 Logo 占位图。"""

from fastapi.testclient import TestClient

from app.packages.school.services.branch_service import DEFAULT_BRANCH_LOGO

PNG = b"\x89PNG\r\n\x1a\n" + b"\0" * 64


def test_branch_without_logo_uses_default(client: TestClient, store):
    store.put(b"default", "default-branch-logo.png")

    response = client.post("/api/branches", data={"name": "North Campus", "established_year": "1998"})

    assert response.status_code == 201
    branch = response.json()["data"]
    assert branch["logo"] == DEFAULT_BRANCH_LOGO
    assert branch["established_year"] == 1998


def test_default_logo_survives_replace_and_delete(client: TestClient, store):
    store.put(b"default", "default-branch-logo.png")
    branch = client.post("/api/branches", data={"name": "South Campus"}).json()["data"]

    updated = client.put(
        f"/api/branches/{branch['id']}",
        files={"logo": ("logo.png", PNG, "image/png")},
    ).json()["data"]
    assert updated["logo"].startswith("/api/uploads/branch-logo-")
    assert store.exists(DEFAULT_BRANCH_LOGO)

    other = client.post("/api/branches", data={"name": "East Campus"}).json()["data"]
    deleted = client.delete(f"/api/branches/{other['id']}")

    assert deleted.json()["data"]["removed_files"] == []
    assert store.exists(DEFAULT_BRANCH_LOGO)


def test_branches_are_listed_oldest_first(client: TestClient):
    for name in ("A", "B", "C"):
        client.post("/api/branches", data={"name": name})

    names = [branch["name"] for branch in client.get("/api/branches").json()["data"]]

    assert names == ["A", "B", "C"]


def test_invalid_established_year(client: TestClient, store):
    response = client.post(
        "/api/branches",
        data={"name": "Old", "established_year": "1600"},
        files={"logo": ("logo.png", PNG, "image/png")},
    )

    assert response.status_code == 400
    assert list(store.iter_blobs()) == []
