"""管理委员会接口集成测试：头像必填、社交链接 JSON、替换与删除时的文件清理。"""

import json

from fastapi.testclient import TestClient

PNG = b"\x89PNG\r\n\x1a\n" + b"\0" * 64


def _create(client: TestClient, name: str = "Abdul Karim", **extra):
    data = {"name": name, "designation": "President", "phone": "01911000001", **extra}
    return client.post("/api/managing-committee", data=data, files={"image": ("member.png", PNG, "image/png")})


def test_image_is_stored_in_committee_subdirectory(client: TestClient, store):
    response = _create(client, social=json.dumps({"facebook": "https://facebook.com/karim"}))

    assert response.status_code == 201
    body = response.json()["data"]
    assert body["image"].startswith("/api/uploads/managing-committee/committee-")
    assert body["social"] == {"facebook": "https://facebook.com/karim"}
    assert body["is_active"] is True
    assert store.exists(body["image"])


def test_image_is_required(client: TestClient, store):
    response = client.post("/api/managing-committee", data={"name": "No Image"})

    assert response.status_code == 400
    assert response.json()["success"] is False
    assert list(store.iter_blobs()) == []


def test_invalid_social_json_is_rejected(client: TestClient, store):
    response = _create(client, social="{not json")

    assert response.status_code == 400
    assert list(store.iter_blobs()) == []


def test_list_is_newest_first(client: TestClient):
    _create(client, "First Member")
    _create(client, "Second Member")

    body = client.get("/api/managing-committee").json()

    assert body["count"] == 2
    assert [item["name"] for item in body["data"]] == ["Second Member", "First Member"]


def test_update_replaces_image(client: TestClient, store):
    created = _create(client).json()["data"]

    response = client.put(
        f"/api/managing-committee/{created['id']}",
        data={"designation": "Secretary"},
        files={"image": ("new.png", PNG, "image/png")},
    )

    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["designation"] == "Secretary"
    assert updated["name"] == created["name"]
    assert updated["image"] != created["image"]
    assert not store.exists(created["image"])
    assert store.exists(updated["image"])


def test_update_without_image_keeps_it(client: TestClient, store):
    created = _create(client).json()["data"]

    response = client.put(f"/api/managing-committee/{created['id']}", data={"phone": "01911000002"})

    assert response.status_code == 200
    assert response.json()["data"]["image"] == created["image"]
    assert store.exists(created["image"])


def test_toggle_and_delete(client: TestClient, store):
    created = _create(client).json()["data"]

    toggled = client.patch(f"/api/managing-committee/{created['id']}/toggle")
    assert toggled.json()["data"]["is_active"] is False

    deleted = client.delete(f"/api/managing-committee/{created['id']}")
    assert deleted.status_code == 200
    assert deleted.json()["data"]["removed_files"] == [created["image"]]
    assert not store.exists(created["image"])

    missing = client.get(f"/api/managing-committee/{created['id']}")
    assert missing.status_code == 404
    assert missing.json()["message"] == "Committee member not found"
