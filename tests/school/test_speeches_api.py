"""致辞接口集成测试：富文本内嵌图片随正文一起受管。"""

from fastapi.testclient import TestClient

PNG = b"\x89PNG\r\n\x1a\n" + b"\0" * 64


def _editor_image(client: TestClient, name: str = "inline.png") -> str:
    response = client.post("/api/speeches/upload-editor-image", files={"image": (name, PNG, "image/png")})
    assert response.status_code == 201
    return response.json()["data"]["url"]


def test_editor_image_upload_returns_url(client: TestClient, store):
    url = _editor_image(client)

    assert url.startswith("/api/uploads/editor-")
    assert store.exists(url)


def test_editor_image_rejects_non_image(client: TestClient, store):
    response = client.post(
        "/api/speeches/upload-editor-image",
        files={"image": ("notes.txt", b"plain", "text/plain")},
    )

    assert response.status_code == 400
    assert list(store.iter_blobs()) == []


def test_delete_removes_image_and_embedded_files(client: TestClient, store):
    inline = _editor_image(client)
    response = client.post(
        "/api/speeches",
        data={"type": "chairman", "body": f'<p>Welcome</p><img src="{inline}">'},
        files={"image": ("portrait.png", PNG, "image/png")},
    )
    assert response.status_code == 201
    speech = response.json()["data"]

    deleted = client.delete(f"/api/speeches/{speech['id']}")

    assert deleted.status_code == 200
    assert set(deleted.json()["data"]["removed_files"]) == {speech["image"], inline}
    assert not store.exists(speech["image"])
    assert not store.exists(inline)


def test_body_update_releases_dropped_images(client: TestClient, store):
    kept = _editor_image(client, "kept.png")
    dropped = _editor_image(client, "dropped.png")
    speech = client.post(
        "/api/speeches",
        data={"type": "headmaster", "body": f'<img src="{kept}"><img src="{dropped}">'},
    ).json()["data"]

    response = client.put(f"/api/speeches/{speech['id']}", data={"body": f'<p>Short</p><img src="{kept}">'})

    assert response.status_code == 200
    assert store.exists(kept)
    assert not store.exists(dropped)


def test_duplicate_type_is_rejected(client: TestClient):
    client.post("/api/speeches", data={"type": "principal", "body": "<p>One</p>"})

    response = client.post("/api/speeches", data={"type": "principal", "body": "<p>Two</p>"})

    assert response.status_code == 400
    assert "principal" in response.json()["message"]


def test_body_references_to_other_resources_are_not_deleted(client: TestClient, store):
    default_logo = store.put(b"default", "default-branch-logo.png")
    banner = client.post(
        "/api/banners",
        data={"title": "Admissions"},
        files={"image": ("banner.png", PNG, "image/png")},
    ).json()["data"]
    branch = client.post("/api/branches", data={"name": "Main Campus"}).json()["data"]
    assert branch["logo"] == default_logo
    speech = client.post(
        "/api/speeches",
        data={"type": "secretary", "body": f'<img src="{banner["image"]}"><img src="{default_logo}">'},
    ).json()["data"]

    client.put(f"/api/speeches/{speech['id']}", data={"body": f'<img src="{default_logo}">'})
    deleted = client.delete(f"/api/speeches/{speech['id']}")

    assert deleted.status_code == 200
    assert deleted.json()["data"]["removed_files"] == []
    assert store.exists(banner["image"])
    assert store.exists(default_logo)
    assert [item["image"] for item in client.get("/api/banners").json()["data"]] == [banner["image"]]


def test_editor_image_shared_by_two_speeches(client: TestClient, store):
    inline = _editor_image(client)
    body = f'<img src="{inline}">'
    first = client.post("/api/speeches", data={"type": "chairman", "body": body}).json()["data"]
    second = client.post("/api/speeches", data={"type": "principal", "body": body}).json()["data"]

    client.delete(f"/api/speeches/{first['id']}")
    assert store.exists(inline)

    client.delete(f"/api/speeches/{second['id']}")
    assert not store.exists(inline)
