"""相册接口集成测试：一张照片一条记录。"""

from fastapi.testclient import TestClient

PNG = b"\x89PNG\r\n\x1a\n" + b"\0" * 128


def test_upload_and_delete_photo(client: TestClient, store):
    response = client.post(
        "/api/gallery/photos",
        data={"caption": "Prize giving"},
        files=[("photos", ("a.png", PNG, "image/png")), ("photos", ("b.png", PNG, "image/png"))],
    )

    assert response.status_code == 201
    photos = response.json()["data"]
    assert len(photos) == 2
    assert {photo["caption"] for photo in photos} == {"Prize giving"}
    target = photos[0]
    assert store.exists(target["image"])

    deleted = client.delete(f"/api/gallery/photos/{target['id']}")

    assert deleted.status_code == 200
    assert not store.exists(target["image"])
    remaining = client.get("/api/gallery/photos").json()["data"]
    assert [photo["id"] for photo in remaining] == [photos[1]["id"]]


def test_batch_with_one_bad_file_writes_nothing(client: TestClient, store):
    response = client.post(
        "/api/gallery/photos",
        files=[
            ("photos", ("ok.png", PNG, "image/png")),
            ("photos", ("bad.exe", b"MZ", "application/x-msdownload")),
        ],
    )

    assert response.status_code == 400
    assert list(store.iter_blobs()) == []
    assert client.get("/api/gallery/photos").json()["count"] == 0


def test_upload_requires_photos(client: TestClient):
    assert client.post("/api/gallery/photos", data={"caption": "none"}).status_code == 400


def test_toggle_photo(client: TestClient):
    photo = client.post(
        "/api/gallery/photos",
        files=[("photos", ("a.png", PNG, "image/png"))],
    ).json()["data"][0]

    response = client.patch(f"/api/gallery/photos/{photo['id']}/toggle")

    assert response.json()["data"]["is_active"] is False
