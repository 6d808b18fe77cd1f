"""职员接口集成测试：照片目录、2 MiB 上限、手机号唯一、部门查询与展示开关。"""

from fastapi.testclient import TestClient

PNG_HEADER = b"\x89PNG\r\n\x1a\n"
MIB = 1024 * 1024


def _png(size: int = 512) -> bytes:
    return PNG_HEADER + b"\0" * (size - len(PNG_HEADER))


def _create(client: TestClient, mobile: str, *, photo: bool = True, **extra):
    data = {"name": "Karim Mia", "mobile": mobile, "designation": "Guard", **extra}
    files = {"photo": ("karim.png", _png(), "image/png")} if photo else None
    return client.post("/api/workers", data=data, files=files)


def test_photo_is_stored_in_worker_subdirectory(client: TestClient, store):
    response = _create(client, "01811000001", department="Security")

    assert response.status_code == 201
    body = response.json()["data"]
    assert body["photo"].startswith("/api/uploads/worker-photos/worker-")
    assert body["photo"].endswith(".png")
    assert body["photo_original_name"] == "karim.png"
    assert body["department"] == "Security"
    assert store.exists(body["photo"])


def test_designation_is_required(client: TestClient, store):
    response = client.post(
        "/api/workers",
        data={"name": "No Designation", "mobile": "01811000002"},
        files={"photo": ("a.png", _png(), "image/png")},
    )

    assert response.status_code == 400
    assert list(store.iter_blobs()) == []


def test_photo_over_two_mebibytes_is_rejected(client: TestClient, store):
    response = client.post(
        "/api/workers",
        data={"name": "Big Photo", "mobile": "01811000003", "designation": "Cleaner"},
        files={"photo": ("big.png", _png(2 * MIB + 1), "image/png")},
    )

    assert response.status_code == 400
    assert list(store.iter_blobs()) == []


def test_photo_must_be_an_image(client: TestClient, store):
    response = client.post(
        "/api/workers",
        data={"name": "Pdf Photo", "mobile": "01811000004", "designation": "Cleaner"},
        files={"photo": ("cv.pdf", b"%PDF-1.4", "application/pdf")},
    )

    assert response.status_code == 400
    assert list(store.iter_blobs()) == []


def test_duplicate_mobile(client: TestClient, store):
    first = _create(client, "01811000005").json()["data"]

    response = _create(client, "01811000005")

    assert response.status_code == 400
    assert response.json()["message"] == "A worker with this mobile number already exists"
    assert [blob.path for blob in store.iter_blobs()] == [first["photo"]]


def test_worker_without_photo(client: TestClient):
    response = _create(client, "01811000006", photo=False)

    assert response.status_code == 201
    assert response.json()["data"]["photo"] is None


def test_update_replaces_photo_and_keeps_fields(client: TestClient, store):
    created = _create(client, "01811000007", work_shift="Night").json()["data"]

    response = client.put(
        f"/api/workers/{created['id']}",
        files={"photo": ("new.png", _png(1024), "image/png")},
    )

    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["photo"] != created["photo"]
    assert not store.exists(created["photo"])
    assert store.exists(updated["photo"])
    for field in ("name", "mobile", "designation", "work_shift"):
        assert updated[field] == created[field]


def test_update_to_taken_mobile_keeps_old_photo(client: TestClient, store):
    _create(client, "01811000008")
    second = _create(client, "01811000009").json()["data"]

    response = client.put(
        f"/api/workers/{second['id']}",
        data={"mobile": "01811000008"},
        files={"photo": ("new.png", _png(), "image/png")},
    )

    assert response.status_code == 400
    assert store.exists(second["photo"])
    assert len(list(store.iter_blobs())) == 2


def test_list_by_department_ignores_case(client: TestClient):
    _create(client, "01811000010", photo=False, department="Security")
    _create(client, "01811000011", photo=False, department="Kitchen")

    response = client.get("/api/workers/department/security")

    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 1
    assert body["data"][0]["mobile"] == "01811000010"


def test_toggle_and_delete(client: TestClient, store):
    created = _create(client, "01811000012").json()["data"]
    assert created["is_active"] is True

    toggled = client.patch(f"/api/workers/{created['id']}/toggle")
    assert toggled.status_code == 200
    assert toggled.json()["data"]["is_active"] is False

    deleted = client.delete(f"/api/workers/{created['id']}")
    assert deleted.status_code == 200
    assert deleted.json()["data"]["removed_files"] == [created["photo"]]
    assert not store.exists(created["photo"])
    assert client.get(f"/api/workers/{created['id']}").status_code == 404
