"""教职工接口集成测试：照片替换、照片大小上限、手机号唯一与导出。"""

import io

from fastapi.testclient import TestClient
from openpyxl import load_workbook

PNG_HEADER = b"\x89PNG\r\n\x1a\n"
MIB = 1024 * 1024


def _png(size: int = 512) -> bytes:
    return PNG_HEADER + b"\0" * (size - len(PNG_HEADER))


def _create(client: TestClient, mobile: str, **extra):
    data = {"name": "Rahim Uddin", "mobile": mobile, "designation": "Assistant Teacher", **extra}
    return client.post("/api/teachers", data=data, files={"photo": ("rahim.jpg", _png(), "image/jpeg")})


def test_photo_is_stored_in_teacher_subdirectory(client: TestClient, store):
    response = _create(client, "01711000001")

    assert response.status_code == 201
    photo = response.json()["data"]["photo"]
    assert photo.startswith("/api/uploads/teacher-photos/teacher-")
    assert photo.endswith(".jpg")
    assert store.exists(photo)


def test_update_with_only_photo_replaces_file_and_keeps_fields(client: TestClient, store):
    created = _create(client, "01711000002", session="2024").json()["data"]

    response = client.put(
        f"/api/teachers/{created['id']}",
        files={"photo": ("new.png", _png(1024), "image/png")},
    )

    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["photo"] != created["photo"]
    assert not store.exists(created["photo"])
    assert store.exists(updated["photo"])
    for field in ("name", "mobile", "designation", "session", "staff_type"):
        assert updated[field] == created[field]


def test_photo_over_two_mebibytes_is_rejected(client: TestClient, store):
    response = client.post(
        "/api/teachers",
        data={"name": "Big Photo", "mobile": "01711000003"},
        files={"photo": ("big.png", _png(2 * MIB + 1), "image/png")},
    )

    assert response.status_code == 400
    assert list(store.iter_blobs()) == []


def test_photo_must_be_an_image(client: TestClient, store):
    response = client.post(
        "/api/teachers",
        data={"name": "Pdf Photo", "mobile": "01711000004"},
        files={"photo": ("cv.pdf", b"%PDF-1.4", "application/pdf")},
    )

    assert response.status_code == 400
    assert list(store.iter_blobs()) == []


def test_duplicate_mobile(client: TestClient, store):
    first = _create(client, "01711000005").json()["data"]

    response = _create(client, "01711000005")

    assert response.status_code == 400
    assert [blob.path for blob in store.iter_blobs()] == [first["photo"]]


def test_teacher_without_photo(client: TestClient):
    response = client.post("/api/teachers", data={"name": "No Photo", "mobile": "01711000006"})

    assert response.status_code == 201
    assert response.json()["data"]["photo"] is None


def test_filters_and_deactivation(client: TestClient):
    _create(client, "01711000007", staff_type="Teacher")
    staff = _create(client, "01711000008", staff_type="Staff", position="Deactivated").json()["data"]

    assert staff["is_active"] is False
    staff_list = client.get("/api/teachers", params={"staff_type": "Staff"}).json()
    assert staff_list["count"] == 1
    assert staff_list["data"][0]["mobile"] == "01711000008"
    searched = client.get("/api/teachers", params={"search": "000007"}).json()
    assert [item["mobile"] for item in searched["data"]] == ["01711000007"]


def test_invalid_position_is_rejected(client: TestClient):
    response = client.post(
        "/api/teachers",
        data={"name": "Bad", "mobile": "01711000009", "position": "Retired"},
    )

    assert response.status_code == 400


def test_export_xlsx(client: TestClient):
    _create(client, "01711000010")

    response = client.get("/api/teachers/export")

    assert response.status_code == 200
    assert "attachment; filename=staff-" in response.headers["content-disposition"]
    workbook = load_workbook(io.BytesIO(response.content))
    rows = list(workbook.active.iter_rows(values_only=True))
    assert rows[0][:3] == ("ID", "Name", "Mobile")
    assert rows[1][2] == "01711000010"


def test_delete_teacher_removes_photo(client: TestClient, store):
    created = _create(client, "01711000011").json()["data"]

    response = client.delete(f"/api/teachers/{created['id']}")

    assert response.status_code == 200
    assert not store.exists(created["photo"])
