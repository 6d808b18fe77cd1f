"""通知公告接口集成测试：保留原名、分页与附件单独替换。"""

import re

from fastapi.testclient import TestClient


def _create(client: TestClient, title: str, filename: str = "Exam Routine.pdf"):
    return client.post(
        "/api/circulars",
        data={"title": title, "category": "exam"},
        files={"file": (filename, b"%PDF-1.4 routine", "application/pdf")},
    )


def test_file_keeps_sanitized_original_name(client: TestClient, store):
    response = _create(client, "Half-yearly exam")

    assert response.status_code == 201
    circular = response.json()["data"]
    assert re.fullmatch(r"/api/uploads/circulars/circular-\d+-\d+-Exam_Routine\.pdf", circular["file"])
    assert circular["file_extension"] == "pdf"
    assert circular["file_original_name"] == "Exam Routine.pdf"
    assert store.exists(circular["file"])


def test_pagination_and_search(client: TestClient):
    for index in range(3):
        _create(client, f"Notice {index}")
    _create(client, "Holiday list")

    page = client.get("/api/circulars", params={"page": 1, "limit": 2}).json()
    searched = client.get("/api/circulars", params={"search": "holiday"}).json()

    assert len(page["data"]) == 2
    assert page["pagination"] == {"page": 1, "limit": 2, "total": 4, "pages": 2}
    assert [item["title"] for item in searched["data"]] == ["Holiday list"]


def test_metadata_update_keeps_file(client: TestClient, store):
    created = _create(client, "Sports day").json()["data"]

    response = client.put(f"/api/circulars/{created['id']}", data={"title": "Annual sports day"})

    assert response.status_code == 200
    assert response.json()["data"]["file"] == created["file"]
    assert store.exists(created["file"])


def test_replace_file(client: TestClient, store):
    created = _create(client, "Admission").json()["data"]

    response = client.put(
        f"/api/circulars/{created['id']}/file",
        files={"file": ("admission form.docx", b"PK\x03\x04", "application/octet-stream")},
    )

    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["file"].endswith("-admission_form.docx")
    assert updated["file_extension"] == "docx"
    assert not store.exists(created["file"])
    assert store.exists(updated["file"])


def test_replace_file_requires_upload(client: TestClient):
    created = _create(client, "Empty replace").json()["data"]

    assert client.put(f"/api/circulars/{created['id']}/file").status_code == 400


def test_view_and_download_counters(client: TestClient):
    created = _create(client, "Counters").json()["data"]

    client.patch(f"/api/circulars/{created['id']}/view")
    views = client.patch(f"/api/circulars/{created['id']}/view").json()["data"]["views"]
    downloads = client.patch(f"/api/circulars/{created['id']}/download").json()["data"]["downloads"]

    assert views == 2
    assert downloads == 1
    assert client.patch("/api/circulars/999/view").status_code == 404


def test_delete_circular(client: TestClient, store):
    created = _create(client, "To delete").json()["data"]

    assert client.delete(f"/api/circulars/{created['id']}").status_code == 200
    assert not store.exists(created["file"])
