"""孤儿文件清理接口集成测试。"""

from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient

from app.packages.school.services.orphan_sweep import find_orphans

PNG = b"\x89PNG\r\n\x1a\n" + b"\0" * 64


def _seed(client: TestClient, store):
    banner = client.post(
        "/api/banners",
        data={"title": "Kept"},
        files={"image": ("kept.png", PNG, "image/png")},
    ).json()["data"]
    orphan = store.put(b"stray", "stray.png")
    default = store.put(b"default", "default-branch-logo.png")
    return banner["image"], orphan, default


def test_list_orphans(client: TestClient, store):
    referenced, orphan, _default = _seed(client, store)

    response = client.get("/api/maintenance/orphan-blobs", params={"grace_seconds": 0})

    assert response.status_code == 200
    paths = [item["path"] for item in response.json()["data"]]
    assert paths == [orphan]
    assert referenced not in paths


def test_sweep_removes_only_orphans(client: TestClient, store):
    referenced, orphan, default = _seed(client, store)

    response = client.delete("/api/maintenance/orphan-blobs", params={"grace_seconds": 0})

    assert response.json()["data"] == {"removed": [orphan], "failed": []}
    assert not store.exists(orphan)
    assert store.exists(referenced)
    assert store.exists(default)


def test_grace_period_protects_recent_files(db_session_fixture, store):
    store.put(b"fresh", "fresh.png")
    earlier = datetime.now(timezone.utc) - timedelta(minutes=5)

    assert find_orphans(db_session_fixture, store, grace_seconds=60, now=earlier) == []
    assert len(find_orphans(db_session_fixture, store, grace_seconds=0)) == 1


def test_negative_grace_is_rejected(client: TestClient):
    assert client.get("/api/maintenance/orphan-blobs", params={"grace_seconds": -1}).status_code == 400
