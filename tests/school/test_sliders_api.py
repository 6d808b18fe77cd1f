"""轮播接口集成测试：多图字段。"""

from fastapi.testclient import TestClient

PNG = b"\x89PNG\r\n\x1a\n" + b"\0" * 128


def _images(count: int):
    return [("images", (f"slide-{index}.png", PNG, "image/png")) for index in range(count)]


def test_slider_without_images_is_rejected(client: TestClient, store):
    response = client.post("/api/sliders", data={"title": "Empty"})

    assert response.status_code == 400
    assert list(store.iter_blobs()) == []


def test_slider_with_too_many_images_is_rejected(client: TestClient, store):
    response = client.post("/api/sliders", data={"title": "Crowded"}, files=_images(11))

    assert response.status_code == 400
    assert list(store.iter_blobs()) == []


def test_slider_create_and_delete(client: TestClient, store):
    response = client.post("/api/sliders", data={"title": "Campus", "speed": "5000"}, files=_images(2))

    assert response.status_code == 201
    slider = response.json()["data"]
    paths = [image["path"] for image in slider["images"]]
    assert len(paths) == 2
    assert [image["original_name"] for image in slider["images"]] == ["slide-0.png", "slide-1.png"]
    assert slider["speed"] == 5000
    assert all(store.exists(path) for path in paths)

    deleted = client.delete(f"/api/sliders/{slider['id']}")

    assert deleted.status_code == 200
    assert not any(store.exists(path) for path in paths)


def test_toggle_autoplay(client: TestClient):
    slider = client.post("/api/sliders", data={"title": "Auto"}, files=_images(1)).json()["data"]
    assert slider["auto_play"] is True

    response = client.patch(f"/api/sliders/{slider['id']}/toggle-autoplay")

    assert response.json()["data"]["auto_play"] is False
