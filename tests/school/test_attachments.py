"""附件生命周期管理单元测试：内存 Blob Store + 可注入失败的 CRUD 替身。"""

from typing import Any, Dict, Iterator, Optional

import pytest

from app.packages.school.core.exceptions import (
    BlobExistsError,
    ConflictError,
    MissingRequiredFile,
    NotFoundError,
    StorageError,
)
from app.packages.school.services.attachments import AttachmentField, AttachmentManager, default_asset_paths
from app.packages.school.services.blob_store import BlobInfo, BlobStore
from app.packages.school.services.upload_gate import IMAGE_POLICY, IncomingFile

DEFAULT_LOGO = "/api/uploads/default-logo.png"


class MemoryBlobStore(BlobStore):
    def __init__(self) -> None:
        self.url_prefix = "/api/uploads"
        self.blobs: Dict[str, bytes] = {}
        self.collisions = 0
        self.undeletable: set[str] = set()

    def put(self, content: bytes, name: str, *, subdir: str = "") -> str:
        if self.collisions:
            self.collisions -= 1
            raise BlobExistsError(name)
        path = self.public_path(name, subdir)
        if path in self.blobs:
            raise BlobExistsError(name)
        self.blobs[path] = content
        return path

    def delete(self, public_path: str) -> bool:
        if public_path in self.undeletable:
            raise StorageError("disk unavailable")
        return self.blobs.pop(public_path, None) is not None

    def exists(self, public_path: str) -> bool:
        return public_path in self.blobs

    def iter_blobs(self) -> Iterator[BlobInfo]:
        return iter(())


class Record:
    id: Optional[int] = None
    title: Optional[str] = None
    body: Optional[str] = None
    image: Optional[str] = None
    image_original_name: Optional[str] = None
    image_size: Optional[int] = None
    image_mime_type: Optional[str] = None
    logo: Optional[str] = None

    def __init__(self, **values: Any) -> None:
        for key, value in values.items():
            setattr(self, key, value)


class FakeSession:
    def __init__(self) -> None:
        self.rollbacks = 0

    def rollback(self) -> None:
        self.rollbacks += 1

    def commit(self) -> None:
        pass

    def refresh(self, _record) -> None:
        pass


class FakeCRUD:
    model = Record

    def __init__(self) -> None:
        self.rows: Dict[int, Record] = {}
        self.fail_with: Optional[Exception] = None

    def _maybe_fail(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    def create(self, db, obj_in: Dict[str, Any], *, auto_commit: bool = True) -> Record:
        self._maybe_fail()
        record = Record(id=len(self.rows) + 1, **obj_in)
        self.rows[record.id] = record
        return record

    def get_for_update(self, db, id: int) -> Optional[Record]:
        return self.rows.get(id)

    def save(self, db, record: Record, *, auto_commit: bool = True) -> Record:
        self._maybe_fail()
        return record

    def hard_delete(self, db, record: Record, *, auto_commit: bool = True) -> None:
        self.rows.pop(record.id, None)

    def embeds(self, db, columns, text: str, *, exclude_id=None) -> bool:
        return any(
            text in (getattr(row, column, None) or "")
            for row in self.rows.values()
            if row.id != exclude_id
            for column in columns
        )


def _image(name: str = "pic.png", content: bytes = b"png-bytes") -> IncomingFile:
    return IncomingFile(field="image", original_name=name, content_type="image/png", content=content)


@pytest.fixture()
def memory_store() -> MemoryBlobStore:
    return MemoryBlobStore()


@pytest.fixture()
def crud() -> FakeCRUD:
    return FakeCRUD()


@pytest.fixture()
def manager(crud) -> AttachmentManager:
    return AttachmentManager(
        crud,
        [AttachmentField("image", IMAGE_POLICY, required=True)],
        label="Item",
        rich_text_fields=("body",),
    )


def test_create_binds_blob_and_metadata(manager, crud, memory_store):
    record = manager.create(FakeSession(), memory_store, {"title": "t"}, {"image": [_image()]})

    assert memory_store.exists(record.image)
    assert record.image.startswith("/api/uploads/image-")
    assert record.image.endswith(".png")
    assert record.image_original_name == "pic.png"
    assert record.image_size == len(b"png-bytes")
    assert record.image_mime_type == "image/png"


def test_create_failure_removes_written_blob(manager, crud, memory_store):
    crud.fail_with = RuntimeError("insert failed")
    db = FakeSession()

    with pytest.raises(RuntimeError):
        manager.create(db, memory_store, {"title": "t"}, {"image": [_image()]})

    assert memory_store.blobs == {}
    assert db.rollbacks == 1


def test_failed_check_prevents_any_write(manager, memory_store):
    def duplicate(db, existing):
        raise ConflictError("duplicate title")

    with pytest.raises(ConflictError):
        manager.create(FakeSession(), memory_store, {"title": "t"}, {"image": [_image()]}, check=duplicate)

    assert memory_store.blobs == {}


def test_missing_required_file(manager, memory_store):
    with pytest.raises(MissingRequiredFile):
        manager.prepare({})
    with pytest.raises(MissingRequiredFile):
        manager.create(FakeSession(), memory_store, {"title": "t"}, {})

    assert memory_store.blobs == {}


def test_prepare_allows_missing_file_on_update(manager):
    assert manager.prepare({}, enforce_required=False) == {}


def test_name_collision_is_retried(manager, memory_store):
    memory_store.collisions = 2

    record = manager.create(FakeSession(), memory_store, {"title": "t"}, {"image": [_image()]})

    assert memory_store.exists(record.image)


def test_update_missing_record_writes_nothing(manager, memory_store):
    with pytest.raises(NotFoundError):
        manager.update(FakeSession(), memory_store, 404, {"title": "x"}, {"image": [_image()]})

    assert memory_store.blobs == {}


def test_update_replaces_old_blob(manager, memory_store):
    db = FakeSession()
    record = manager.create(db, memory_store, {"title": "t"}, {"image": [_image("old.png")]})
    old_path = record.image

    updated = manager.update(db, memory_store, record.id, {}, {"image": [_image("new.png", b"new")]})

    assert updated.image != old_path
    assert not memory_store.exists(old_path)
    assert memory_store.blobs[updated.image] == b"new"
    assert updated.image_original_name == "new.png"


def test_update_without_file_keeps_attachment(manager, memory_store):
    db = FakeSession()
    record = manager.create(db, memory_store, {"title": "t"}, {"image": [_image()]})
    path = record.image

    updated = manager.update(db, memory_store, record.id, {"title": "renamed"}, {})

    assert updated.title == "renamed"
    assert updated.image == path
    assert memory_store.exists(path)


def test_update_failure_keeps_old_blob_and_drops_new(manager, crud, memory_store):
    db = FakeSession()
    record = manager.create(db, memory_store, {"title": "t"}, {"image": [_image()]})
    old_path = record.image
    crud.fail_with = RuntimeError("commit failed")

    with pytest.raises(RuntimeError):
        manager.update(db, memory_store, record.id, {}, {"image": [_image("new.png", b"new")]})

    assert list(memory_store.blobs) == [old_path]


def test_update_releases_images_removed_from_body(manager, memory_store):
    db = FakeSession()
    kept = memory_store.put(b"k", "editor-1.png")
    dropped = memory_store.put(b"d", "editor-2.png")
    body = f'<img src="{kept}"><img src="{dropped}">'
    record = manager.create(db, memory_store, {"body": body}, {"image": [_image()]})

    manager.update(db, memory_store, record.id, {"body": f'<img src="{kept}">'}, {})

    assert memory_store.exists(kept)
    assert not memory_store.exists(dropped)


def test_delete_removes_field_and_embedded_blobs(manager, crud, memory_store):
    db = FakeSession()
    embedded = memory_store.put(b"e", "editor-3.png")
    body = f'<p>hi</p><img src="{embedded}"><img src="https://example.com/keep.png">'
    record = manager.create(db, memory_store, {"body": body}, {"image": [_image()]})
    field_path = record.image

    paths = manager.delete(db, memory_store, record.id)

    assert set(paths) == {field_path, embedded}
    assert memory_store.blobs == {}
    assert record.id not in crud.rows


def test_delete_continues_after_storage_error(manager, crud, memory_store):
    db = FakeSession()
    embedded = memory_store.put(b"e", "editor-4.png")
    record = manager.create(db, memory_store, {"body": f'<img src="{embedded}">'}, {"image": [_image()]})
    memory_store.undeletable.add(record.image)

    manager.delete(db, memory_store, record.id)

    assert not memory_store.exists(embedded)
    assert record.id not in crud.rows


def test_delete_reports_only_removed_files(manager, memory_store):
    db = FakeSession()
    embedded = memory_store.put(b"e", "editor-5.png")
    record = manager.create(db, memory_store, {"body": f'<img src="{embedded}">'}, {"image": [_image()]})
    memory_store.undeletable.add(record.image)

    removed = manager.delete(db, memory_store, record.id)

    assert removed == [embedded]


def test_body_only_owns_editor_images(manager, crud, memory_store):
    db = FakeSession()
    foreign = memory_store.put(b"f", "banner-1.png")
    record = manager.create(db, memory_store, {"body": f'<img src="{foreign}">'}, {"image": [_image()]})

    manager.update(db, memory_store, record.id, {"body": "<p>none</p>"}, {})
    assert memory_store.exists(foreign)

    manager.update(db, memory_store, record.id, {"body": f'<img src="{foreign}">'}, {})
    manager.delete(db, memory_store, record.id)
    assert memory_store.exists(foreign)


def test_image_shared_by_two_bodies_survives(manager, memory_store):
    db = FakeSession()
    shared = memory_store.put(b"s", "editor-6.png")
    body = f'<img src="{shared}">'
    first = manager.create(db, memory_store, {"body": body}, {"image": [_image()]})
    second = manager.create(db, memory_store, {"body": body}, {"image": [_image()]})

    manager.update(db, memory_store, first.id, {"body": "<p>edited</p>"}, {})
    assert memory_store.exists(shared)

    manager.delete(db, memory_store, second.id)
    assert not memory_store.exists(shared)


def test_defaults_of_other_resources_are_protected(crud, manager, memory_store):
    AttachmentManager(
        FakeCRUD(),
        [AttachmentField("logo", IMAGE_POLICY, default_path=DEFAULT_LOGO)],
        label="Branch",
    )
    memory_store.blobs[DEFAULT_LOGO] = b"default"
    record = crud.create(None, {"image": DEFAULT_LOGO})

    manager.delete(FakeSession(), memory_store, record.id)

    assert memory_store.exists(DEFAULT_LOGO)
    assert DEFAULT_LOGO in default_asset_paths()


def test_delete_missing_record(manager, memory_store):
    with pytest.raises(NotFoundError):
        manager.delete(FakeSession(), memory_store, 99)


def test_default_asset_is_never_deleted(crud, memory_store):
    manager = AttachmentManager(
        crud,
        [AttachmentField("logo", IMAGE_POLICY, default_path=DEFAULT_LOGO)],
        label="Branch",
    )
    memory_store.blobs[DEFAULT_LOGO] = b"default"
    db = FakeSession()

    record = manager.create(db, memory_store, {"title": "b"}, {})
    assert record.logo == DEFAULT_LOGO

    manager.update(db, memory_store, record.id, {}, {"logo": [_image("logo.png")]})
    assert memory_store.exists(DEFAULT_LOGO)

    other = manager.create(db, memory_store, {"title": "c"}, {})
    manager.delete(db, memory_store, other.id)
    assert memory_store.exists(DEFAULT_LOGO)


def test_external_urls_are_left_alone(crud, memory_store):
    manager = AttachmentManager(crud, [AttachmentField("image", IMAGE_POLICY)], label="Item")
    record = crud.create(None, {"image": "https://cdn.example.com/a.png"})

    manager.update(FakeSession(), memory_store, record.id, {}, {"image": [_image()]})

    assert crud.rows[record.id].image.startswith("/api/uploads/")


def test_create_each_is_all_or_nothing(crud, memory_store):
    manager = AttachmentManager(crud, [AttachmentField("image", IMAGE_POLICY, prefix="gallery")], label="Photo")
    calls = {"count": 0}
    original_create = crud.create

    def flaky_create(db, obj_in, *, auto_commit=True):
        calls["count"] += 1
        if calls["count"] == 2:
            raise RuntimeError("second insert failed")
        return original_create(db, obj_in, auto_commit=auto_commit)

    crud.create = flaky_create

    with pytest.raises(RuntimeError):
        manager.create_each(
            FakeSession(),
            memory_store,
            {"caption": ""},
            {"image": [_image("a.png"), _image("b.png")]},
            field_name="image",
        )

    assert memory_store.blobs == {}


def test_multiple_field_stores_list_of_refs(crud, memory_store):
    manager = AttachmentManager(
        crud,
        [AttachmentField("images", IMAGE_POLICY, required=True, multiple=True)],
        label="Slider",
    )
    record = manager.create(
        FakeSession(), memory_store, {"title": "s"}, {"images": [_image("a.png"), _image("b.png")]}
    )

    assert [item["original_name"] for item in record.images] == ["a.png", "b.png"]
    assert manager.referenced_paths(record) == [item["path"] for item in record.images]
