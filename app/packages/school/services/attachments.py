"""附件生命周期管理：把数据库记录的附件字段与上传目录中的文件绑定在一起。

单个附件字段的状态流转：
``Absent -> Pending(已落盘、未提交) -> Bound(记录已引用) -> Superseded(被新文件取代) -> Deleted``

约定：
- 所有校验（文件闸门、表单、唯一性）都在写盘之前完成；
- 写盘之后任何一步失败，都会删除本次请求写入的全部文件（补偿），再把异常抛出；
- 更新时只有在记录提交成功之后才删除被取代的旧文件；
- 只删除位于受管前缀下、且不是默认占位图的路径（占位图在全局登记，跨资源生效）；
- 富文本正文中的图片只有编辑器上传的（``editor-`` 前缀）才归该记录所有，
  且仍被同类其它记录正文引用时保留。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.packages.school.core.config import get_settings
from app.packages.school.core.constants import EDITOR_IMAGE_PREFIX
from app.packages.school.core.exceptions import (
    BlobExistsError,
    ConflictError,
    MissingRequiredFile,
    NotFoundError,
    StorageError,
)
from app.packages.school.core.logger import get_logger
from app.packages.school.crud.base import CRUDBase
from app.packages.school.services.blob_store import BlobStore
from app.packages.school.services.naming import generate_name
from app.packages.school.services.upload_gate import (
    GENERAL_POLICY,
    IncomingFile,
    UploadPolicy,
    inspect,
    inspect_many,
    is_present,
)
from app.packages.school.utils.html_refs import extract_managed_image_refs

logger = get_logger("attachments")

_NAME_ATTEMPTS = 3

# check(db, existing_record_or_None)：写盘前执行的业务校验，例如唯一性
Check = Callable[[Session, Optional[Any]], None]

# 全部资源的默认占位路径，任何管理器都不得删除
_DEFAULT_ASSETS: set[str] = set()


def default_asset_paths() -> frozenset[str]:
    return frozenset(_DEFAULT_ASSETS)


@dataclass(frozen=True)
class AttachmentRef:
    """一条记录的一个附件：公开路径及其元数据。"""

    storage_path: str
    original_name: str
    size_bytes: int
    mime_type: str

    def as_dict(self) -> dict[str, Any]:
        return {
            "path": self.storage_path,
            "original_name": self.original_name,
            "size": self.size_bytes,
            "mime_type": self.mime_type,
        }


@dataclass(frozen=True)
class AttachmentField:
    """描述资源上的一个附件字段。

    ``multiple`` 的字段以 JSON 列表保存多个附件；``default_path`` 为未上传时写入的
    占位路径，该路径永远不会被删除。
    """

    name: str
    policy: UploadPolicy = GENERAL_POLICY
    required: bool = False
    multiple: bool = False
    subdir: str = ""
    prefix: Optional[str] = None
    keep_original_name: bool = False
    default_path: Optional[str] = None
    max_files: Optional[int] = None

    @property
    def name_prefix(self) -> str:
        return self.prefix or self.name


class AttachmentManager:
    """按资源参数化的附件生命周期管理器，替代在每个路由里复制同一套补偿逻辑。"""

    def __init__(
        self,
        crud: CRUDBase,
        fields: Sequence[AttachmentField],
        *,
        label: str,
        rich_text_fields: Sequence[str] = (),
    ) -> None:
        self.crud = crud
        self.fields = tuple(fields)
        self.label = label
        self.rich_text_fields = tuple(rich_text_fields)
        self.protected_paths = frozenset(f.default_path for f in self.fields if f.default_path)
        _DEFAULT_ASSETS.update(self.protected_paths)

    def field(self, name: str) -> AttachmentField:
        for item in self.fields:
            if item.name == name:
                return item
        raise KeyError(name)

    # ------------------------------------------------------------------
    # 写盘前：闸门校验
    # ------------------------------------------------------------------

    def prepare(self, uploads: Mapping[str, Any], *, enforce_required: bool = True) -> dict[str, list[IncomingFile]]:
        """校验所有上传文件并读入内存，不产生任何磁盘副作用。

        ``enforce_required`` 在更新场景下关闭：未重新上传即保留原附件。
        """
        files: dict[str, list[IncomingFile]] = {}
        for field in self.fields:
            raw = uploads.get(field.name)
            if field.multiple:
                incoming = inspect_many(raw, field.policy, field.name, max_files=field.max_files)
            else:
                incoming = [inspect(raw, field.policy, field.name)] if is_present(raw) else []
            if not incoming:
                if enforce_required and field.required:
                    raise MissingRequiredFile(f"{self.label} requires a '{field.name}' file")
                continue
            files[field.name] = incoming
        return files

    # ------------------------------------------------------------------
    # 生命周期操作
    # ------------------------------------------------------------------

    def create(
        self,
        db: Session,
        store: BlobStore,
        values: Mapping[str, Any],
        files: Mapping[str, list[IncomingFile]],
        *,
        check: Optional[Check] = None,
    ):
        """写入文件并插入记录；插入失败时删除本次写入的文件。"""
        self._require(files)
        if check is not None:
            check(db, None)

        written: list[str] = []
        try:
            payload = dict(values)
            for field in self.fields:
                refs = [self._write(store, field, item, written) for item in files.get(field.name, [])]
                if refs:
                    payload.update(self._columns(field, refs))
                elif field.default_path and not field.multiple:
                    payload.setdefault(field.name, field.default_path)
            return self.crud.create(db, payload)
        except IntegrityError as exc:
            db.rollback()
            self._compensate(store, written, reason="unique constraint violated")
            raise ConflictError(f"{self.label} conflicts with an existing record") from exc
        except Exception:
            db.rollback()
            self._compensate(store, written, reason="create failed")
            raise

    def create_each(
        self,
        db: Session,
        store: BlobStore,
        values: Mapping[str, Any],
        files: Mapping[str, list[IncomingFile]],
        *,
        field_name: str,
    ) -> list:
        """一个文件一条记录（相册批量上传），全部成功才提交，否则整体补偿。"""
        field = self.field(field_name)
        incoming = files.get(field_name) or []
        if not incoming:
            raise MissingRequiredFile(f"{self.label} requires at least one '{field_name}' file")

        written: list[str] = []
        try:
            records = []
            for item in incoming:
                ref = self._write(store, field, item, written)
                payload = {**values, **self._scalar_columns(field.name, ref)}
                records.append(self.crud.create(db, payload, auto_commit=False))
            db.commit()
            for record in records:
                db.refresh(record)
            return records
        except IntegrityError as exc:
            db.rollback()
            self._compensate(store, written, reason="unique constraint violated")
            raise ConflictError(f"{self.label} conflicts with an existing record") from exc
        except Exception:
            db.rollback()
            self._compensate(store, written, reason="batch create failed")
            raise

    def update(
        self,
        db: Session,
        store: BlobStore,
        record_id: Any,
        values: Mapping[str, Any],
        files: Mapping[str, list[IncomingFile]],
        *,
        check: Optional[Check] = None,
    ):
        """部分更新：未上传新文件的附件字段保持不变；新文件取代旧文件后删除旧文件。"""
        record = self.crud.get_for_update(db, record_id)
        if record is None:
            db.rollback()
            raise NotFoundError(f"{self.label} not found")

        written: list[str] = []
        superseded: list[str] = []
        dropped: list[str] = []
        try:
            if check is not None:
                check(db, record)
            embedded_before = self._rich_text_paths(record, store.url_prefix)
            for key, value in values.items():
                setattr(record, key, value)
            embedded_after = set(self._rich_text_paths(record, store.url_prefix))
            dropped = [path for path in embedded_before if path not in embedded_after]
            for field in self.fields:
                incoming = files.get(field.name)
                if not incoming:
                    continue
                superseded.extend(self._field_paths(record, field))
                refs = [self._write(store, field, item, written) for item in incoming]
                for key, value in self._columns(field, refs).items():
                    setattr(record, key, value)
            saved = self.crud.save(db, record)
        except IntegrityError as exc:
            db.rollback()
            self._compensate(store, written, reason="unique constraint violated")
            raise ConflictError(f"{self.label} conflicts with an existing record") from exc
        except Exception:
            db.rollback()
            self._compensate(store, written, reason="update failed")
            raise

        # 正文中被移除的内嵌图片在保存成功后一并释放
        superseded.extend(self._owned_embedded(db, saved, dropped))
        self._release_all(store, [path for path in superseded if path not in written])
        return saved

    def delete(self, db: Session, store: BlobStore, record_id: Any) -> list[str]:
        """先收集本记录拥有的路径，再删除文件，最后删除记录；返回实际删除的路径。

        单个文件删除失败只记录日志，其余文件与记录照常删除。
        """
        record = self.crud.get_for_update(db, record_id)
        if record is None:
            db.rollback()
            raise NotFoundError(f"{self.label} not found")

        paths: list[str] = []
        for field in self.fields:
            paths.extend(self._field_paths(record, field))
        paths.extend(self._owned_embedded(db, record, self._rich_text_paths(record, store.url_prefix)))
        removed, failed = self._release_all(store, list(dict.fromkeys(paths)))
        if failed:
            logger.error("%s %s deleted with %d undeletable file(s): %s", self.label, record_id, len(failed), failed)
        self.crud.hard_delete(db, record)
        return removed

    def stage(self, store: BlobStore, field: AttachmentField, item: IncomingFile) -> AttachmentRef:
        """写入一个暂不绑定记录的文件（富文本编辑器内嵌图片），由孤儿清理兜底。"""
        return self._write(store, field, item, [])

    # ------------------------------------------------------------------
    # 引用收集
    # ------------------------------------------------------------------

    def referenced_paths(self, record: Any, storage_prefix: Optional[str] = None) -> list[str]:
        """记录持有的全部附件路径（含富文本正文中的受管图片），去重并保持顺序。"""
        prefix = storage_prefix or get_settings().upload_url_root
        paths: list[str] = []
        for field in self.fields:
            paths.extend(self._field_paths(record, field))
        paths.extend(self._rich_text_paths(record, prefix))
        return list(dict.fromkeys(paths))

    def _rich_text_paths(self, record: Any, prefix: str) -> list[str]:
        paths: list[str] = []
        for attr in self.rich_text_fields:
            paths.extend(extract_managed_image_refs(getattr(record, attr, None), prefix))
        return paths

    def _owned_embedded(self, db: Session, record: Any, paths: Iterable[str]) -> list[str]:
        """正文引用中归本记录所有的部分：编辑器上传的图片，且同类其它记录正文未再引用。

        正文可以引用其它资源的附件或占位图，这些文件不随正文删除。
        """
        owned: list[str] = []
        for path in paths:
            if not path.rsplit("/", 1)[-1].startswith(f"{EDITOR_IMAGE_PREFIX}-"):
                continue
            if self.crud.embeds(db, self.rich_text_fields, path, exclude_id=getattr(record, "id", None)):
                logger.info("%s image %s is still embedded elsewhere, keeping it", self.label, path)
                continue
            owned.append(path)
        return owned

    def is_releasable(self, store: BlobStore, path: Optional[str]) -> bool:
        """仅删除受管前缀下的非默认路径，外链与任何资源的占位图一律保留。"""
        return bool(path) and store.owns(path) and path not in _DEFAULT_ASSETS

    # ------------------------------------------------------------------
    # 内部工具
    # ------------------------------------------------------------------

    def _require(self, files: Mapping[str, list[IncomingFile]]) -> None:
        for field in self.fields:
            if field.required and not files.get(field.name):
                raise MissingRequiredFile(f"{self.label} requires a '{field.name}' file")

    def _write(
        self,
        store: BlobStore,
        field: AttachmentField,
        item: IncomingFile,
        written: list[str],
    ) -> AttachmentRef:
        for _ in range(_NAME_ATTEMPTS):
            name = generate_name(field.name_prefix, item.original_name, keep_original=field.keep_original_name)
            try:
                path = store.put(item.content, name, subdir=field.subdir)
            except BlobExistsError:
                logger.warning("Upload name collision on %s, regenerating", name)
                continue
            written.append(path)
            return AttachmentRef(
                storage_path=path,
                original_name=item.original_name,
                size_bytes=item.size,
                mime_type=item.content_type,
            )
        raise StorageError("Could not allocate a unique name for the uploaded file")

    def _columns(self, field: AttachmentField, refs: Sequence[AttachmentRef]) -> dict[str, Any]:
        if field.multiple:
            return {field.name: [ref.as_dict() for ref in refs]}
        return self._scalar_columns(field.name, refs[0])

    def _scalar_columns(self, name: str, ref: AttachmentRef) -> dict[str, Any]:
        columns: dict[str, Any] = {name: ref.storage_path}
        extras = (
            ("original_name", ref.original_name),
            ("size", ref.size_bytes),
            ("mime_type", ref.mime_type),
        )
        for suffix, value in extras:
            attr = f"{name}_{suffix}"
            if hasattr(self.crud.model, attr):
                columns[attr] = value
        return columns

    @staticmethod
    def _field_paths(record: Any, field: AttachmentField) -> list[str]:
        value = getattr(record, field.name, None)
        if field.multiple:
            return [
                item["path"]
                for item in (value or [])
                if isinstance(item, dict) and item.get("path")
            ]
        return [value] if value else []

    def _release_all(self, store: BlobStore, paths: Iterable[str]) -> tuple[list[str], list[str]]:
        """返回 ``(removed, failed)``；已不存在的文件两者都不计入。"""
        removed: list[str] = []
        failed: list[str] = []
        for path in paths:
            if not self.is_releasable(store, path):
                continue
            try:
                if store.delete(path):
                    removed.append(path)
            except StorageError:
                logger.exception("Failed to delete %s file %s", self.label, path)
                failed.append(path)
        return removed, failed

    def _compensate(self, store: BlobStore, written: Iterable[str], *, reason: str) -> None:
        for path in written:
            try:
                store.delete(path)
                logger.warning("Removed %s upload %s: %s", self.label, path, reason)
            except StorageError:
                logger.exception("Compensation failed for %s upload %s", self.label, path)
