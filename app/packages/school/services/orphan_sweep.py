"""孤儿文件清理：扫描上传目录，找出不被任何记录引用的文件。

写盘成功而记录提交前进程崩溃、编辑器图片上传后正文从未保存等情况都会留下孤儿文件。
只处理修改时间早于宽限期的文件，避免误删正在进行中的请求刚写入的文件。
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from app.packages.school.core.config import get_settings
from app.packages.school.core.exceptions import StorageError
from app.packages.school.core.logger import get_logger
from app.packages.school.core.responses import create_response
from app.packages.school.core.timezone import format_datetime
from app.packages.school.services.attachments import AttachmentManager, default_asset_paths
from app.packages.school.services.banner_service import banner_service
from app.packages.school.services.blob_store import BlobInfo, BlobStore
from app.packages.school.services.blog_service import blog_service
from app.packages.school.services.branch_service import branch_service
from app.packages.school.services.circular_service import circular_service
from app.packages.school.services.committee_service import managing_committee_service
from app.packages.school.services.document_service import document_service
from app.packages.school.services.gallery_service import gallery_service
from app.packages.school.services.headmaster_service import headmaster_service
from app.packages.school.services.slider_service import slider_service
from app.packages.school.services.speech_service import speech_service
from app.packages.school.services.teacher_service import teacher_service
from app.packages.school.services.worker_service import worker_service

logger = get_logger("orphan_sweep")

MANAGERS: tuple[AttachmentManager, ...] = tuple(
    service.manager
    for service in (
        banner_service,
        blog_service,
        branch_service,
        circular_service,
        document_service,
        gallery_service,
        headmaster_service,
        managing_committee_service,
        slider_service,
        speech_service,
        teacher_service,
        worker_service,
    )
)


def collect_referenced_paths(
    db: Session,
    store: BlobStore,
    managers: Iterable[AttachmentManager] = MANAGERS,
) -> set[str]:
    """所有记录引用的路径（含富文本内嵌图片）以及各资源的默认占位图。"""
    referenced: set[str] = set(default_asset_paths())
    for manager in managers:
        for record in manager.crud.query(db).all():
            referenced.update(manager.referenced_paths(record, store.url_prefix))
    return referenced


def find_orphans(
    db: Session,
    store: BlobStore,
    *,
    grace_seconds: Optional[int] = None,
    now: Optional[datetime] = None,
    managers: Iterable[AttachmentManager] = MANAGERS,
) -> list[BlobInfo]:
    grace = get_settings().orphan_grace_seconds if grace_seconds is None else grace_seconds
    cutoff = (now or datetime.now(timezone.utc)) - timedelta(seconds=grace)
    referenced = collect_referenced_paths(db, store, managers)
    return [
        blob
        for blob in store.iter_blobs()
        if blob.path not in referenced and blob.modified_at <= cutoff
    ]


def _describe(blob: BlobInfo) -> dict:
    return {"path": blob.path, "size": blob.size, "modified_at": format_datetime(blob.modified_at)}


def list_orphans(db: Session, store: BlobStore, *, grace_seconds: Optional[int] = None):
    orphans = find_orphans(db, store, grace_seconds=grace_seconds)
    data = [_describe(blob) for blob in orphans]
    return create_response("Orphaned files fetched successfully", data, count=len(data))


def sweep_orphans(db: Session, store: BlobStore, *, grace_seconds: Optional[int] = None):
    """删除孤儿文件；单个文件删除失败只记录日志，不中断清理。"""
    removed: list[str] = []
    failed: list[str] = []
    for blob in find_orphans(db, store, grace_seconds=grace_seconds):
        try:
            store.delete(blob.path)
            removed.append(blob.path)
        except StorageError:
            logger.exception("Failed to delete orphaned file %s", blob.path)
            failed.append(blob.path)
    logger.info("Orphan sweep finished: %d removed, %d failed", len(removed), len(failed))
    return create_response(
        "Orphaned files removed",
        {"removed": removed, "failed": failed},
        count=len(removed),
    )
