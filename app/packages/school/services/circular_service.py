"""通知公告业务逻辑：分页搜索、元数据与附件分开更新、下载与浏览计数。"""

from __future__ import annotations

import math
from typing import Any, Dict, Mapping, Optional

from sqlalchemy.orm import Session

from app.packages.school.api.v1.schemas.circulars import CircularCreate, CircularUpdate
from app.packages.school.api.v1.schemas.common import Pagination
from app.packages.school.core.constants import CIRCULAR_DIR
from app.packages.school.core.exceptions import MissingRequiredFile, NotFoundError
from app.packages.school.core.responses import create_response
from app.packages.school.crud.circular import circular_crud
from app.packages.school.services.attachments import AttachmentField, AttachmentManager
from app.packages.school.services.blob_store import BlobStore
from app.packages.school.services.resource_service import ResourceService
from app.packages.school.services.upload_gate import GENERAL_POLICY, IncomingFile


def _extension_of(files: Mapping[str, list[IncomingFile]]) -> Dict[str, Any]:
    incoming = files.get("file")
    if not incoming:
        return {}
    return {"file_extension": incoming[0].extension.lstrip(".") or None}


class CircularService(ResourceService):
    label = "Circular"
    plural = "Circulars"
    manager = AttachmentManager(
        circular_crud,
        [
            AttachmentField(
                "file",
                GENERAL_POLICY,
                required=True,
                subdir=CIRCULAR_DIR,
                prefix="circular",
                keep_original_name=True,
            )
        ],
        label="Circular",
    )

    def list(
        self,
        db: Session,
        *,
        page: int = 1,
        limit: int = 10,
        search: Optional[str] = None,
    ) -> Dict[str, Any]:
        items, total = circular_crud.list_paginated(db, search=search, skip=(page - 1) * limit, limit=limit)
        pagination = Pagination(page=page, limit=limit, total=total, pages=math.ceil(total / limit) if total else 0)
        return create_response(
            "Circulars fetched successfully",
            [self.serialize(item) for item in items],
            pagination=pagination.model_dump(),
        )

    def create(self, db: Session, store: BlobStore, form: CircularCreate, uploads: Mapping[str, Any]) -> Dict[str, Any]:
        files = self.manager.prepare(uploads)
        values = {**form.model_dump(), **_extension_of(files)}
        circular = self.manager.create(db, store, values, files)
        return create_response("Circular created successfully", self.serialize(circular))

    def update_metadata(self, db: Session, store: BlobStore, circular_id: int, form: CircularUpdate) -> Dict[str, Any]:
        circular = self.manager.update(db, store, circular_id, form.model_dump(exclude_unset=True), {})
        return create_response("Circular updated successfully", self.serialize(circular))

    def replace_file(self, db: Session, store: BlobStore, circular_id: int, uploads: Mapping[str, Any]) -> Dict[str, Any]:
        """只替换附件；旧文件在新记录提交后删除。"""
        files = self.manager.prepare(uploads, enforce_required=False)
        if not files.get("file"):
            raise MissingRequiredFile("A 'file' upload is required")
        circular = self.manager.update(db, store, circular_id, _extension_of(files), files)
        return create_response("Circular file replaced successfully", self.serialize(circular))

    def _bump(self, db: Session, circular_id: int, column: str, message: str) -> Dict[str, Any]:
        value = circular_crud.increment(db, circular_id, column)
        if value is None:
            raise NotFoundError("Circular not found")
        return create_response(message, {"id": circular_id, column: value})

    def record_download(self, db: Session, circular_id: int) -> Dict[str, Any]:
        return self._bump(db, circular_id, "downloads", "Download recorded")

    def record_view(self, db: Session, circular_id: int) -> Dict[str, Any]:
        return self._bump(db, circular_id, "views", "View recorded")


circular_service = CircularService()
