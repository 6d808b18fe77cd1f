"""职员业务逻辑：手机号唯一，照片走 2 MiB 图片策略，可按部门查询。"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from sqlalchemy.orm import Session

from app.packages.school.api.v1.schemas.workers import WorkerCreate, WorkerUpdate
from app.packages.school.core.constants import WORKER_PHOTO_DIR
from app.packages.school.core.exceptions import ConflictError
from app.packages.school.core.responses import create_response
from app.packages.school.crud.worker import worker_crud
from app.packages.school.models.worker import Worker
from app.packages.school.services.attachments import AttachmentField, AttachmentManager, Check
from app.packages.school.services.blob_store import BlobStore
from app.packages.school.services.resource_service import ResourceService
from app.packages.school.services.upload_gate import PHOTO_POLICY


class WorkerService(ResourceService):
    label = "Worker"
    plural = "Workers"
    manager = AttachmentManager(
        worker_crud,
        [AttachmentField("photo", PHOTO_POLICY, subdir=WORKER_PHOTO_DIR, prefix="worker")],
        label="Worker",
    )

    @staticmethod
    def _unique_mobile(mobile: Optional[str]) -> Check:
        def check(db: Session, existing: Optional[Worker]) -> None:
            if not mobile:
                return
            exclude_id = existing.id if existing is not None else None
            if worker_crud.get_by_mobile(db, mobile, exclude_id=exclude_id) is not None:
                raise ConflictError("A worker with this mobile number already exists")

        return check

    def list_by_department(self, db: Session, department: str) -> Dict[str, Any]:
        items = worker_crud.list_by_department(db, department)
        data = [self.serialize(item) for item in items]
        return create_response("Workers fetched successfully", data, count=len(data))

    def create(self, db: Session, store: BlobStore, form: WorkerCreate, uploads: Mapping[str, Any]) -> Dict[str, Any]:
        files = self.manager.prepare(uploads)
        worker = self.manager.create(db, store, form.model_dump(), files, check=self._unique_mobile(form.mobile))
        return create_response("Worker created successfully", self.serialize(worker))

    def update(
        self,
        db: Session,
        store: BlobStore,
        worker_id: int,
        form: WorkerUpdate,
        uploads: Mapping[str, Any],
    ) -> Dict[str, Any]:
        files = self.manager.prepare(uploads, enforce_required=False)
        worker = self.manager.update(
            db, store, worker_id, form.model_dump(exclude_unset=True), files, check=self._unique_mobile(form.mobile)
        )
        return create_response("Worker updated successfully", self.serialize(worker))


worker_service = WorkerService()
