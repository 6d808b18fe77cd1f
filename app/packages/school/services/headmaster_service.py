"""校长业务逻辑：手机号唯一，同一时刻至多一位现任校长。"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from sqlalchemy.orm import Session

from app.packages.school.api.v1.schemas.headmasters import HeadmasterCreate, HeadmasterUpdate
from app.packages.school.core.constants import HEADMASTER_PHOTO_DIR
from app.packages.school.core.exceptions import ConflictError, NotFoundError
from app.packages.school.core.logger import get_logger
from app.packages.school.core.responses import create_response
from app.packages.school.crud.headmaster import headmaster_crud
from app.packages.school.models.headmaster import Headmaster
from app.packages.school.services.attachments import AttachmentField, AttachmentManager, Check
from app.packages.school.services.blob_store import BlobStore
from app.packages.school.services.resource_service import ResourceService
from app.packages.school.services.upload_gate import PHOTO_POLICY

logger = get_logger("headmasters")


class HeadmasterService(ResourceService):
    label = "Headmaster"
    plural = "Headmasters"
    manager = AttachmentManager(
        headmaster_crud,
        [AttachmentField("photo", PHOTO_POLICY, subdir=HEADMASTER_PHOTO_DIR, prefix="headmaster")],
        label="Headmaster",
    )

    @staticmethod
    def _unique_mobile(mobile: Optional[str]) -> Check:
        def check(db: Session, existing: Optional[Headmaster]) -> None:
            if not mobile:
                return
            exclude_id = existing.id if existing is not None else None
            if headmaster_crud.get_by_mobile(db, mobile, exclude_id=exclude_id) is not None:
                raise ConflictError("A headmaster with this mobile number already exists")

        return check

    def create(self, db: Session, store: BlobStore, form: HeadmasterCreate, uploads: Mapping[str, Any]) -> Dict[str, Any]:
        files = self.manager.prepare(uploads)
        values = form.model_dump()
        make_current = values.pop("is_current")
        headmaster = self.manager.create(db, store, values, files, check=self._unique_mobile(form.mobile))
        if make_current:
            headmaster = headmaster_crud.set_current(db, headmaster)
        return create_response("Headmaster created successfully", self.serialize(headmaster))

    def update(
        self,
        db: Session,
        store: BlobStore,
        headmaster_id: int,
        form: HeadmasterUpdate,
        uploads: Mapping[str, Any],
    ) -> Dict[str, Any]:
        files = self.manager.prepare(uploads, enforce_required=False)
        headmaster = self.manager.update(
            db,
            store,
            headmaster_id,
            form.model_dump(exclude_unset=True),
            files,
            check=self._unique_mobile(form.mobile),
        )
        return create_response("Headmaster updated successfully", self.serialize(headmaster))

    def set_current(self, db: Session, headmaster_id: int) -> Dict[str, Any]:
        headmaster = headmaster_crud.get_for_update(db, headmaster_id)
        if headmaster is None:
            db.rollback()
            raise NotFoundError("Headmaster not found")
        headmaster = headmaster_crud.set_current(db, headmaster)
        logger.info("Headmaster %s marked as current", headmaster_id)
        return create_response("Current headmaster updated successfully", self.serialize(headmaster))

    def get_current(self, db: Session) -> Dict[str, Any]:
        headmaster = headmaster_crud.get_current(db)
        if headmaster is None:
            raise NotFoundError("No current headmaster is set")
        return create_response("Current headmaster fetched successfully", self.serialize(headmaster))


headmaster_service = HeadmasterService()
