"""管理委员会业务逻辑：创建时必须上传头像，替换后旧图删除。"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from sqlalchemy.orm import Session

from app.packages.school.api.v1.schemas.committee import CommitteeMemberCreate, CommitteeMemberUpdate
from app.packages.school.core.constants import MANAGING_COMMITTEE_DIR
from app.packages.school.core.responses import create_response
from app.packages.school.crud.committee import committee_crud
from app.packages.school.services.attachments import AttachmentField, AttachmentManager
from app.packages.school.services.blob_store import BlobStore
from app.packages.school.services.resource_service import ResourceService
from app.packages.school.services.upload_gate import IMAGE_POLICY


class ManagingCommitteeService(ResourceService):
    label = "Committee member"
    plural = "Committee members"
    manager = AttachmentManager(
        committee_crud,
        [AttachmentField("image", IMAGE_POLICY, required=True, subdir=MANAGING_COMMITTEE_DIR, prefix="committee")],
        label="Committee member",
    )

    def create(
        self, db: Session, store: BlobStore, form: CommitteeMemberCreate, uploads: Mapping[str, Any]
    ) -> Dict[str, Any]:
        files = self.manager.prepare(uploads)
        member = self.manager.create(db, store, form.model_dump(), files)
        return create_response("Committee member created successfully", self.serialize(member))

    def update(
        self,
        db: Session,
        store: BlobStore,
        member_id: int,
        form: CommitteeMemberUpdate,
        uploads: Mapping[str, Any],
    ) -> Dict[str, Any]:
        files = self.manager.prepare(uploads, enforce_required=False)
        member = self.manager.update(db, store, member_id, form.model_dump(exclude_unset=True), files)
        return create_response("Committee member updated successfully", self.serialize(member))


managing_committee_service = ManagingCommitteeService()
