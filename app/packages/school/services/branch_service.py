"""分校业务逻辑：未上传 logo 时使用默认占位图，占位图永不删除。"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from sqlalchemy.orm import Session

from app.packages.school.api.v1.schemas.branches import BranchCreate, BranchUpdate
from app.packages.school.core.config import get_settings
from app.packages.school.core.constants import DEFAULT_BRANCH_LOGO_NAME
from app.packages.school.core.responses import create_response
from app.packages.school.crud.branch import branch_crud
from app.packages.school.services.attachments import AttachmentField, AttachmentManager
from app.packages.school.services.blob_store import BlobStore
from app.packages.school.services.resource_service import ResourceService
from app.packages.school.services.upload_gate import IMAGE_POLICY

DEFAULT_BRANCH_LOGO = f"{get_settings().upload_url_root}/{DEFAULT_BRANCH_LOGO_NAME}"


class BranchService(ResourceService):
    label = "Branch"
    plural = "Branches"
    newest_first = False
    manager = AttachmentManager(
        branch_crud,
        [AttachmentField("logo", IMAGE_POLICY, default_path=DEFAULT_BRANCH_LOGO, prefix="branch-logo")],
        label="Branch",
    )

    def create(self, db: Session, store: BlobStore, form: BranchCreate, uploads: Mapping[str, Any]) -> Dict[str, Any]:
        files = self.manager.prepare(uploads)
        branch = self.manager.create(db, store, form.model_dump(), files)
        return create_response("Branch created successfully", self.serialize(branch))

    def update(
        self,
        db: Session,
        store: BlobStore,
        branch_id: int,
        form: BranchUpdate,
        uploads: Mapping[str, Any],
    ) -> Dict[str, Any]:
        files = self.manager.prepare(uploads, enforce_required=False)
        branch = self.manager.update(db, store, branch_id, form.model_dump(exclude_unset=True), files)
        return create_response("Branch updated successfully", self.serialize(branch))


branch_service = BranchService()
