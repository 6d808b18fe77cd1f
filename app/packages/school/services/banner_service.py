"""横幅业务逻辑。"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from sqlalchemy.orm import Session

from app.packages.school.api.v1.schemas.banners import BannerCreate
from app.packages.school.core.responses import create_response
from app.packages.school.crud.banner import banner_crud
from app.packages.school.services.attachments import AttachmentField, AttachmentManager
from app.packages.school.services.blob_store import BlobStore
from app.packages.school.services.resource_service import ResourceService
from app.packages.school.services.upload_gate import IMAGE_POLICY


class BannerService(ResourceService):
    label = "Banner"
    plural = "Banners"
    manager = AttachmentManager(
        banner_crud,
        [AttachmentField("image", IMAGE_POLICY, required=True, prefix="banner")],
        label="Banner",
    )

    def create(self, db: Session, store: BlobStore, form: BannerCreate, uploads: Mapping[str, Any]) -> Dict[str, Any]:
        files = self.manager.prepare(uploads)
        banner = self.manager.create(db, store, form.model_dump(), files)
        return create_response("Banner created successfully", self.serialize(banner))


banner_service = BannerService()
