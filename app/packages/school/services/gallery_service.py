"""相册业务逻辑：一次上传多张照片，每张照片一条记录，全部成功才提交。"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from sqlalchemy.orm import Session

from app.packages.school.api.v1.schemas.gallery import GalleryPhotoCreate
from app.packages.school.core.responses import create_response
from app.packages.school.crud.gallery import gallery_photo_crud
from app.packages.school.services.attachments import AttachmentField, AttachmentManager
from app.packages.school.services.blob_store import BlobStore
from app.packages.school.services.resource_service import ResourceService
from app.packages.school.services.upload_gate import IMAGE_POLICY, inspect_many

UPLOAD_FIELD = "photos"


class GalleryService(ResourceService):
    label = "Photo"
    plural = "Photos"
    manager = AttachmentManager(
        gallery_photo_crud,
        [AttachmentField("image", IMAGE_POLICY, prefix="gallery")],
        label="Photo",
    )

    def create(self, db: Session, store: BlobStore, form: GalleryPhotoCreate, uploads: Mapping[str, Any]) -> Dict[str, Any]:
        # 表单字段 photos 可携带多张图片，每张落为一条记录的 image 列
        items = inspect_many(uploads.get(UPLOAD_FIELD), IMAGE_POLICY, UPLOAD_FIELD)
        photos = self.manager.create_each(db, store, form.model_dump(), {"image": items}, field_name="image")
        data = [self.serialize(photo) for photo in photos]
        return create_response(f"{len(data)} photo(s) uploaded successfully", data, count=len(data))


gallery_service = GalleryService()
