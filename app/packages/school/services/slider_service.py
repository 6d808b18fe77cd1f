"""首页轮播业务逻辑：一条记录持有多张图片，删除时全部释放。"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from sqlalchemy.orm import Session

from app.packages.school.api.v1.schemas.sliders import SliderCreate
from app.packages.school.core.responses import create_response
from app.packages.school.crud.slider import slider_crud
from app.packages.school.services.attachments import AttachmentField, AttachmentManager
from app.packages.school.services.blob_store import BlobStore
from app.packages.school.services.resource_service import ResourceService
from app.packages.school.services.upload_gate import IMAGE_POLICY

MAX_SLIDER_IMAGES = 10


class SliderService(ResourceService):
    label = "Slider"
    plural = "Sliders"
    manager = AttachmentManager(
        slider_crud,
        [
            AttachmentField(
                "images",
                IMAGE_POLICY,
                required=True,
                multiple=True,
                prefix="slider",
                max_files=MAX_SLIDER_IMAGES,
            )
        ],
        label="Slider",
    )

    def create(self, db: Session, store: BlobStore, form: SliderCreate, uploads: Mapping[str, Any]) -> Dict[str, Any]:
        files = self.manager.prepare(uploads)
        slider = self.manager.create(db, store, form.model_dump(), files)
        return create_response("Slider created successfully", self.serialize(slider))

    def toggle_autoplay(self, db: Session, slider_id: int) -> Dict[str, Any]:
        return self.toggle(db, slider_id, "auto_play")


slider_service = SliderService()
