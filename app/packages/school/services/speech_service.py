"""致辞业务逻辑：``type`` 唯一，正文为富文本，可内嵌编辑器上传的图片。"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from fastapi import UploadFile
from sqlalchemy.orm import Session

from app.packages.school.api.v1.schemas.speeches import SpeechCreate, SpeechUpdate
from app.packages.school.core.constants import EDITOR_IMAGE_PREFIX
from app.packages.school.core.exceptions import ConflictError, MissingRequiredFile
from app.packages.school.core.logger import get_logger
from app.packages.school.core.responses import create_response
from app.packages.school.crud.speech import speech_crud
from app.packages.school.models.speech import Speech
from app.packages.school.services.attachments import AttachmentField, AttachmentManager, Check
from app.packages.school.services.blob_store import BlobStore
from app.packages.school.services.resource_service import ResourceService
from app.packages.school.services.upload_gate import IMAGE_POLICY, inspect, is_present

logger = get_logger("speeches")

# 编辑器内嵌图片不绑定任何附件列，仅出现在正文 HTML 中
EDITOR_IMAGE_FIELD = AttachmentField("image", IMAGE_POLICY, prefix=EDITOR_IMAGE_PREFIX)


class SpeechService(ResourceService):
    label = "Speech"
    plural = "Speeches"
    manager = AttachmentManager(
        speech_crud,
        [AttachmentField("image", IMAGE_POLICY, prefix="speech")],
        label="Speech",
        rich_text_fields=("body",),
    )

    @staticmethod
    def _unique_type(speech_type: Optional[str]) -> Check:
        def check(db: Session, existing: Optional[Speech]) -> None:
            if not speech_type:
                return
            exclude_id = existing.id if existing is not None else None
            if speech_crud.get_by_type(db, speech_type, exclude_id=exclude_id) is not None:
                raise ConflictError(f"A speech of type '{speech_type}' already exists")

        return check

    def create(self, db: Session, store: BlobStore, form: SpeechCreate, uploads: Mapping[str, Any]) -> Dict[str, Any]:
        files = self.manager.prepare(uploads)
        speech = self.manager.create(db, store, form.model_dump(), files, check=self._unique_type(form.type))
        return create_response("Speech created successfully", self.serialize(speech))

    def update(
        self,
        db: Session,
        store: BlobStore,
        speech_id: int,
        form: SpeechUpdate,
        uploads: Mapping[str, Any],
    ) -> Dict[str, Any]:
        files = self.manager.prepare(uploads, enforce_required=False)
        speech = self.manager.update(
            db,
            store,
            speech_id,
            form.model_dump(exclude_unset=True),
            files,
            check=self._unique_type(form.type),
        )
        return create_response("Speech updated successfully", self.serialize(speech))

    def upload_editor_image(self, store: BlobStore, upload: Optional[UploadFile]) -> Dict[str, Any]:
        """保存编辑器插入的图片并返回可直接写入 ``<img src>`` 的地址。

        图片在正文保存前不被任何记录引用，超过宽限期仍未引用时由孤儿清理删除。
        """
        if not is_present(upload):
            raise MissingRequiredFile("An 'image' file is required")
        item = inspect(upload, EDITOR_IMAGE_FIELD.policy, EDITOR_IMAGE_FIELD.name)
        ref = self.manager.stage(store, EDITOR_IMAGE_FIELD, item)
        logger.info("Editor image staged at %s", ref.storage_path)
        return create_response("Image uploaded successfully", {"url": ref.storage_path, **ref.as_dict()})


speech_service = SpeechService()
