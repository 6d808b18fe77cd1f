"""文档业务逻辑：标题唯一（忽略大小写），下载次数原子自增。"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from sqlalchemy.orm import Session

from app.packages.school.api.v1.schemas.documents import DocumentCreate, DocumentUpdate
from app.packages.school.core.exceptions import ConflictError, NotFoundError
from app.packages.school.core.responses import create_response
from app.packages.school.crud.document import document_crud
from app.packages.school.models.document import Document
from app.packages.school.services.attachments import AttachmentField, AttachmentManager, Check
from app.packages.school.services.blob_store import BlobStore
from app.packages.school.services.resource_service import ResourceService
from app.packages.school.services.upload_gate import GENERAL_POLICY


class DocumentService(ResourceService):
    label = "Document"
    plural = "Documents"
    manager = AttachmentManager(
        document_crud,
        [AttachmentField("file", GENERAL_POLICY, required=True, prefix="document")],
        label="Document",
    )

    @staticmethod
    def _unique_title(title: Optional[str]) -> Check:
        def check(db: Session, existing: Optional[Document]) -> None:
            if not title:
                return
            exclude_id = existing.id if existing is not None else None
            if document_crud.get_by_title(db, title, exclude_id=exclude_id) is not None:
                raise ConflictError("A document with this title already exists")

        return check

    def create(self, db: Session, store: BlobStore, form: DocumentCreate, uploads: Mapping[str, Any]) -> Dict[str, Any]:
        files = self.manager.prepare(uploads)
        document = self.manager.create(
            db, store, form.model_dump(), files, check=self._unique_title(form.title)
        )
        return create_response("Document uploaded successfully", self.serialize(document))

    def update(
        self,
        db: Session,
        store: BlobStore,
        document_id: int,
        form: DocumentUpdate,
        uploads: Mapping[str, Any],
    ) -> Dict[str, Any]:
        files = self.manager.prepare(uploads, enforce_required=False)
        document = self.manager.update(
            db,
            store,
            document_id,
            form.model_dump(exclude_unset=True),
            files,
            check=self._unique_title(form.title),
        )
        return create_response("Document updated successfully", self.serialize(document))

    def record_download(self, db: Session, document_id: int) -> Dict[str, Any]:
        downloads = document_crud.increment(db, document_id, "downloads")
        if downloads is None:
            raise NotFoundError("Document not found")
        return create_response("Download recorded", {"id": document_id, "downloads": downloads})


document_service = DocumentService()
