"""博客文章业务逻辑。"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from sqlalchemy.orm import Session

from app.packages.school.api.v1.schemas.blogs import BlogCreate, BlogUpdate
from app.packages.school.core.responses import create_response
from app.packages.school.crud.blog import blog_crud
from app.packages.school.services.attachments import AttachmentField, AttachmentManager
from app.packages.school.services.blob_store import BlobStore
from app.packages.school.services.resource_service import ResourceService
from app.packages.school.services.upload_gate import IMAGE_POLICY


class BlogService(ResourceService):
    label = "Blog"
    plural = "Blogs"
    manager = AttachmentManager(
        blog_crud,
        [AttachmentField("thumbnail", IMAGE_POLICY, required=True)],
        label="Blog",
    )

    def create(self, db: Session, store: BlobStore, form: BlogCreate, uploads: Mapping[str, Any]) -> Dict[str, Any]:
        files = self.manager.prepare(uploads)
        blog = self.manager.create(db, store, form.model_dump(), files)
        return create_response("Blog created successfully", self.serialize(blog))

    def update(
        self,
        db: Session,
        store: BlobStore,
        blog_id: int,
        form: BlogUpdate,
        uploads: Mapping[str, Any],
    ) -> Dict[str, Any]:
        """仅更新提交的字段；未上传新缩略图时保留原图。"""
        files = self.manager.prepare(uploads, enforce_required=False)
        blog = self.manager.update(db, store, blog_id, form.model_dump(exclude_unset=True), files)
        return create_response("Blog updated successfully", self.serialize(blog))


blog_service = BlogService()
