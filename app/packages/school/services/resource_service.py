"""资源服务基类：列表、详情、删除与展示开关等各资源共有的操作。"""

from __future__ import annotations

from typing import Any, Dict

from sqlalchemy.orm import Session

from app.packages.school.core.exceptions import NotFoundError
from app.packages.school.core.logger import get_logger
from app.packages.school.core.responses import create_response
from app.packages.school.services.attachments import AttachmentManager
from app.packages.school.services.blob_store import BlobStore
from app.packages.school.utils.serialization import serialize_record

logger = get_logger("resources")


class ResourceService:
    """子类提供 ``label``、``plural`` 与 ``manager``，其余行为按需覆盖。"""

    label: str = "Record"
    plural: str = "Records"
    manager: AttachmentManager
    newest_first: bool = True

    @property
    def crud(self):
        return self.manager.crud

    def serialize(self, record: Any) -> Dict[str, Any]:
        return serialize_record(record)

    def get_or_404(self, db: Session, record_id: int):
        record = self.crud.get(db, record_id)
        if record is None:
            raise NotFoundError(f"{self.label} not found")
        return record

    def list(self, db: Session) -> Dict[str, Any]:
        items = self.crud.list_all(db, newest_first=self.newest_first)
        data = [self.serialize(item) for item in items]
        return create_response(f"{self.plural} fetched successfully", data, count=len(data))

    def get(self, db: Session, record_id: int) -> Dict[str, Any]:
        record = self.get_or_404(db, record_id)
        return create_response(f"{self.label} fetched successfully", self.serialize(record))

    def delete(self, db: Session, store: BlobStore, record_id: int) -> Dict[str, Any]:
        """删除记录及其全部受管文件。"""
        removed = self.manager.delete(db, store, record_id)
        logger.info("%s %s deleted, %d file(s) released", self.label, record_id, len(removed))
        return create_response(f"{self.label} deleted successfully", {"id": record_id, "removed_files": removed})

    def toggle(self, db: Session, record_id: int, column: str = "is_active") -> Dict[str, Any]:
        record = self.crud.toggle(db, record_id, column)
        if record is None:
            raise NotFoundError(f"{self.label} not found")
        state = "enabled" if getattr(record, column) else "disabled"
        return create_response(f"{self.label} {state} successfully", self.serialize(record))
