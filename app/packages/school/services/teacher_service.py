"""教职工业务逻辑：手机号唯一，照片走 2 MiB 图片策略，支持导出 Excel。"""

from __future__ import annotations

import io
from typing import Any, Dict, Mapping, Optional

from fastapi.responses import StreamingResponse
from openpyxl import Workbook
from sqlalchemy.orm import Session

from app.packages.school.api.v1.schemas.teachers import TeacherCreate, TeacherUpdate
from app.packages.school.core.constants import TEACHER_PHOTO_DIR
from app.packages.school.core.exceptions import ConflictError
from app.packages.school.core.responses import create_response
from app.packages.school.core.timezone import format_datetime, now
from app.packages.school.crud.teacher import teacher_crud
from app.packages.school.models.teacher import Teacher
from app.packages.school.services.attachments import AttachmentField, AttachmentManager, Check
from app.packages.school.services.blob_store import BlobStore
from app.packages.school.services.resource_service import ResourceService
from app.packages.school.services.upload_gate import PHOTO_POLICY

_EXPORT_HEADERS = (
    "ID",
    "Name",
    "Mobile",
    "Staff type",
    "Designation",
    "Position",
    "Session",
    "Smart ID",
    "Finger ID",
    "Salary",
    "Created at",
)


class TeacherService(ResourceService):
    label = "Teacher"
    plural = "Teachers"
    newest_first = False
    manager = AttachmentManager(
        teacher_crud,
        [AttachmentField("photo", PHOTO_POLICY, subdir=TEACHER_PHOTO_DIR, prefix="teacher")],
        label="Teacher",
    )

    @staticmethod
    def _unique_mobile(mobile: Optional[str]) -> Check:
        def check(db: Session, existing: Optional[Teacher]) -> None:
            if not mobile:
                return
            exclude_id = existing.id if existing is not None else None
            if teacher_crud.get_by_mobile(db, mobile, exclude_id=exclude_id) is not None:
                raise ConflictError("A staff member with this mobile number already exists")

        return check

    @staticmethod
    def _with_active_flag(values: Dict[str, Any]) -> Dict[str, Any]:
        """``position`` 为 Deactivated 时同步关闭前台展示。"""
        if "position" in values:
            values["is_active"] = values["position"] == "Active"
        return values

    def list(
        self,
        db: Session,
        *,
        staff_type: Optional[str] = None,
        position: Optional[str] = None,
        search: Optional[str] = None,
    ) -> Dict[str, Any]:
        items = teacher_crud.list_with_filters(db, staff_type=staff_type, position=position, search=search)
        data = [self.serialize(item) for item in items]
        return create_response("Teachers fetched successfully", data, count=len(data))

    def create(self, db: Session, store: BlobStore, form: TeacherCreate, uploads: Mapping[str, Any]) -> Dict[str, Any]:
        files = self.manager.prepare(uploads)
        values = self._with_active_flag(form.model_dump())
        teacher = self.manager.create(db, store, values, files, check=self._unique_mobile(form.mobile))
        return create_response("Teacher created successfully", self.serialize(teacher))

    def update(
        self,
        db: Session,
        store: BlobStore,
        teacher_id: int,
        form: TeacherUpdate,
        uploads: Mapping[str, Any],
    ) -> Dict[str, Any]:
        files = self.manager.prepare(uploads, enforce_required=False)
        values = self._with_active_flag(form.model_dump(exclude_unset=True))
        teacher = self.manager.update(
            db, store, teacher_id, values, files, check=self._unique_mobile(form.mobile)
        )
        return create_response("Teacher updated successfully", self.serialize(teacher))

    def export(
        self,
        db: Session,
        *,
        staff_type: Optional[str] = None,
        position: Optional[str] = None,
        search: Optional[str] = None,
    ) -> StreamingResponse:
        items = teacher_crud.list_with_filters(db, staff_type=staff_type, position=position, search=search)

        workbook = Workbook()
        sheet = workbook.active
        sheet.title = "Staff"
        sheet.append(list(_EXPORT_HEADERS))
        for item in items:
            sheet.append(
                [
                    item.id,
                    item.name,
                    item.mobile,
                    item.staff_type,
                    item.designation,
                    item.position,
                    item.session,
                    item.smart_id,
                    item.finger_id,
                    item.salary,
                    format_datetime(item.create_time) or "",
                ]
            )

        buffer = io.BytesIO()
        workbook.save(buffer)
        buffer.seek(0)

        filename = f"staff-{now().strftime('%Y%m%d%H%M%S')}.xlsx"
        response = StreamingResponse(
            buffer,
            media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )
        response.headers["Content-Disposition"] = f"attachment; filename={filename}"
        return response


teacher_service = TeacherService()
