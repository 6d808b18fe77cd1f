"""教职工路由。"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from app.packages.school.api.v1.schemas.common import RecordListResponse, RecordResponse
from app.packages.school.api.v1.schemas.teachers import TeacherCreate, TeacherUpdate
from app.packages.school.core.dependencies import get_blob_store, get_db
from app.packages.school.services.blob_store import BlobStore
from app.packages.school.services.teacher_service import teacher_service
from app.packages.school.utils.forms import parse_form

router = APIRouter(prefix="/teachers", tags=["teachers"])


@router.get("", response_model=RecordListResponse)
def list_teachers(
    staff_type: Optional[str] = Query(None),
    position: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """按类型、在职状态与关键字筛选教职工。"""
    return teacher_service.list(db, staff_type=staff_type, position=position, search=search)


@router.get("/export")
def export_teachers(
    staff_type: Optional[str] = Query(None),
    position: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db),
) -> StreamingResponse:
    """导出 Excel，筛选条件与列表接口一致。"""
    return teacher_service.export(db, staff_type=staff_type, position=position, search=search)


@router.get("/{teacher_id}", response_model=RecordResponse)
def get_teacher(teacher_id: int, db: Session = Depends(get_db)):
    return teacher_service.get(db, teacher_id)


@router.post("", response_model=RecordResponse, status_code=status.HTTP_201_CREATED)
def create_teacher(
    name: Optional[str] = Form(None),
    mobile: Optional[str] = Form(None),
    smart_id: Optional[str] = Form(None),
    finger_id: Optional[str] = Form(None),
    designation: Optional[str] = Form(None),
    bio: Optional[str] = Form(None),
    salary: Optional[str] = Form(None),
    position: Optional[str] = Form(None),
    session: Optional[str] = Form(None),
    staff_type: Optional[str] = Form(None),
    photo: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    form = parse_form(
        TeacherCreate,
        name=name,
        mobile=mobile,
        smart_id=smart_id,
        finger_id=finger_id,
        designation=designation,
        bio=bio,
        salary=salary,
        position=position,
        session=session,
        staff_type=staff_type,
    )
    return teacher_service.create(db, store, form, {"photo": photo})


@router.put("/{teacher_id}", response_model=RecordResponse)
def update_teacher(
    teacher_id: int,
    name: Optional[str] = Form(None),
    mobile: Optional[str] = Form(None),
    smart_id: Optional[str] = Form(None),
    finger_id: Optional[str] = Form(None),
    designation: Optional[str] = Form(None),
    bio: Optional[str] = Form(None),
    salary: Optional[str] = Form(None),
    position: Optional[str] = Form(None),
    session: Optional[str] = Form(None),
    staff_type: Optional[str] = Form(None),
    photo: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    """部分更新；上传新照片后旧照片在保存成功时删除。"""
    form = parse_form(
        TeacherUpdate,
        name=name,
        mobile=mobile,
        smart_id=smart_id,
        finger_id=finger_id,
        designation=designation,
        bio=bio,
        salary=salary,
        position=position,
        session=session,
        staff_type=staff_type,
    )
    return teacher_service.update(db, store, teacher_id, form, {"photo": photo})


@router.delete("/{teacher_id}", response_model=RecordResponse)
def delete_teacher(
    teacher_id: int,
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    return teacher_service.delete(db, store, teacher_id)


@router.patch("/{teacher_id}/toggle", response_model=RecordResponse)
def toggle_teacher(teacher_id: int, db: Session = Depends(get_db)):
    return teacher_service.toggle(db, teacher_id)
