"""职员路由。"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from app.packages.school.api.v1.schemas.common import RecordListResponse, RecordResponse
from app.packages.school.api.v1.schemas.workers import WorkerCreate, WorkerUpdate
from app.packages.school.core.dependencies import get_blob_store, get_db
from app.packages.school.services.blob_store import BlobStore
from app.packages.school.services.worker_service import worker_service
from app.packages.school.utils.forms import parse_form

router = APIRouter(prefix="/workers", tags=["workers"])


@router.get("", response_model=RecordListResponse)
def list_workers(db: Session = Depends(get_db)):
    return worker_service.list(db)


@router.get("/department/{department}", response_model=RecordListResponse)
def list_workers_by_department(department: str, db: Session = Depends(get_db)):
    """部门名称不区分大小写。"""
    return worker_service.list_by_department(db, department)


@router.get("/{worker_id}", response_model=RecordResponse)
def get_worker(worker_id: int, db: Session = Depends(get_db)):
    return worker_service.get(db, worker_id)


@router.post("", response_model=RecordResponse, status_code=status.HTTP_201_CREATED)
def create_worker(
    name: Optional[str] = Form(None),
    mobile: Optional[str] = Form(None),
    designation: Optional[str] = Form(None),
    department: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    address: Optional[str] = Form(None),
    joining_date: Optional[str] = Form(None),
    salary: Optional[str] = Form(None),
    experience: Optional[str] = Form(None),
    blood_group: Optional[str] = Form(None),
    gender: Optional[str] = Form(None),
    date_of_birth: Optional[str] = Form(None),
    responsibilities: Optional[str] = Form(None),
    work_shift: Optional[str] = Form(None),
    nid_number: Optional[str] = Form(None),
    is_active: Optional[str] = Form(None),
    photo: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    form = parse_form(
        WorkerCreate,
        name=name,
        mobile=mobile,
        designation=designation,
        department=department,
        email=email,
        address=address,
        joining_date=joining_date,
        salary=salary,
        experience=experience,
        blood_group=blood_group,
        gender=gender,
        date_of_birth=date_of_birth,
        responsibilities=responsibilities,
        work_shift=work_shift,
        nid_number=nid_number,
        is_active=is_active,
    )
    return worker_service.create(db, store, form, {"photo": photo})


@router.put("/{worker_id}", response_model=RecordResponse)
def update_worker(
    worker_id: int,
    name: Optional[str] = Form(None),
    mobile: Optional[str] = Form(None),
    designation: Optional[str] = Form(None),
    department: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    address: Optional[str] = Form(None),
    joining_date: Optional[str] = Form(None),
    salary: Optional[str] = Form(None),
    experience: Optional[str] = Form(None),
    blood_group: Optional[str] = Form(None),
    gender: Optional[str] = Form(None),
    date_of_birth: Optional[str] = Form(None),
    responsibilities: Optional[str] = Form(None),
    work_shift: Optional[str] = Form(None),
    nid_number: Optional[str] = Form(None),
    is_active: Optional[str] = Form(None),
    photo: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    """部分更新；上传新照片后旧照片在保存成功时删除。"""
    form = parse_form(
        WorkerUpdate,
        name=name,
        mobile=mobile,
        designation=designation,
        department=department,
        email=email,
        address=address,
        joining_date=joining_date,
        salary=salary,
        experience=experience,
        blood_group=blood_group,
        gender=gender,
        date_of_birth=date_of_birth,
        responsibilities=responsibilities,
        work_shift=work_shift,
        nid_number=nid_number,
        is_active=is_active,
    )
    return worker_service.update(db, store, worker_id, form, {"photo": photo})


@router.delete("/{worker_id}", response_model=RecordResponse)
def delete_worker(
    worker_id: int,
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    return worker_service.delete(db, store, worker_id)


@router.patch("/{worker_id}/toggle", response_model=RecordResponse)
def toggle_worker(worker_id: int, db: Session = Depends(get_db)):
    return worker_service.toggle(db, worker_id)
