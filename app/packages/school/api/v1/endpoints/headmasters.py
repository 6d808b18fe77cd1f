"""校长路由。"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from app.packages.school.api.v1.schemas.common import RecordListResponse, RecordResponse
from app.packages.school.api.v1.schemas.headmasters import HeadmasterCreate, HeadmasterUpdate
from app.packages.school.core.dependencies import get_blob_store, get_db
from app.packages.school.services.blob_store import BlobStore
from app.packages.school.services.headmaster_service import headmaster_service
from app.packages.school.utils.forms import parse_form

router = APIRouter(prefix="/headmasters", tags=["headmasters"])


@router.get("", response_model=RecordListResponse)
def list_headmasters(db: Session = Depends(get_db)):
    return headmaster_service.list(db)


@router.get("/current/active", response_model=RecordResponse)
def get_current_headmaster(db: Session = Depends(get_db)):
    """返回现任校长，未设置时 404。"""
    return headmaster_service.get_current(db)


@router.get("/{headmaster_id}", response_model=RecordResponse)
def get_headmaster(headmaster_id: int, db: Session = Depends(get_db)):
    return headmaster_service.get(db, headmaster_id)


@router.post("", response_model=RecordResponse, status_code=status.HTTP_201_CREATED)
def create_headmaster(
    name: Optional[str] = Form(None),
    mobile: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    address: Optional[str] = Form(None),
    joining_date: Optional[str] = Form(None),
    qualifications: Optional[str] = Form(None),
    experience: Optional[str] = Form(None),
    blood_group: Optional[str] = Form(None),
    gender: Optional[str] = Form(None),
    message: Optional[str] = Form(None),
    is_current: Optional[str] = Form(None),
    is_active: Optional[str] = Form(None),
    photo: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    form = parse_form(
        HeadmasterCreate,
        name=name,
        mobile=mobile,
        email=email,
        address=address,
        joining_date=joining_date,
        qualifications=qualifications,
        experience=experience,
        blood_group=blood_group,
        gender=gender,
        message=message,
        is_current=is_current,
        is_active=is_active,
    )
    return headmaster_service.create(db, store, form, {"photo": photo})


@router.put("/{headmaster_id}", response_model=RecordResponse)
def update_headmaster(
    headmaster_id: int,
    name: Optional[str] = Form(None),
    mobile: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    address: Optional[str] = Form(None),
    joining_date: Optional[str] = Form(None),
    qualifications: Optional[str] = Form(None),
    experience: Optional[str] = Form(None),
    blood_group: Optional[str] = Form(None),
    gender: Optional[str] = Form(None),
    message: Optional[str] = Form(None),
    is_active: Optional[str] = Form(None),
    photo: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    form = parse_form(
        HeadmasterUpdate,
        name=name,
        mobile=mobile,
        email=email,
        address=address,
        joining_date=joining_date,
        qualifications=qualifications,
        experience=experience,
        blood_group=blood_group,
        gender=gender,
        message=message,
        is_active=is_active,
    )
    return headmaster_service.update(db, store, headmaster_id, form, {"photo": photo})


@router.patch("/{headmaster_id}/set-current", response_model=RecordResponse)
def set_current_headmaster(headmaster_id: int, db: Session = Depends(get_db)):
    """设为现任校长，其余记录的现任标记在同一事务内清除。"""
    return headmaster_service.set_current(db, headmaster_id)


@router.delete("/{headmaster_id}", response_model=RecordResponse)
def delete_headmaster(
    headmaster_id: int,
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    return headmaster_service.delete(db, store, headmaster_id)
