"""管理委员会路由。"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from app.packages.school.api.v1.schemas.committee import CommitteeMemberCreate, CommitteeMemberUpdate
from app.packages.school.api.v1.schemas.common import RecordListResponse, RecordResponse
from app.packages.school.core.dependencies import get_blob_store, get_db
from app.packages.school.services.blob_store import BlobStore
from app.packages.school.services.committee_service import managing_committee_service
from app.packages.school.utils.forms import parse_form

router = APIRouter(prefix="/managing-committee", tags=["managing-committee"])


@router.get("", response_model=RecordListResponse)
def list_members(db: Session = Depends(get_db)):
    """最新添加的成员在前。"""
    return managing_committee_service.list(db)


@router.get("/{member_id}", response_model=RecordResponse)
def get_member(member_id: int, db: Session = Depends(get_db)):
    return managing_committee_service.get(db, member_id)


@router.post("", response_model=RecordResponse, status_code=status.HTTP_201_CREATED)
def create_member(
    name: Optional[str] = Form(None),
    designation: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    social: Optional[str] = Form(None),
    is_active: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    form = parse_form(
        CommitteeMemberCreate,
        name=name,
        designation=designation,
        phone=phone,
        social=social,
        is_active=is_active,
    )
    return managing_committee_service.create(db, store, form, {"image": image})


@router.put("/{member_id}", response_model=RecordResponse)
def update_member(
    member_id: int,
    name: Optional[str] = Form(None),
    designation: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    social: Optional[str] = Form(None),
    is_active: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    form = parse_form(
        CommitteeMemberUpdate,
        name=name,
        designation=designation,
        phone=phone,
        social=social,
        is_active=is_active,
    )
    return managing_committee_service.update(db, store, member_id, form, {"image": image})


@router.delete("/{member_id}", response_model=RecordResponse)
def delete_member(
    member_id: int,
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    return managing_committee_service.delete(db, store, member_id)


@router.patch("/{member_id}/toggle", response_model=RecordResponse)
def toggle_member(member_id: int, db: Session = Depends(get_db)):
    return managing_committee_service.toggle(db, member_id)
