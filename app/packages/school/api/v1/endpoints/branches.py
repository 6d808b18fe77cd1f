"""分校路由。"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from app.packages.school.api.v1.schemas.branches import BranchCreate, BranchUpdate
from app.packages.school.api.v1.schemas.common import RecordListResponse, RecordResponse
from app.packages.school.core.dependencies import get_blob_store, get_db
from app.packages.school.services.blob_store import BlobStore
from app.packages.school.services.branch_service import branch_service
from app.packages.school.utils.forms import parse_form

router = APIRouter(prefix="/branches", tags=["branches"])


@router.get("", response_model=RecordListResponse)
def list_branches(db: Session = Depends(get_db)):
    return branch_service.list(db)


@router.get("/{branch_id}", response_model=RecordResponse)
def get_branch(branch_id: int, db: Session = Depends(get_db)):
    return branch_service.get(db, branch_id)


@router.post("", response_model=RecordResponse, status_code=status.HTTP_201_CREATED)
def create_branch(
    name: Optional[str] = Form(None),
    address: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    website: Optional[str] = Form(None),
    established_year: Optional[str] = Form(None),
    is_active: Optional[str] = Form(None),
    logo: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    """未上传 ``logo`` 时使用默认占位图。"""
    form = parse_form(
        BranchCreate,
        name=name,
        address=address,
        phone=phone,
        email=email,
        website=website,
        established_year=established_year or None,
        is_active=is_active,
    )
    return branch_service.create(db, store, form, {"logo": logo})


@router.put("/{branch_id}", response_model=RecordResponse)
def update_branch(
    branch_id: int,
    name: Optional[str] = Form(None),
    address: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    website: Optional[str] = Form(None),
    established_year: Optional[str] = Form(None),
    is_active: Optional[str] = Form(None),
    logo: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    form = parse_form(
        BranchUpdate,
        name=name,
        address=address,
        phone=phone,
        email=email,
        website=website,
        established_year=established_year or None,
        is_active=is_active,
    )
    return branch_service.update(db, store, branch_id, form, {"logo": logo})


@router.delete("/{branch_id}", response_model=RecordResponse)
def delete_branch(
    branch_id: int,
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    return branch_service.delete(db, store, branch_id)


@router.patch("/{branch_id}/toggle", response_model=RecordResponse)
def toggle_branch(branch_id: int, db: Session = Depends(get_db)):
    return branch_service.toggle(db, branch_id)
