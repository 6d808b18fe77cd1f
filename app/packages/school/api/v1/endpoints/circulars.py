"""通知公告路由。"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from sqlalchemy.orm import Session

from app.packages.school.api.v1.schemas.circulars import CircularCreate, CircularUpdate
from app.packages.school.api.v1.schemas.common import RecordListResponse, RecordResponse
from app.packages.school.core.dependencies import get_blob_store, get_db
from app.packages.school.services.blob_store import BlobStore
from app.packages.school.services.circular_service import circular_service
from app.packages.school.utils.forms import parse_form

router = APIRouter(prefix="/circulars", tags=["circulars"])


@router.get("", response_model=RecordListResponse)
def list_circulars(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """分页列表，响应附带 ``pagination``。"""
    return circular_service.list(db, page=page, limit=limit, search=search)


@router.get("/{circular_id}", response_model=RecordResponse)
def get_circular(circular_id: int, db: Session = Depends(get_db)):
    return circular_service.get(db, circular_id)


@router.post("", response_model=RecordResponse, status_code=status.HTTP_201_CREATED)
def create_circular(
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    target_audience: Optional[str] = Form(None),
    is_active: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    form = parse_form(
        CircularCreate,
        title=title,
        description=description,
        category=category,
        target_audience=target_audience,
        is_active=is_active,
    )
    return circular_service.create(db, store, form, {"file": file})


@router.put("/{circular_id}", response_model=RecordResponse)
def update_circular(
    circular_id: int,
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    target_audience: Optional[str] = Form(None),
    is_active: Optional[str] = Form(None),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    """只更新元数据，附件通过 ``PUT /{id}/file`` 替换。"""
    form = parse_form(
        CircularUpdate,
        title=title,
        description=description,
        category=category,
        target_audience=target_audience,
        is_active=is_active,
    )
    return circular_service.update_metadata(db, store, circular_id, form)


@router.put("/{circular_id}/file", response_model=RecordResponse)
def replace_circular_file(
    circular_id: int,
    file: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    return circular_service.replace_file(db, store, circular_id, {"file": file})


@router.delete("/{circular_id}", response_model=RecordResponse)
def delete_circular(
    circular_id: int,
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    return circular_service.delete(db, store, circular_id)


@router.patch("/{circular_id}/download", response_model=RecordResponse)
def record_circular_download(circular_id: int, db: Session = Depends(get_db)):
    return circular_service.record_download(db, circular_id)


@router.patch("/{circular_id}/view", response_model=RecordResponse)
def record_circular_view(circular_id: int, db: Session = Depends(get_db)):
    return circular_service.record_view(db, circular_id)
