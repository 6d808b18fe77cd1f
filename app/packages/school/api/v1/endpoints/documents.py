"""文档路由。"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from app.packages.school.api.v1.schemas.common import RecordListResponse, RecordResponse
from app.packages.school.api.v1.schemas.documents import DocumentCreate, DocumentUpdate
from app.packages.school.core.dependencies import get_blob_store, get_db
from app.packages.school.services.blob_store import BlobStore
from app.packages.school.services.document_service import document_service
from app.packages.school.utils.forms import parse_form

router = APIRouter(prefix="/documents", tags=["documents"])


@router.get("", response_model=RecordListResponse)
def list_documents(db: Session = Depends(get_db)):
    return document_service.list(db)


@router.get("/{document_id}", response_model=RecordResponse)
def get_document(document_id: int, db: Session = Depends(get_db)):
    return document_service.get(db, document_id)


@router.post("", response_model=RecordResponse, status_code=status.HTTP_201_CREATED)
def create_document(
    title: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    teacher: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    is_active: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    """上传文档；标题与已有文档重复（忽略大小写）时返回 400。"""
    form = parse_form(
        DocumentCreate,
        title=title,
        category=category,
        teacher=teacher,
        description=description,
        is_active=is_active,
    )
    return document_service.create(db, store, form, {"file": file})


@router.put("/{document_id}", response_model=RecordResponse)
def update_document(
    document_id: int,
    title: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    teacher: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    is_active: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    form = parse_form(
        DocumentUpdate,
        title=title,
        category=category,
        teacher=teacher,
        description=description,
        is_active=is_active,
    )
    return document_service.update(db, store, document_id, form, {"file": file})


@router.delete("/{document_id}", response_model=RecordResponse)
def delete_document(
    document_id: int,
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    return document_service.delete(db, store, document_id)


@router.patch("/{document_id}/toggle", response_model=RecordResponse)
def toggle_document(document_id: int, db: Session = Depends(get_db)):
    return document_service.toggle(db, document_id)


@router.patch("/{document_id}/download", response_model=RecordResponse)
def record_document_download(document_id: int, db: Session = Depends(get_db)):
    """下载次数 +1。"""
    return document_service.record_download(db, document_id)
