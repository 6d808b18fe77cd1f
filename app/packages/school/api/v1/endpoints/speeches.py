"""致辞路由。"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from app.packages.school.api.v1.schemas.common import RecordListResponse, RecordResponse
from app.packages.school.api.v1.schemas.speeches import SpeechCreate, SpeechUpdate
from app.packages.school.core.dependencies import get_blob_store, get_db
from app.packages.school.services.blob_store import BlobStore
from app.packages.school.services.speech_service import speech_service
from app.packages.school.utils.forms import parse_form

router = APIRouter(prefix="/speeches", tags=["speeches"])


@router.get("", response_model=RecordListResponse)
def list_speeches(db: Session = Depends(get_db)):
    return speech_service.list(db)


@router.post("/upload-editor-image", response_model=RecordResponse, status_code=status.HTTP_201_CREATED)
def upload_editor_image(
    image: Optional[UploadFile] = File(None),
    store: BlobStore = Depends(get_blob_store),
):
    """富文本编辑器插图上传，返回的 ``url`` 直接用作 ``<img src>``。"""
    return speech_service.upload_editor_image(store, image)


@router.get("/{speech_id}", response_model=RecordResponse)
def get_speech(speech_id: int, db: Session = Depends(get_db)):
    return speech_service.get(db, speech_id)


@router.post("", response_model=RecordResponse, status_code=status.HTTP_201_CREATED)
def create_speech(
    speech_type: Optional[str] = Form(None, alias="type"),
    body: Optional[str] = Form(None),
    is_active: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    form = parse_form(SpeechCreate, type=speech_type, body=body, is_active=is_active)
    return speech_service.create(db, store, form, {"image": image})


@router.put("/{speech_id}", response_model=RecordResponse)
def update_speech(
    speech_id: int,
    speech_type: Optional[str] = Form(None, alias="type"),
    body: Optional[str] = Form(None),
    is_active: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    """正文中被移除的内嵌图片会在保存成功后删除。"""
    form = parse_form(SpeechUpdate, type=speech_type, body=body, is_active=is_active)
    return speech_service.update(db, store, speech_id, form, {"image": image})


@router.delete("/{speech_id}", response_model=RecordResponse)
def delete_speech(
    speech_id: int,
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    """删除致辞，同时删除配图与正文内嵌的受管图片。"""
    return speech_service.delete(db, store, speech_id)


@router.patch("/{speech_id}/toggle", response_model=RecordResponse)
def toggle_speech(speech_id: int, db: Session = Depends(get_db)):
    return speech_service.toggle(db, speech_id)
