"""相册路由。"""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from app.packages.school.api.v1.schemas.common import RecordListResponse, RecordResponse
from app.packages.school.api.v1.schemas.gallery import GalleryPhotoCreate
from app.packages.school.core.dependencies import get_blob_store, get_db
from app.packages.school.services.blob_store import BlobStore
from app.packages.school.services.gallery_service import gallery_service
from app.packages.school.utils.forms import parse_form

router = APIRouter(prefix="/gallery", tags=["gallery"])


@router.get("/photos", response_model=RecordListResponse)
def list_photos(db: Session = Depends(get_db)):
    return gallery_service.list(db)


@router.post("/photos", response_model=RecordListResponse, status_code=status.HTTP_201_CREATED)
def upload_photos(
    caption: Optional[str] = Form(None),
    is_active: Optional[str] = Form(None),
    photos: Optional[List[UploadFile]] = File(None),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    """每张照片生成一条记录；任意一张失败则全部回滚并删除已写入的文件。"""
    form = parse_form(GalleryPhotoCreate, caption=caption, is_active=is_active)
    return gallery_service.create(db, store, form, {"photos": photos})


@router.delete("/photos/{photo_id}", response_model=RecordResponse)
def delete_photo(
    photo_id: int,
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    return gallery_service.delete(db, store, photo_id)


@router.patch("/photos/{photo_id}/toggle", response_model=RecordResponse)
def toggle_photo(photo_id: int, db: Session = Depends(get_db)):
    return gallery_service.toggle(db, photo_id)
