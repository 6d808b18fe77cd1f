"""横幅路由。"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from app.packages.school.api.v1.schemas.banners import BannerCreate
from app.packages.school.api.v1.schemas.common import RecordListResponse, RecordResponse
from app.packages.school.core.dependencies import get_blob_store, get_db
from app.packages.school.services.banner_service import banner_service
from app.packages.school.services.blob_store import BlobStore
from app.packages.school.utils.forms import parse_form

router = APIRouter(prefix="/banners", tags=["banners"])


@router.get("", response_model=RecordListResponse)
def list_banners(db: Session = Depends(get_db)):
    return banner_service.list(db)


@router.post("", response_model=RecordResponse, status_code=status.HTTP_201_CREATED)
def create_banner(
    title: Optional[str] = Form(None),
    link: Optional[str] = Form(None),
    is_active: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    """创建横幅，``image`` 必填。"""
    form = parse_form(BannerCreate, title=title, link=link, is_active=is_active)
    return banner_service.create(db, store, form, {"image": image})


@router.delete("/{banner_id}", response_model=RecordResponse)
def delete_banner(
    banner_id: int,
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    return banner_service.delete(db, store, banner_id)


@router.patch("/{banner_id}/toggle", response_model=RecordResponse)
def toggle_banner(banner_id: int, db: Session = Depends(get_db)):
    return banner_service.toggle(db, banner_id)
