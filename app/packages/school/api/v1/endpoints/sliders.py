"""首页轮播路由。"""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from app.packages.school.api.v1.schemas.common import RecordListResponse, RecordResponse
from app.packages.school.api.v1.schemas.sliders import SliderCreate
from app.packages.school.core.dependencies import get_blob_store, get_db
from app.packages.school.services.blob_store import BlobStore
from app.packages.school.services.slider_service import slider_service
from app.packages.school.utils.forms import parse_form

router = APIRouter(prefix="/sliders", tags=["sliders"])


@router.get("", response_model=RecordListResponse)
def list_sliders(db: Session = Depends(get_db)):
    return slider_service.list(db)


@router.post("", response_model=RecordResponse, status_code=status.HTTP_201_CREATED)
def create_slider(
    title: Optional[str] = Form(None),
    auto_play: Optional[str] = Form(None),
    speed: Optional[str] = Form(None),
    images: Optional[List[UploadFile]] = File(None),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    """``images`` 至少一张、至多十张。"""
    form = parse_form(SliderCreate, title=title, auto_play=auto_play, speed=speed or None)
    return slider_service.create(db, store, form, {"images": images})


@router.delete("/{slider_id}", response_model=RecordResponse)
def delete_slider(
    slider_id: int,
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    return slider_service.delete(db, store, slider_id)


@router.patch("/{slider_id}/toggle-autoplay", response_model=RecordResponse)
def toggle_slider_autoplay(slider_id: int, db: Session = Depends(get_db)):
    return slider_service.toggle_autoplay(db, slider_id)
