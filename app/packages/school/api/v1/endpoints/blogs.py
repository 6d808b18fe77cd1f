"""博客文章路由。"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from app.packages.school.api.v1.schemas.blogs import BlogCreate, BlogUpdate
from app.packages.school.api.v1.schemas.common import RecordListResponse, RecordResponse
from app.packages.school.core.dependencies import get_blob_store, get_db
from app.packages.school.services.blob_store import BlobStore
from app.packages.school.services.blog_service import blog_service
from app.packages.school.utils.forms import parse_form

router = APIRouter(prefix="/blogs", tags=["blogs"])


@router.get("", response_model=RecordListResponse)
def list_blogs(db: Session = Depends(get_db)):
    """按创建时间倒序返回全部文章。"""
    return blog_service.list(db)


@router.get("/{blog_id}", response_model=RecordResponse)
def get_blog(blog_id: int, db: Session = Depends(get_db)):
    return blog_service.get(db, blog_id)


@router.post("", response_model=RecordResponse, status_code=status.HTTP_201_CREATED)
def create_blog(
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    teacher: Optional[str] = Form(None),
    author: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    blog_status: Optional[str] = Form(None, alias="status"),
    is_premium: Optional[str] = Form(None),
    is_featured: Optional[str] = Form(None),
    tags: Optional[str] = Form(None),
    is_active: Optional[str] = Form(None),
    thumbnail: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    form = parse_form(
        BlogCreate,
        title=title,
        description=description,
        teacher=teacher,
        author=author,
        category=category,
        status=blog_status,
        is_premium=is_premium,
        is_featured=is_featured,
        tags=tags,
        is_active=is_active,
    )
    return blog_service.create(db, store, form, {"thumbnail": thumbnail})


@router.put("/{blog_id}", response_model=RecordResponse)
def update_blog(
    blog_id: int,
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    teacher: Optional[str] = Form(None),
    author: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    blog_status: Optional[str] = Form(None, alias="status"),
    is_premium: Optional[str] = Form(None),
    is_featured: Optional[str] = Form(None),
    tags: Optional[str] = Form(None),
    is_active: Optional[str] = Form(None),
    thumbnail: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    """部分更新；未上传 ``thumbnail`` 时保留原缩略图。"""
    form = parse_form(
        BlogUpdate,
        title=title,
        description=description,
        teacher=teacher,
        author=author,
        category=category,
        status=blog_status,
        is_premium=is_premium,
        is_featured=is_featured,
        tags=tags,
        is_active=is_active,
    )
    return blog_service.update(db, store, blog_id, form, {"thumbnail": thumbnail})


@router.delete("/{blog_id}", response_model=RecordResponse)
def delete_blog(
    blog_id: int,
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    return blog_service.delete(db, store, blog_id)


@router.patch("/{blog_id}/toggle", response_model=RecordResponse)
def toggle_blog(blog_id: int, db: Session = Depends(get_db)):
    return blog_service.toggle(db, blog_id)
