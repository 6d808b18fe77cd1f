"""运维路由：上传目录孤儿文件的查看与清理。"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.packages.school.api.v1.schemas.common import RecordListResponse, RecordResponse
from app.packages.school.core.dependencies import get_blob_store, get_db
from app.packages.school.services.blob_store import BlobStore
from app.packages.school.services.orphan_sweep import list_orphans, sweep_orphans

router = APIRouter(prefix="/maintenance", tags=["maintenance"])


@router.get("/orphan-blobs", response_model=RecordListResponse)
def list_orphan_blobs(
    grace_seconds: Optional[int] = Query(None, ge=0),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    """列出不被任何记录引用、且早于宽限期的文件。"""
    return list_orphans(db, store, grace_seconds=grace_seconds)


@router.delete("/orphan-blobs", response_model=RecordResponse)
def delete_orphan_blobs(
    grace_seconds: Optional[int] = Query(None, ge=0),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    return sweep_orphans(db, store, grace_seconds=grace_seconds)
