"""依赖注入模块：封装 FastAPI 中复用度高的依赖函数。"""

from collections.abc import Generator

from sqlalchemy.orm import Session

from app.packages.school.core.config import get_settings
from app.packages.school.db import session as db_session
from app.packages.school.services.blob_store import BlobStore, LocalBlobStore


def get_db() -> Generator[Session, None, None]:
    """生成一个数据库会话，并在请求结束后自动关闭。"""
    db = db_session.SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_blob_store() -> BlobStore:
    """按配置构建本地上传目录；测试中可通过 ``dependency_overrides`` 替换。"""
    settings = get_settings()
    return LocalBlobStore(settings.upload_directory, settings.upload_url_root)
