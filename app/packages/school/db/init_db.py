"""数据库与上传目录初始化。"""

from __future__ import annotations

from app.packages.school import models  # noqa: F401 - register tables on Base.metadata
from app.packages.school.core.config import get_settings
from app.packages.school.core.logger import get_logger
from app.packages.school.db import session as db_session
from app.packages.school.models.base import Base

logger = get_logger("init_db")


def init_db() -> None:
    """建表（已存在则跳过），并确保上传根目录存在。"""
    Base.metadata.create_all(bind=db_session.engine)

    upload_dir = get_settings().upload_directory
    upload_dir.mkdir(parents=True, exist_ok=True)
    logger.info("Database tables ready, uploads served from %s", upload_dir)
