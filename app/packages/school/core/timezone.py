"""时区工具方法：按配置时区输出时间，并提供上传命名所需的毫秒时间戳。"""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Optional

from app.packages.school.core.config import get_settings


def now() -> datetime:
    """返回配置时区下的当前时间。"""
    return datetime.now(get_settings().timezone_info)


def epoch_millis() -> int:
    """当前 Unix 毫秒时间戳。"""
    return time.time_ns() // 1_000_000


def format_datetime(value: Optional[datetime]) -> Optional[str]:
    """将时间转换到配置时区并输出 ISO-8601 字符串（秒级精度）。

    SQLite 读回的时间不带时区信息，按 UTC 处理。
    """
    if value is None:
        return None
    tz = get_settings().timezone_info
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(tz).isoformat(timespec="seconds")
