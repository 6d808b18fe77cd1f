"""ORM 记录转响应字典。"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Iterable

from app.packages.school.core.timezone import format_datetime


def serialize_record(record: Any, *, exclude: Iterable[str] = ()) -> dict[str, Any]:
    """按表列输出记录，时间字段转换为配置时区的 ISO 字符串。"""
    skipped = set(exclude)
    data: dict[str, Any] = {}
    for column in record.__table__.columns:
        if column.key in skipped:
            continue
        value = getattr(record, column.key)
        if isinstance(value, datetime):
            value = format_datetime(value)
        elif isinstance(value, date):
            value = value.isoformat()
        data[column.key] = value
    return data
