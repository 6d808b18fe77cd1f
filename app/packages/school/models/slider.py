"""首页轮播模型：一条记录持有多张图片。"""

from typing import Any

from sqlalchemy import JSON, Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.packages.school.models.base import Base, TimestampMixin


class Slider(TimestampMixin, Base):
    __tablename__ = "sliders"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    title: Mapped[str] = mapped_column(String(200))
    # [{"path", "original_name", "size", "mime_type"}, ...]
    images: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list)
    auto_play: Mapped[bool] = mapped_column(Boolean, default=True)
    speed: Mapped[int] = mapped_column(Integer, default=3000)
