"""博客文章模型。"""

from typing import Optional

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.packages.school.models.base import ActiveFlagMixin, Base, TimestampMixin


class Blog(ActiveFlagMixin, TimestampMixin, Base):
    """博客文章，`status` 取值 Draft / Published，由前端自由维护。"""

    __tablename__ = "blogs"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    title: Mapped[str] = mapped_column(String(255), index=True)
    teacher: Mapped[str] = mapped_column(String(100), default="")
    author: Mapped[str] = mapped_column(String(100), default="")
    category: Mapped[str] = mapped_column(String(100), default="")
    description: Mapped[str] = mapped_column(Text)
    status: Mapped[str] = mapped_column(String(32), default="Draft")
    is_premium: Mapped[bool] = mapped_column(Boolean, default=False)
    is_featured: Mapped[bool] = mapped_column(Boolean, default=False)
    tags: Mapped[str] = mapped_column(String(255), default="")

    thumbnail: Mapped[str] = mapped_column(String(512))
    thumbnail_original_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    thumbnail_size: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    thumbnail_mime_type: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
