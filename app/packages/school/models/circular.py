"""通知公告（Circular）模型，附件文件名保留原始名称便于追溯。"""

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.packages.school.models.base import ActiveFlagMixin, Base, TimestampMixin


class Circular(ActiveFlagMixin, TimestampMixin, Base):
    __tablename__ = "circulars"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    title: Mapped[str] = mapped_column(String(255), index=True)
    description: Mapped[str] = mapped_column(Text, default="")
    category: Mapped[str] = mapped_column(String(64), default="general")
    target_audience: Mapped[str] = mapped_column(String(64), default="all")
    downloads: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    views: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    file: Mapped[str] = mapped_column(String(512))
    file_original_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    file_size: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    file_mime_type: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
    file_extension: Mapped[Optional[str]] = mapped_column(String(16), nullable=True)
