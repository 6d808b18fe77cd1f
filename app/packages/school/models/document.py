"""可下载文档模型：标题在忽略大小写的前提下唯一（由服务层校验）。"""

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.packages.school.models.base import ActiveFlagMixin, Base, TimestampMixin


class Document(ActiveFlagMixin, TimestampMixin, Base):
    __tablename__ = "documents"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    title: Mapped[str] = mapped_column(String(255), index=True)
    category: Mapped[str] = mapped_column(String(100), default="")
    teacher: Mapped[str] = mapped_column(String(100), default="")
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    downloads: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    file: Mapped[str] = mapped_column(String(512))
    file_original_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    file_size: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    file_mime_type: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
