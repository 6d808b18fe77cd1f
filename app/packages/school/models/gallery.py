"""相册照片模型：批量上传时每个文件各占一条记录。"""

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.packages.school.models.base import ActiveFlagMixin, Base, TimestampMixin


class GalleryPhoto(ActiveFlagMixin, TimestampMixin, Base):
    __tablename__ = "gallery_photos"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    caption: Mapped[str] = mapped_column(String(255))

    image: Mapped[str] = mapped_column(String(512))
    image_original_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    image_size: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    image_mime_type: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
