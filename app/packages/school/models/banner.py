"""首页横幅模型。"""

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.packages.school.models.base import ActiveFlagMixin, Base, TimestampMixin


class Banner(ActiveFlagMixin, TimestampMixin, Base):
    __tablename__ = "banners"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    title: Mapped[str] = mapped_column(String(200))
    link: Mapped[str] = mapped_column(String(512), default="")

    image: Mapped[str] = mapped_column(String(512))
    image_original_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    image_size: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    image_mime_type: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
