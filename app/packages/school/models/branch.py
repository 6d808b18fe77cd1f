"""分校模型：未上传 Logo 时引用默认 Logo。"""

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.packages.school.models.base import ActiveFlagMixin, Base, TimestampMixin


class Branch(ActiveFlagMixin, TimestampMixin, Base):
    __tablename__ = "branches"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(150), index=True)
    address: Mapped[str] = mapped_column(String(255), default="")
    phone: Mapped[str] = mapped_column(String(32), default="")
    email: Mapped[str] = mapped_column(String(150), default="")
    website: Mapped[str] = mapped_column(String(255), default="")
    established_year: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    logo: Mapped[str] = mapped_column(String(512))
    logo_original_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    logo_size: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    logo_mime_type: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
