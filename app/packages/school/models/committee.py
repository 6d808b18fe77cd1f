"""管理委员会成员模型。"""

from typing import Optional

from sqlalchemy import JSON, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.packages.school.models.base import ActiveFlagMixin, Base, TimestampMixin


class CommitteeMember(ActiveFlagMixin, TimestampMixin, Base):
    __tablename__ = "managing_committee"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(100))
    designation: Mapped[str] = mapped_column(String(100), default="")
    phone: Mapped[str] = mapped_column(String(32), default="")
    # {"facebook": "...", "linkedin": "..."}
    social: Mapped[dict[str, str]] = mapped_column(JSON, default=dict)

    image: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    image_original_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    image_size: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    image_mime_type: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
