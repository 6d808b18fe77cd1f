"""教职工名册模型（教师与职员共用，按 `staff_type` 区分）。"""

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.packages.school.models.base import ActiveFlagMixin, Base, TimestampMixin


class Teacher(ActiveFlagMixin, TimestampMixin, Base):
    __tablename__ = "teachers"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(100), index=True)
    mobile: Mapped[str] = mapped_column(String(32), unique=True, index=True)
    smart_id: Mapped[str] = mapped_column(String(64), default="")
    finger_id: Mapped[str] = mapped_column(String(64), default="")
    designation: Mapped[str] = mapped_column(String(100), default="")
    bio: Mapped[str] = mapped_column(Text, default="")
    salary: Mapped[str] = mapped_column(String(32), default="")
    # Active / Deactivated；为 Deactivated 时 is_active 同步为 False
    position: Mapped[str] = mapped_column(String(32), default="Active")
    session: Mapped[str] = mapped_column(String(32), default="")
    staff_type: Mapped[str] = mapped_column(String(32), default="Teacher", index=True)

    photo: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    photo_original_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    photo_size: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    photo_mime_type: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
