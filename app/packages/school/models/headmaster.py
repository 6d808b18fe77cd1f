"""历任校长模型：同一时刻至多一位 `is_current`。"""

from typing import Optional

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import expression

from app.packages.school.models.base import ActiveFlagMixin, Base, TimestampMixin


class Headmaster(ActiveFlagMixin, TimestampMixin, Base):
    __tablename__ = "headmasters"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(100), index=True)
    mobile: Mapped[str] = mapped_column(String(32), unique=True, index=True)
    email: Mapped[str] = mapped_column(String(150), default="")
    address: Mapped[str] = mapped_column(String(255), default="")
    joining_date: Mapped[str] = mapped_column(String(32), default="")
    qualifications: Mapped[str] = mapped_column(String(255), default="")
    experience: Mapped[str] = mapped_column(String(255), default="")
    blood_group: Mapped[str] = mapped_column(String(8), default="")
    gender: Mapped[str] = mapped_column(String(16), default="")
    message: Mapped[str] = mapped_column(Text, default="")
    is_current: Mapped[bool] = mapped_column(
        Boolean, server_default=expression.false(), default=False, nullable=False, index=True
    )

    photo: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    photo_original_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    photo_size: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    photo_mime_type: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
