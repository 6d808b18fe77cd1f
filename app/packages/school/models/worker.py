"""职员（后勤、保安等非教学人员）模型。"""

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.packages.school.models.base import ActiveFlagMixin, Base, TimestampMixin


class Worker(ActiveFlagMixin, TimestampMixin, Base):
    __tablename__ = "workers"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(100), index=True)
    mobile: Mapped[str] = mapped_column(String(32), unique=True, index=True)
    designation: Mapped[str] = mapped_column(String(100))
    department: Mapped[str] = mapped_column(String(100), default="", index=True)
    email: Mapped[str] = mapped_column(String(150), default="")
    address: Mapped[str] = mapped_column(String(255), default="")
    joining_date: Mapped[str] = mapped_column(String(32), default="")
    salary: Mapped[str] = mapped_column(String(32), default="")
    experience: Mapped[str] = mapped_column(String(255), default="")
    blood_group: Mapped[str] = mapped_column(String(8), default="")
    gender: Mapped[str] = mapped_column(String(16), default="")
    date_of_birth: Mapped[str] = mapped_column(String(32), default="")
    responsibilities: Mapped[str] = mapped_column(Text, default="")
    work_shift: Mapped[str] = mapped_column(String(32), default="")
    nid_number: Mapped[str] = mapped_column(String(64), default="")

    photo: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    photo_original_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    photo_size: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    photo_mime_type: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
