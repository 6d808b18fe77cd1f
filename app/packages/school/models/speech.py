"""致辞模型：正文为富文本，可内嵌通过编辑器上传的图片。"""

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.packages.school.models.base import ActiveFlagMixin, Base, TimestampMixin


class Speech(ActiveFlagMixin, TimestampMixin, Base):
    __tablename__ = "speeches"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    # 如 headmaster / chairman，每种类型仅允许一条
    type: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    body: Mapped[str] = mapped_column(Text)

    image: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    image_original_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    image_size: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    image_mime_type: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
