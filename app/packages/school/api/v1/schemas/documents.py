"""文档表单模型。"""

from typing import Optional

from pydantic import Field

from app.packages.school.api.v1.schemas.common import FormModel


class DocumentCreate(FormModel):
    title: str = Field(..., min_length=1, max_length=255)
    category: str = Field("", max_length=100)
    teacher: str = Field("", max_length=100)
    description: Optional[str] = None
    is_active: bool = True


class DocumentUpdate(FormModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    category: Optional[str] = Field(None, max_length=100)
    teacher: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    is_active: Optional[bool] = None
