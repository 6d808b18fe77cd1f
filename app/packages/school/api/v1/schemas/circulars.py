"""通知公告表单模型。"""

from typing import Optional

from pydantic import Field

from app.packages.school.api.v1.schemas.common import FormModel


class CircularCreate(FormModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    category: str = Field("general", min_length=1, max_length=64)
    target_audience: str = Field("all", min_length=1, max_length=64)
    is_active: bool = True


class CircularUpdate(FormModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    category: Optional[str] = Field(None, min_length=1, max_length=64)
    target_audience: Optional[str] = Field(None, min_length=1, max_length=64)
    is_active: Optional[bool] = None
