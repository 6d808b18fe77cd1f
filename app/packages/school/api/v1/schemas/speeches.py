"""致辞表单模型：``type`` 唯一（如 chairman、headmaster），``body`` 为富文本。"""

from typing import Optional

from pydantic import Field

from app.packages.school.api.v1.schemas.common import FormModel


class SpeechCreate(FormModel):
    type: str = Field(..., min_length=1, max_length=64)
    body: str = Field(..., min_length=1)
    is_active: bool = True


class SpeechUpdate(FormModel):
    type: Optional[str] = Field(None, min_length=1, max_length=64)
    body: Optional[str] = Field(None, min_length=1)
    is_active: Optional[bool] = None
