"""管理委员会表单模型。``social`` 以 JSON 对象字符串提交。"""

from typing import Dict, Optional

from pydantic import Field, Json

from app.packages.school.api.v1.schemas.common import FormModel


class CommitteeMemberCreate(FormModel):
    name: str = Field(..., min_length=1, max_length=100)
    designation: str = Field("", max_length=100)
    phone: str = Field("", max_length=32)
    social: Json[Dict[str, str]] = Field(default_factory=dict)
    is_active: bool = True


class CommitteeMemberUpdate(FormModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    designation: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=32)
    social: Optional[Json[Dict[str, str]]] = None
    is_active: Optional[bool] = None
