"""校长表单模型。"""

from typing import Optional

from pydantic import Field

from app.packages.school.api.v1.schemas.common import FormModel
from app.packages.school.api.v1.schemas.teachers import MOBILE_PATTERN


class HeadmasterCreate(FormModel):
    name: str = Field(..., min_length=1, max_length=100)
    mobile: str = Field(..., pattern=MOBILE_PATTERN)
    email: str = Field("", max_length=150)
    address: str = Field("", max_length=255)
    joining_date: str = Field("", max_length=32)
    qualifications: str = Field("", max_length=255)
    experience: str = Field("", max_length=255)
    blood_group: str = Field("", max_length=8)
    gender: str = Field("", max_length=16)
    message: str = ""
    is_current: bool = False
    is_active: bool = True


class HeadmasterUpdate(FormModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    mobile: Optional[str] = Field(None, pattern=MOBILE_PATTERN)
    email: Optional[str] = Field(None, max_length=150)
    address: Optional[str] = Field(None, max_length=255)
    joining_date: Optional[str] = Field(None, max_length=32)
    qualifications: Optional[str] = Field(None, max_length=255)
    experience: Optional[str] = Field(None, max_length=255)
    blood_group: Optional[str] = Field(None, max_length=8)
    gender: Optional[str] = Field(None, max_length=16)
    message: Optional[str] = None
    is_active: Optional[bool] = None
