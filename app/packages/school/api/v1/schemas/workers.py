"""职员表单模型。"""

from typing import Optional

from pydantic import Field

from app.packages.school.api.v1.schemas.common import FormModel
from app.packages.school.api.v1.schemas.teachers import MOBILE_PATTERN


class WorkerCreate(FormModel):
    name: str = Field(..., min_length=1, max_length=100)
    mobile: str = Field(..., pattern=MOBILE_PATTERN)
    designation: str = Field(..., min_length=1, max_length=100)
    department: str = Field("", max_length=100)
    email: str = Field("", max_length=150)
    address: str = Field("", max_length=255)
    joining_date: str = Field("", max_length=32)
    salary: str = Field("", max_length=32)
    experience: str = Field("", max_length=255)
    blood_group: str = Field("", max_length=8)
    gender: str = Field("", max_length=16)
    date_of_birth: str = Field("", max_length=32)
    responsibilities: str = ""
    work_shift: str = Field("", max_length=32)
    nid_number: str = Field("", max_length=64)
    is_active: bool = True


class WorkerUpdate(FormModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    mobile: Optional[str] = Field(None, pattern=MOBILE_PATTERN)
    designation: Optional[str] = Field(None, min_length=1, max_length=100)
    department: Optional[str] = Field(None, max_length=100)
    email: Optional[str] = Field(None, max_length=150)
    address: Optional[str] = Field(None, max_length=255)
    joining_date: Optional[str] = Field(None, max_length=32)
    salary: Optional[str] = Field(None, max_length=32)
    experience: Optional[str] = Field(None, max_length=255)
    blood_group: Optional[str] = Field(None, max_length=8)
    gender: Optional[str] = Field(None, max_length=16)
    date_of_birth: Optional[str] = Field(None, max_length=32)
    responsibilities: Optional[str] = None
    work_shift: Optional[str] = Field(None, max_length=32)
    nid_number: Optional[str] = Field(None, max_length=64)
    is_active: Optional[bool] = None
