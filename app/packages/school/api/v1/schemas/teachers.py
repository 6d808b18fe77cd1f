"""教职工表单模型。"""

from typing import Literal, Optional

from pydantic import Field

from app.packages.school.api.v1.schemas.common import FormModel

MOBILE_PATTERN = r"^\+?[0-9][0-9\- ]{5,30}$"

Position = Literal["Active", "Deactivated"]


class TeacherCreate(FormModel):
    name: str = Field(..., min_length=1, max_length=100)
    mobile: str = Field(..., pattern=MOBILE_PATTERN)
    smart_id: str = Field("", max_length=64)
    finger_id: str = Field("", max_length=64)
    designation: str = Field("", max_length=100)
    bio: str = ""
    salary: str = Field("", max_length=32)
    position: Position = "Active"
    session: str = Field("", max_length=32)
    staff_type: str = Field("Teacher", min_length=1, max_length=32)


class TeacherUpdate(FormModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    mobile: Optional[str] = Field(None, pattern=MOBILE_PATTERN)
    smart_id: Optional[str] = Field(None, max_length=64)
    finger_id: Optional[str] = Field(None, max_length=64)
    designation: Optional[str] = Field(None, max_length=100)
    bio: Optional[str] = None
    salary: Optional[str] = Field(None, max_length=32)
    position: Optional[Position] = None
    session: Optional[str] = Field(None, max_length=32)
    staff_type: Optional[str] = Field(None, min_length=1, max_length=32)
