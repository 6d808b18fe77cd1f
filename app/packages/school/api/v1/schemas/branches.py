"""分校表单模型。"""

from typing import Optional

from pydantic import Field

from app.packages.school.api.v1.schemas.common import FormModel


class BranchCreate(FormModel):
    name: str = Field(..., min_length=1, max_length=150)
    address: str = Field("", max_length=255)
    phone: str = Field("", max_length=32)
    email: str = Field("", max_length=150)
    website: str = Field("", max_length=255)
    established_year: Optional[int] = Field(None, ge=1800, le=2100)
    is_active: bool = True


class BranchUpdate(FormModel):
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    address: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=32)
    email: Optional[str] = Field(None, max_length=150)
    website: Optional[str] = Field(None, max_length=255)
    established_year: Optional[int] = Field(None, ge=1800, le=2100)
    is_active: Optional[bool] = None
