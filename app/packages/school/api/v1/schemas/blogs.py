"""博客文章表单模型。"""

from typing import Optional

from pydantic import Field

from app.packages.school.api.v1.schemas.common import FormModel


class BlogCreate(FormModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    teacher: str = Field("", max_length=100)
    author: str = Field("", max_length=100)
    category: str = Field("", max_length=100)
    status: str = Field("Draft", max_length=32)
    is_premium: bool = False
    is_featured: bool = False
    tags: str = Field("", max_length=255)
    is_active: bool = True


class BlogUpdate(FormModel):
    """所有字段可选，未提交的字段保持原值。"""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1)
    teacher: Optional[str] = Field(None, max_length=100)
    author: Optional[str] = Field(None, max_length=100)
    category: Optional[str] = Field(None, max_length=100)
    status: Optional[str] = Field(None, max_length=32)
    is_premium: Optional[bool] = None
    is_featured: Optional[bool] = None
    tags: Optional[str] = Field(None, max_length=255)
    is_active: Optional[bool] = None
