"""横幅表单模型。"""

from pydantic import Field

from app.packages.school.api.v1.schemas.common import FormModel


class BannerCreate(FormModel):
    title: str = Field(..., min_length=1, max_length=200)
    link: str = Field("", max_length=512)
    is_active: bool = True
