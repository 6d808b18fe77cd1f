"""轮播表单模型。"""

from pydantic import Field

from app.packages.school.api.v1.schemas.common import FormModel


class SliderCreate(FormModel):
    title: str = Field(..., min_length=1, max_length=200)
    auto_play: bool = True
    speed: int = Field(3000, ge=500, le=60000)
