"""相册表单模型：一次上传的所有照片共用同一说明。"""

from pydantic import Field

from app.packages.school.api.v1.schemas.common import FormModel


class GalleryPhotoCreate(FormModel):
    caption: str = Field("", max_length=255)
    is_active: bool = True
