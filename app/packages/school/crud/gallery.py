"""相册照片 CRUD。"""

from app.packages.school.crud.base import CRUDBase
from app.packages.school.models.gallery import GalleryPhoto

gallery_photo_crud = CRUDBase(GalleryPhoto)
