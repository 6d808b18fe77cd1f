"""轮播 CRUD。"""

from app.packages.school.crud.base import CRUDBase
from app.packages.school.models.slider import Slider

slider_crud = CRUDBase(Slider)
