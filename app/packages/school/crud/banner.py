"""横幅 CRUD。"""

from app.packages.school.crud.base import CRUDBase
from app.packages.school.models.banner import Banner

banner_crud = CRUDBase(Banner)
