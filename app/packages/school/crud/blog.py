"""博客 CRUD。"""

from app.packages.school.crud.base import CRUDBase
from app.packages.school.models.blog import Blog

blog_crud = CRUDBase(Blog)
