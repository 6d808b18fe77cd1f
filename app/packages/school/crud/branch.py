"""分校 CRUD。"""

from app.packages.school.crud.base import CRUDBase
from app.packages.school.models.branch import Branch

branch_crud = CRUDBase(Branch)
