"""管理委员会 CRUD。"""

from app.packages.school.crud.base import CRUDBase
from app.packages.school.models.committee import CommitteeMember

committee_crud = CRUDBase(CommitteeMember)
