"""教职工 CRUD。"""

from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.packages.school.crud.base import CRUDBase
from app.packages.school.models.teacher import Teacher


class CRUDTeacher(CRUDBase[Teacher]):
    def get_by_mobile(self, db: Session, mobile: str, *, exclude_id: Optional[int] = None) -> Optional[Teacher]:
        query = self.query(db).filter(Teacher.mobile == mobile)
        if exclude_id is not None:
            query = query.filter(Teacher.id != exclude_id)
        return query.first()

    def list_with_filters(
        self,
        db: Session,
        *,
        staff_type: Optional[str] = None,
        position: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[Teacher]:
        """按类型、在职状态与关键字（姓名/手机号/职务）筛选。"""
        query = self.query(db)
        if staff_type:
            query = query.filter(Teacher.staff_type == staff_type)
        if position:
            query = query.filter(Teacher.position == position)
        if search:
            like = f"%{search.strip()}%"
            query = query.filter(
                or_(Teacher.name.ilike(like), Teacher.mobile.ilike(like), Teacher.designation.ilike(like))
            )
        return query.order_by(Teacher.id.asc()).all()


teacher_crud = CRUDTeacher(Teacher)
