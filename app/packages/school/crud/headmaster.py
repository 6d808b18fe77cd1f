"""校长 CRUD。"""

from typing import Optional

from sqlalchemy.orm import Session

from app.packages.school.crud.base import CRUDBase
from app.packages.school.models.headmaster import Headmaster


class CRUDHeadmaster(CRUDBase[Headmaster]):
    def get_by_mobile(self, db: Session, mobile: str, *, exclude_id: Optional[int] = None) -> Optional[Headmaster]:
        query = self.query(db).filter(Headmaster.mobile == mobile)
        if exclude_id is not None:
            query = query.filter(Headmaster.id != exclude_id)
        return query.first()

    def get_current(self, db: Session) -> Optional[Headmaster]:
        return self.query(db).filter(Headmaster.is_current.is_(True)).first()

    def set_current(self, db: Session, headmaster: Headmaster) -> Headmaster:
        """在同一事务内清除其他记录的 `is_current` 并标记目标记录。"""
        try:
            (
                db.query(Headmaster)
                .filter(Headmaster.id != headmaster.id, Headmaster.is_current.is_(True))
                .update({Headmaster.is_current: False}, synchronize_session=False)
            )
            headmaster.is_current = True
            db.add(headmaster)
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(headmaster)
        return headmaster


headmaster_crud = CRUDHeadmaster(Headmaster)
