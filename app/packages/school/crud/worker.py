"""职员 CRUD。"""

from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.packages.school.crud.base import CRUDBase
from app.packages.school.models.worker import Worker


class CRUDWorker(CRUDBase[Worker]):
    def get_by_mobile(self, db: Session, mobile: str, *, exclude_id: Optional[int] = None) -> Optional[Worker]:
        query = self.query(db).filter(Worker.mobile == mobile)
        if exclude_id is not None:
            query = query.filter(Worker.id != exclude_id)
        return query.first()

    def list_by_department(self, db: Session, department: str) -> List[Worker]:
        """部门名称不区分大小写。"""
        return (
            self.query(db)
            .filter(func.lower(Worker.department) == department.strip().lower())
            .order_by(Worker.id.desc())
            .all()
        )


worker_crud = CRUDWorker(Worker)
