"""通知公告 CRUD。"""

from typing import List, Optional, Tuple

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.packages.school.crud.base import CRUDBase
from app.packages.school.models.circular import Circular


class CRUDCircular(CRUDBase[Circular]):
    def list_paginated(
        self,
        db: Session,
        *,
        search: Optional[str] = None,
        skip: int = 0,
        limit: int = 10,
    ) -> Tuple[List[Circular], int]:
        """标题、描述、分类模糊搜索，按创建时间倒序分页。"""
        query = self.query(db)
        if search:
            like = f"%{search.strip()}%"
            query = query.filter(
                or_(Circular.title.ilike(like), Circular.description.ilike(like), Circular.category.ilike(like))
            )
        total = query.count()
        items = (
            query.order_by(Circular.create_time.desc(), Circular.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )
        return items, total


circular_crud = CRUDCircular(Circular)
