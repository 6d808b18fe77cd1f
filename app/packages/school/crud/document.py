"""文档 CRUD。"""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.packages.school.crud.base import CRUDBase
from app.packages.school.models.document import Document


class CRUDDocument(CRUDBase[Document]):
    def get_by_title(self, db: Session, title: str, *, exclude_id: Optional[int] = None) -> Optional[Document]:
        """按标题精确匹配（忽略大小写）查找，可排除当前记录。"""
        query = self.query(db).filter(func.lower(Document.title) == title.strip().lower())
        if exclude_id is not None:
            query = query.filter(Document.id != exclude_id)
        return query.first()


document_crud = CRUDDocument(Document)
