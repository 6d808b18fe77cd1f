"""CRUD 基类：为各实体提供通用的数据访问方法。"""

from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import not_, or_
from sqlalchemy.orm import Session

from app.packages.school.models.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class CRUDBase(Generic[ModelType]):
    """封装常见的查询、创建与保存逻辑，减少重复代码。"""

    def __init__(self, model: Type[ModelType]):
        self.model = model

    def query(self, db: Session):
        return db.query(self.model)

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        return self.query(db).filter(self.model.id == id).first()

    def get_for_update(self, db: Session, id: Any) -> Optional[ModelType]:
        """带行锁读取，锁持续到本事务提交或回滚（SQLite 下退化为普通读取）。"""
        return self.query(db).filter(self.model.id == id).with_for_update().first()

    def list_all(self, db: Session, *, newest_first: bool = False) -> List[ModelType]:
        query = self.query(db)
        if newest_first and hasattr(self.model, "create_time"):
            query = query.order_by(self.model.create_time.desc(), self.model.id.desc())
        else:
            query = query.order_by(self.model.id.asc())
        return query.all()

    def create(self, db: Session, obj_in: Dict[str, Any], *, auto_commit: bool = True) -> ModelType:
        db_obj = self.model(**obj_in)
        db.add(db_obj)
        if auto_commit:
            db.commit()
            db.refresh(db_obj)
        else:
            db.flush()
        return db_obj

    def save(self, db: Session, db_obj: ModelType, *, auto_commit: bool = True) -> ModelType:
        db.add(db_obj)
        if auto_commit:
            db.commit()
            db.refresh(db_obj)
        return db_obj

    def hard_delete(self, db: Session, db_obj: ModelType, *, auto_commit: bool = True) -> None:
        """物理删除行，并提交事务。"""
        db.delete(db_obj)
        if auto_commit:
            try:
                db.commit()
            except Exception:
                db.rollback()
                raise

    def increment(self, db: Session, id: Any, column: str) -> Optional[int]:
        """以单条 ``UPDATE ... SET n = n + 1`` 原子自增计数列，返回新值；记录不存在返回 None。"""
        target = getattr(self.model, column)
        affected = (
            db.query(self.model)
            .filter(self.model.id == id)
            .update({target: target + 1}, synchronize_session=False)
        )
        if not affected:
            db.rollback()
            return None
        db.commit()
        return db.query(target).filter(self.model.id == id).scalar()

    def toggle(self, db: Session, id: Any, column: str = "is_active") -> Optional[ModelType]:
        """以单条 ``UPDATE ... SET flag = NOT flag`` 翻转布尔列，返回最新记录；记录不存在返回 None。"""
        target = getattr(self.model, column)
        affected = (
            db.query(self.model)
            .filter(self.model.id == id)
            .update({target: not_(target)}, synchronize_session=False)
        )
        if not affected:
            db.rollback()
            return None
        db.commit()
        return self.get(db, id)

    def embeds(self, db: Session, columns: Sequence[str], text: str, *, exclude_id: Any = None) -> bool:
        """是否有（除 ``exclude_id`` 外的）记录在任一文本列中包含 ``text``，用于富文本内嵌图片的引用判断。"""
        if not columns:
            return False
        query = self.query(db).filter(
            or_(*(getattr(self.model, column).contains(text, autoescape=True) for column in columns))
        )
        if exclude_id is not None:
            query = query.filter(self.model.id != exclude_id)
        return query.first() is not None
