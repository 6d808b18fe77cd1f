"""致辞 CRUD。"""

from typing import Optional

from sqlalchemy.orm import Session

from app.packages.school.crud.base import CRUDBase
from app.packages.school.models.speech import Speech


class CRUDSpeech(CRUDBase[Speech]):
    def get_by_type(self, db: Session, speech_type: str, *, exclude_id: Optional[int] = None) -> Optional[Speech]:
        query = self.query(db).filter(Speech.type == speech_type)
        if exclude_id is not None:
            query = query.filter(Speech.id != exclude_id)
        return query.first()


speech_crud = CRUDSpeech(Speech)
