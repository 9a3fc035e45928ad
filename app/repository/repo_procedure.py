from datetime import date
from typing import Any, Dict, List, Optional
from fastapi import Depends
from sqlalchemy.orm import Session
from app.db.base import get_db
from app.models.model_procedure import Procedure
from app.models.model_procedure_record import ProcedureRecord
from app.repository.repo_drug import RECENT_LIMIT


class ProcedureRepository:
    def __init__(self, db_session: Session = Depends(get_db)):
        self.db = db_session

    def get_all_by_user(self, user_id: int) -> List[Procedure]:
        return self.db.query(Procedure).filter(Procedure.user_id == user_id).order_by(Procedure.name, Procedure.id).all()

    def get_owned(self, procedure_id: int, user_id: int) -> Optional[Procedure]:
        return self.db.query(Procedure).filter(Procedure.id == procedure_id, Procedure.user_id == user_id).first()

    def create(self, procedure: Procedure) -> Procedure:
        self.db.add(procedure)
        self.db.commit()
        self.db.refresh(procedure)
        return procedure

    def update_owned(self, procedure_id: int, user_id: int, values: Dict[str, Any]) -> Optional[Procedure]:
        updated = self.db.query(Procedure).filter(Procedure.id == procedure_id, Procedure.user_id == user_id).update(
            values, synchronize_session=False
        )
        self.db.commit()
        if not updated:
            return None
        return self.get_owned(procedure_id, user_id)

    def delete_owned(self, procedure_id: int, user_id: int) -> bool:
        deleted = self.db.query(Procedure).filter(Procedure.id == procedure_id, Procedure.user_id == user_id).delete(
            synchronize_session=False
        )
        self.db.commit()
        return deleted > 0

    def get_records(self, user_id: int, start_date: Optional[date] = None, end_date: Optional[date] = None,
                    procedure_id: Optional[int] = None, oldest_first: bool = False) -> List[ProcedureRecord]:
        query = self.db.query(ProcedureRecord).filter(ProcedureRecord.user_id == user_id)
        if procedure_id is not None:
            query = query.filter(ProcedureRecord.procedure_id == procedure_id)
        if oldest_first:
            query = query.order_by(
                ProcedureRecord.procedure_date.asc(),
                ProcedureRecord.performed_at.asc(),
                ProcedureRecord.id.asc()
            )
        else:
            query = query.order_by(
                ProcedureRecord.procedure_date.desc(),
                ProcedureRecord.performed_at.desc(),
                ProcedureRecord.id.desc()
            )
        if start_date is not None and end_date is not None:
            return query.filter(ProcedureRecord.procedure_date.between(start_date, end_date)).all()
        return query.limit(RECENT_LIMIT).all()

    def get_records_on(self, user_id: int, day: date) -> List[ProcedureRecord]:
        return self.db.query(ProcedureRecord).filter(
            ProcedureRecord.user_id == user_id,
            ProcedureRecord.procedure_date == day
        ).order_by(ProcedureRecord.performed_at.desc(), ProcedureRecord.id.desc()).all()

    def create_record(self, record: ProcedureRecord) -> ProcedureRecord:
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        return record

    def delete_record_owned(self, record_id: int, user_id: int) -> bool:
        deleted = self.db.query(ProcedureRecord).filter(
            ProcedureRecord.id == record_id,
            ProcedureRecord.user_id == user_id
        ).delete(synchronize_session=False)
        self.db.commit()
        return deleted > 0
