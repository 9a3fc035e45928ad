from typing import Any, Dict, List, Optional, Type, Union
from fastapi import Depends
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session
from app.db.base import get_db
from app.models.model_drug import Drug
from app.models.model_procedure import Procedure
from app.models.model_schedule import DrugSchedule, ProcedureSchedule

ScheduleModel = Union[Type[DrugSchedule], Type[ProcedureSchedule]]

# schedule model -> (definition foreign key column, definition model used for ordering)
_DEFINITIONS = {
    DrugSchedule: ('drug_id', Drug),
    ProcedureSchedule: ('procedure_id', Procedure),
}


class ScheduleRepository:
    def __init__(self, db_session: Session = Depends(get_db)):
        self.db = db_session

    def _insert(self, model: ScheduleModel):
        dialect = self.db.get_bind().dialect.name
        if dialect == 'postgresql':
            return postgresql.insert(model)
        if dialect == 'sqlite':
            return sqlite.insert(model)
        raise NotImplementedError(f"Schedule upsert is not supported on {dialect}")

    def get_all_by_user(self, model: ScheduleModel, user_id: int) -> List[Any]:
        key, definition = _DEFINITIONS[model]
        return self.db.query(model).join(definition, getattr(model, key) == definition.id).filter(
            model.user_id == user_id
        ).order_by(definition.name, model.id).all()

    def get_owned(self, model: ScheduleModel, schedule_id: int, user_id: int) -> Optional[Any]:
        return self.db.query(model).filter(model.id == schedule_id, model.user_id == user_id).first()

    def upsert(self, model: ScheduleModel, user_id: int, definition_id: int, values: Dict[str, Any]) -> Any:
        """Insert the (user, definition) schedule or overwrite the existing one in a single statement."""
        key, _ = _DEFINITIONS[model]
        values = dict(values, is_active=True)
        stmt = self._insert(model).values(user_id=user_id, **{key: definition_id}, **values)
        stmt = stmt.on_conflict_do_update(index_elements=['user_id', key], set_=values)
        self.db.execute(stmt)
        self.db.commit()
        return self.db.query(model).filter(model.user_id == user_id, getattr(model, key) == definition_id).one()

    def delete_owned(self, model: ScheduleModel, schedule_id: int, user_id: int) -> bool:
        deleted = self.db.query(model).filter(model.id == schedule_id, model.user_id == user_id).delete(
            synchronize_session=False
        )
        self.db.commit()
        return deleted > 0
