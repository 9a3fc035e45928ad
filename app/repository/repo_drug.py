from datetime import date
from typing import Any, Dict, List, Optional
from fastapi import Depends
from sqlalchemy.orm import Session
from app.db.base import get_db
from app.models.model_drug import Drug
from app.models.model_drug_consumption import DrugConsumption

RECENT_LIMIT = 100


class DrugRepository:
    def __init__(self, db_session: Session = Depends(get_db)):
        self.db = db_session

    def get_all_by_user(self, user_id: int) -> List[Drug]:
        return self.db.query(Drug).filter(Drug.user_id == user_id).order_by(Drug.name, Drug.id).all()

    def get_owned(self, drug_id: int, user_id: int) -> Optional[Drug]:
        return self.db.query(Drug).filter(Drug.id == drug_id, Drug.user_id == user_id).first()

    def create(self, drug: Drug) -> Drug:
        self.db.add(drug)
        self.db.commit()
        self.db.refresh(drug)
        return drug

    def update_owned(self, drug_id: int, user_id: int, values: Dict[str, Any]) -> Optional[Drug]:
        updated = self.db.query(Drug).filter(Drug.id == drug_id, Drug.user_id == user_id).update(
            values, synchronize_session=False
        )
        self.db.commit()
        if not updated:
            return None
        return self.get_owned(drug_id, user_id)

    def delete_owned(self, drug_id: int, user_id: int) -> bool:
        # consumptions and schedule go with it through ON DELETE CASCADE
        deleted = self.db.query(Drug).filter(Drug.id == drug_id, Drug.user_id == user_id).delete(
            synchronize_session=False
        )
        self.db.commit()
        return deleted > 0

    def get_consumptions(self, user_id: int, start_date: Optional[date] = None, end_date: Optional[date] = None,
                         drug_id: Optional[int] = None) -> List[DrugConsumption]:
        query = self.db.query(DrugConsumption).filter(DrugConsumption.user_id == user_id)
        if drug_id is not None:
            query = query.filter(DrugConsumption.drug_id == drug_id)
        query = query.order_by(
            DrugConsumption.consumption_date.desc(),
            DrugConsumption.consumed_at.desc(),
            DrugConsumption.id.desc()
        )
        if start_date is not None and end_date is not None:
            return query.filter(DrugConsumption.consumption_date.between(start_date, end_date)).all()
        return query.limit(RECENT_LIMIT).all()

    def get_consumptions_on(self, user_id: int, day: date) -> List[DrugConsumption]:
        return self.db.query(DrugConsumption).filter(
            DrugConsumption.user_id == user_id,
            DrugConsumption.consumption_date == day
        ).order_by(DrugConsumption.consumed_at.desc(), DrugConsumption.id.desc()).all()

    def create_consumption(self, consumption: DrugConsumption) -> DrugConsumption:
        self.db.add(consumption)
        self.db.commit()
        self.db.refresh(consumption)
        return consumption

    def delete_consumption_owned(self, consumption_id: int, user_id: int) -> bool:
        deleted = self.db.query(DrugConsumption).filter(
            DrugConsumption.id == consumption_id,
            DrugConsumption.user_id == user_id
        ).delete(synchronize_session=False)
        self.db.commit()
        return deleted > 0
