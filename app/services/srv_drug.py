import logging
from datetime import date
from typing import List, Optional
from fastapi import Depends

from app.helpers.date_range import check_date_range, at_current_time
from app.helpers.exception_handler import CustomException
from app.models.model_drug import Drug
from app.models.model_drug_consumption import DrugConsumption
from app.models.model_schedule import DrugSchedule
from app.models.model_user import User
from app.repository.repo_drug import DrugRepository
from app.repository.repo_procedure import ProcedureRepository
from app.repository.repo_schedule import ScheduleRepository
from app.schemas.sche_drug import (
    DrugCreateRequest, DrugUpdateRequest, DrugResponse, ConsumptionCreateRequest, ConsumptionResponse
)
from app.schemas.sche_procedure import ProcedureRecordResponse
from app.schemas.sche_schedule import DrugScheduleUpsertRequest, DrugScheduleResponse
from app.schemas.sche_summary import TodaySummaryResponse

logger = logging.getLogger(__name__)


class DrugService:
    def __init__(
        self,
        drug_repo: DrugRepository = Depends(),
        procedure_repo: ProcedureRepository = Depends(),
        schedule_repo: ScheduleRepository = Depends()
    ):
        self.drug_repo = drug_repo
        self.procedure_repo = procedure_repo
        self.schedule_repo = schedule_repo

    def _require_drug(self, drug_id: int, current_user: User) -> Drug:
        # another user's drug and a missing drug are both "not found"
        drug = self.drug_repo.get_owned(drug_id, current_user.id)
        if not drug:
            raise CustomException(http_code=404, code='404', message='Drug not found')
        return drug

    def get_drugs(self, current_user: User) -> List[DrugResponse]:
        drugs = self.drug_repo.get_all_by_user(current_user.id)
        return [DrugResponse.model_validate(d) for d in drugs]

    def create_drug(self, data: DrugCreateRequest, current_user: User) -> DrugResponse:
        drug = Drug(
            user_id=current_user.id,
            name=data.name,
            unit_type=data.unit_type.value,
            default_dosage=data.default_dosage
        )
        return DrugResponse.model_validate(self.drug_repo.create(drug))

    def update_drug(self, drug_id: int, data: DrugUpdateRequest, current_user: User) -> DrugResponse:
        drug = self.drug_repo.update_owned(drug_id, current_user.id, {
            'name': data.name,
            'unit_type': data.unit_type.value,
            'default_dosage': data.default_dosage,
        })
        if not drug:
            raise CustomException(http_code=404, code='404', message='Drug not found')
        return DrugResponse.model_validate(drug)

    def delete_drug(self, drug_id: int, current_user: User) -> None:
        if not self.drug_repo.delete_owned(drug_id, current_user.id):
            raise CustomException(http_code=404, code='404', message='Drug not found')
        logger.info(f"Drug deleted: drug_id={drug_id}, user_id={current_user.id}")

    def get_consumptions(self, current_user: User, start_date: Optional[date] = None,
                         end_date: Optional[date] = None, drug_id: Optional[int] = None) -> List[ConsumptionResponse]:
        check_date_range(start_date, end_date)
        consumptions = self.drug_repo.get_consumptions(current_user.id, start_date, end_date, drug_id)
        return [ConsumptionResponse.model_validate(c) for c in consumptions]

    def record_consumption(self, data: ConsumptionCreateRequest, current_user: User) -> ConsumptionResponse:
        self._require_drug(data.drug_id, current_user)
        consumption = DrugConsumption(
            user_id=current_user.id,
            drug_id=data.drug_id,
            consumption_date=data.consumption_date,
            consumed_at=data.consumed_at or at_current_time(data.consumption_date),
            quantity=data.quantity,
            unit_type=data.unit_type.value,
            notes=data.notes or None
        )
        return ConsumptionResponse.model_validate(self.drug_repo.create_consumption(consumption))

    def delete_consumption(self, consumption_id: int, current_user: User) -> None:
        if not self.drug_repo.delete_consumption_owned(consumption_id, current_user.id):
            raise CustomException(http_code=404, code='404', message='Consumption record not found')

    def get_today_summary(self, current_user: User) -> TodaySummaryResponse:
        today = date.today()
        consumptions = self.drug_repo.get_consumptions_on(current_user.id, today)
        records = self.procedure_repo.get_records_on(current_user.id, today)
        return TodaySummaryResponse(
            date=today,
            consumptions=[ConsumptionResponse.model_validate(c) for c in consumptions],
            procedures=[ProcedureRecordResponse.model_validate(r) for r in records]
        )

    def get_schedules(self, current_user: User) -> List[DrugScheduleResponse]:
        schedules = self.schedule_repo.get_all_by_user(DrugSchedule, current_user.id)
        return [DrugScheduleResponse.model_validate(s) for s in schedules]

    def upsert_schedule(self, data: DrugScheduleUpsertRequest, current_user: User,
                        schedule_id: Optional[int] = None) -> DrugScheduleResponse:
        if schedule_id is not None and not self.schedule_repo.get_owned(DrugSchedule, schedule_id, current_user.id):
            raise CustomException(http_code=404, code='404', message='Schedule not found')
        self._require_drug(data.drug_id, current_user)
        schedule = self.schedule_repo.upsert(DrugSchedule, current_user.id, data.drug_id, {
            'schedule_type': data.schedule_type.value,
            'interval_hours': data.interval_hours,
            'times_per_day': data.times_per_day,
            'notes': data.notes or None,
        })
        return DrugScheduleResponse.model_validate(schedule)

    def delete_schedule(self, schedule_id: int, current_user: User) -> None:
        if not self.schedule_repo.delete_owned(DrugSchedule, schedule_id, current_user.id):
            raise CustomException(http_code=404, code='404', message='Schedule not found')
