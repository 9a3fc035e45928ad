import logging
from datetime import date
from typing import List, Optional
from fastapi import Depends

from app.helpers.date_range import check_date_range, at_current_time
from app.helpers.exception_handler import CustomException
from app.models.model_procedure import Procedure
from app.models.model_procedure_record import ProcedureRecord
from app.models.model_schedule import ProcedureSchedule
from app.models.model_user import User
from app.repository.repo_procedure import ProcedureRepository
from app.repository.repo_schedule import ScheduleRepository
from app.schemas.sche_procedure import (
    ProcedureCreateRequest, ProcedureUpdateRequest, ProcedureResponse,
    ProcedureRecordCreateRequest, ProcedureRecordResponse
)
from app.schemas.sche_schedule import ProcedureScheduleUpsertRequest, ProcedureScheduleResponse

logger = logging.getLogger(__name__)


class ProcedureService:
    def __init__(
        self,
        procedure_repo: ProcedureRepository = Depends(),
        schedule_repo: ScheduleRepository = Depends()
    ):
        self.procedure_repo = procedure_repo
        self.schedule_repo = schedule_repo

    def _require_procedure(self, procedure_id: int, current_user: User) -> Procedure:
        procedure = self.procedure_repo.get_owned(procedure_id, current_user.id)
        if not procedure:
            raise CustomException(http_code=404, code='404', message='Procedure not found')
        return procedure

    def get_procedures(self, current_user: User) -> List[ProcedureResponse]:
        return [ProcedureResponse.model_validate(p) for p in self.procedure_repo.get_all_by_user(current_user.id)]

    def create_procedure(self, data: ProcedureCreateRequest, current_user: User) -> ProcedureResponse:
        procedure = self.procedure_repo.create(Procedure(user_id=current_user.id, name=data.name))
        return ProcedureResponse.model_validate(procedure)

    def update_procedure(self, procedure_id: int, data: ProcedureUpdateRequest, current_user: User) -> ProcedureResponse:
        procedure = self.procedure_repo.update_owned(procedure_id, current_user.id, {'name': data.name})
        if not procedure:
            raise CustomException(http_code=404, code='404', message='Procedure not found')
        return ProcedureResponse.model_validate(procedure)

    def delete_procedure(self, procedure_id: int, current_user: User) -> None:
        if not self.procedure_repo.delete_owned(procedure_id, current_user.id):
            raise CustomException(http_code=404, code='404', message='Procedure not found')
        logger.info(f"Procedure deleted: procedure_id={procedure_id}, user_id={current_user.id}")

    def get_records(self, current_user: User, start_date: Optional[date] = None, end_date: Optional[date] = None,
                    procedure_id: Optional[int] = None) -> List[ProcedureRecordResponse]:
        check_date_range(start_date, end_date)
        records = self.procedure_repo.get_records(current_user.id, start_date, end_date, procedure_id)
        return [ProcedureRecordResponse.model_validate(r) for r in records]

    def record_procedure(self, data: ProcedureRecordCreateRequest, current_user: User) -> ProcedureRecordResponse:
        self._require_procedure(data.procedure_id, current_user)
        record = ProcedureRecord(
            user_id=current_user.id,
            procedure_id=data.procedure_id,
            procedure_date=data.procedure_date,
            performed_at=data.performed_at or at_current_time(data.procedure_date),
            notes=data.notes or None
        )
        return ProcedureRecordResponse.model_validate(self.procedure_repo.create_record(record))

    def delete_record(self, record_id: int, current_user: User) -> None:
        if not self.procedure_repo.delete_record_owned(record_id, current_user.id):
            raise CustomException(http_code=404, code='404', message='Procedure record not found')

    def get_schedules(self, current_user: User) -> List[ProcedureScheduleResponse]:
        schedules = self.schedule_repo.get_all_by_user(ProcedureSchedule, current_user.id)
        return [ProcedureScheduleResponse.model_validate(s) for s in schedules]

    def upsert_schedule(self, data: ProcedureScheduleUpsertRequest, current_user: User,
                        schedule_id: Optional[int] = None) -> ProcedureScheduleResponse:
        if schedule_id is not None and not self.schedule_repo.get_owned(ProcedureSchedule, schedule_id, current_user.id):
            raise CustomException(http_code=404, code='404', message='Schedule not found')
        self._require_procedure(data.procedure_id, current_user)
        schedule = self.schedule_repo.upsert(ProcedureSchedule, current_user.id, data.procedure_id, {
            'schedule_type': data.schedule_type.value,
            'interval_hours': data.interval_hours,
            'times_per_day': data.times_per_day,
            'notes': data.notes or None,
        })
        return ProcedureScheduleResponse.model_validate(schedule)

    def delete_schedule(self, schedule_id: int, current_user: User) -> None:
        if not self.schedule_repo.delete_owned(ProcedureSchedule, schedule_id, current_user.id):
            raise CustomException(http_code=404, code='404', message='Schedule not found')
