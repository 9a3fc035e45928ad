import logging
from datetime import date
from typing import Any, Optional

from fastapi import APIRouter, Depends, Query

from app.helpers.login_manager import login_required
from app.models.model_user import User
from app.schemas.sche_base import MessageResponse
from app.schemas.sche_drug import (
    DrugCreateRequest, DrugUpdateRequest, DrugListResponse, DrugItemResponse,
    ConsumptionCreateRequest, ConsumptionListResponse, ConsumptionItemResponse,
    DrugScheduleListResponse, DrugScheduleItemResponse
)
from app.schemas.sche_schedule import DrugScheduleUpsertRequest
from app.schemas.sche_summary import TodaySummaryResponse
from app.services.srv_drug import DrugService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get('', response_model=DrugListResponse)
def get_drugs(current_user: User = Depends(login_required), drug_service: DrugService = Depends()) -> Any:
    return DrugListResponse(drugs=drug_service.get_drugs(current_user))


@router.post('', status_code=201, response_model=DrugItemResponse)
def create_drug(drug_data: DrugCreateRequest,
                current_user: User = Depends(login_required),
                drug_service: DrugService = Depends()) -> Any:
    logger.info(f"create_drug request: {drug_data.name}")
    drug = drug_service.create_drug(drug_data, current_user)
    logger.info(f"create_drug success: drug_id={drug.id}")
    return DrugItemResponse(drug=drug)


@router.get('/consumptions', response_model=ConsumptionListResponse)
def get_consumptions(
    start_date: Optional[date] = Query(None, description="Range start (YYYY-MM-DD), used together with end_date"),
    end_date: Optional[date] = Query(None, description="Range end (YYYY-MM-DD), used together with start_date"),
    drug_id: Optional[int] = Query(None),
    current_user: User = Depends(login_required),
    drug_service: DrugService = Depends()
) -> Any:
    """
    List consumption events, newest first.

    Without both `start_date` and `end_date` only the 100 most recent events are returned.
    """
    consumptions = drug_service.get_consumptions(current_user, start_date, end_date, drug_id)
    return ConsumptionListResponse(consumptions=consumptions)


@router.post('/consumptions', status_code=201, response_model=ConsumptionItemResponse)
def record_consumption(consumption_data: ConsumptionCreateRequest,
                       current_user: User = Depends(login_required),
                       drug_service: DrugService = Depends()) -> Any:
    """
    Record one taken dose.

    When `consumed_at` is omitted it defaults to `consumption_date` at the current time of day.
    """
    logger.info(f"record_consumption request: drug_id={consumption_data.drug_id}")
    return ConsumptionItemResponse(consumption=drug_service.record_consumption(consumption_data, current_user))


@router.delete('/consumptions/{consumption_id}', response_model=MessageResponse)
def delete_consumption(consumption_id: int,
                       current_user: User = Depends(login_required),
                       drug_service: DrugService = Depends()) -> Any:
    drug_service.delete_consumption(consumption_id, current_user)
    return MessageResponse(message='Consumption record deleted successfully')


@router.get('/schedules', response_model=DrugScheduleListResponse)
def get_schedules(current_user: User = Depends(login_required), drug_service: DrugService = Depends()) -> Any:
    return DrugScheduleListResponse(schedules=drug_service.get_schedules(current_user))


@router.post('/schedules', status_code=201, response_model=DrugScheduleItemResponse)
def upsert_schedule(schedule_data: DrugScheduleUpsertRequest,
                    current_user: User = Depends(login_required),
                    drug_service: DrugService = Depends()) -> Any:
    """
    Create the schedule of a drug, or replace it if the drug already has one.
    """
    return DrugScheduleItemResponse(schedule=drug_service.upsert_schedule(schedule_data, current_user))


@router.put('/schedules/{schedule_id}', status_code=201, response_model=DrugScheduleItemResponse)
def update_schedule(schedule_id: int,
                    schedule_data: DrugScheduleUpsertRequest,
                    current_user: User = Depends(login_required),
                    drug_service: DrugService = Depends()) -> Any:
    schedule = drug_service.upsert_schedule(schedule_data, current_user, schedule_id=schedule_id)
    return DrugScheduleItemResponse(schedule=schedule)


@router.delete('/schedules/{schedule_id}', response_model=MessageResponse)
def delete_schedule(schedule_id: int,
                    current_user: User = Depends(login_required),
                    drug_service: DrugService = Depends()) -> Any:
    drug_service.delete_schedule(schedule_id, current_user)
    return MessageResponse(message='Schedule deleted successfully')


@router.get('/summary/today', response_model=TodaySummaryResponse)
def get_today_summary(current_user: User = Depends(login_required), drug_service: DrugService = Depends()) -> Any:
    """
    Consumptions and procedure records of the server's current calendar day.
    """
    return drug_service.get_today_summary(current_user)


@router.put('/{drug_id}', response_model=DrugItemResponse)
def update_drug(drug_id: int,
                drug_data: DrugUpdateRequest,
                current_user: User = Depends(login_required),
                drug_service: DrugService = Depends()) -> Any:
    return DrugItemResponse(drug=drug_service.update_drug(drug_id, drug_data, current_user))


@router.delete('/{drug_id}', response_model=MessageResponse)
def delete_drug(drug_id: int,
                current_user: User = Depends(login_required),
                drug_service: DrugService = Depends()) -> Any:
    """
    Delete a drug together with its consumption events and its schedule.
    """
    logger.info(f"delete_drug request: drug_id={drug_id}")
    drug_service.delete_drug(drug_id, current_user)
    return MessageResponse(message='Drug deleted successfully')
