import logging
from datetime import date
from typing import Any, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from app.helpers.login_manager import login_required
from app.models.model_user import User
from app.schemas.sche_base import MessageResponse
from app.schemas.sche_procedure import (
    ProcedureCreateRequest, ProcedureUpdateRequest, ProcedureListResponse, ProcedureItemResponse,
    ProcedureRecordCreateRequest, ProcedureRecordListResponse, ProcedureRecordItemResponse,
    ProcedureScheduleListResponse, ProcedureScheduleItemResponse
)
from app.schemas.sche_schedule import ProcedureScheduleUpsertRequest
from app.services.srv_export import ProcedureExportService, XLSX_MEDIA_TYPE
from app.services.srv_procedure import ProcedureService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get('', response_model=ProcedureListResponse)
def get_procedures(current_user: User = Depends(login_required),
                   procedure_service: ProcedureService = Depends()) -> Any:
    return ProcedureListResponse(procedures=procedure_service.get_procedures(current_user))


@router.post('', status_code=201, response_model=ProcedureItemResponse)
def create_procedure(procedure_data: ProcedureCreateRequest,
                     current_user: User = Depends(login_required),
                     procedure_service: ProcedureService = Depends()) -> Any:
    logger.info(f"create_procedure request: {procedure_data.name}")
    return ProcedureItemResponse(procedure=procedure_service.create_procedure(procedure_data, current_user))


@router.get('/records', response_model=ProcedureRecordListResponse)
def get_records(
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    procedure_id: Optional[int] = Query(None),
    current_user: User = Depends(login_required),
    procedure_service: ProcedureService = Depends()
) -> Any:
    """
    List procedure records, newest first. Without a full date range only the 100 most recent are returned.
    """
    records = procedure_service.get_records(current_user, start_date, end_date, procedure_id)
    return ProcedureRecordListResponse(records=records)


@router.post('/records', status_code=201, response_model=ProcedureRecordItemResponse)
def record_procedure(record_data: ProcedureRecordCreateRequest,
                     current_user: User = Depends(login_required),
                     procedure_service: ProcedureService = Depends()) -> Any:
    logger.info(f"record_procedure request: procedure_id={record_data.procedure_id}")
    return ProcedureRecordItemResponse(record=procedure_service.record_procedure(record_data, current_user))


@router.delete('/records/{record_id}', response_model=MessageResponse)
def delete_record(record_id: int,
                  current_user: User = Depends(login_required),
                  procedure_service: ProcedureService = Depends()) -> Any:
    procedure_service.delete_record(record_id, current_user)
    return MessageResponse(message='Procedure record deleted successfully')


@router.get('/schedules', response_model=ProcedureScheduleListResponse)
def get_schedules(current_user: User = Depends(login_required),
                  procedure_service: ProcedureService = Depends()) -> Any:
    return ProcedureScheduleListResponse(schedules=procedure_service.get_schedules(current_user))


@router.post('/schedules', status_code=201, response_model=ProcedureScheduleItemResponse)
def upsert_schedule(schedule_data: ProcedureScheduleUpsertRequest,
                    current_user: User = Depends(login_required),
                    procedure_service: ProcedureService = Depends()) -> Any:
    return ProcedureScheduleItemResponse(schedule=procedure_service.upsert_schedule(schedule_data, current_user))


@router.put('/schedules/{schedule_id}', status_code=201, response_model=ProcedureScheduleItemResponse)
def update_schedule(schedule_id: int,
                    schedule_data: ProcedureScheduleUpsertRequest,
                    current_user: User = Depends(login_required),
                    procedure_service: ProcedureService = Depends()) -> Any:
    schedule = procedure_service.upsert_schedule(schedule_data, current_user, schedule_id=schedule_id)
    return ProcedureScheduleItemResponse(schedule=schedule)


@router.delete('/schedules/{schedule_id}', response_model=MessageResponse)
def delete_schedule(schedule_id: int,
                    current_user: User = Depends(login_required),
                    procedure_service: ProcedureService = Depends()) -> Any:
    procedure_service.delete_schedule(schedule_id, current_user)
    return MessageResponse(message='Schedule deleted successfully')


@router.get('/export', response_class=Response)
def export_records(
    start_date: date = Query(..., description="Range start (YYYY-MM-DD)"),
    end_date: date = Query(..., description="Range end (YYYY-MM-DD)"),
    procedure_id: Optional[int] = Query(None, description="Only records of this procedure"),
    current_user: User = Depends(login_required),
    export_service: ProcedureExportService = Depends()
) -> Any:
    """
    Download procedure records of a date range as an Excel workbook.

    **Response**: `.xlsx` attachment with one header row (Date, Time, Procedure Name, Notes)
    and one row per record, oldest first.
    """
    logger.info(f"export_records request: {start_date} to {end_date}, procedure_id={procedure_id}")
    filename, content = export_service.export_records(current_user, start_date, end_date, procedure_id)
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={'Content-Disposition': f'attachment; filename="{filename}"'}
    )


@router.put('/{procedure_id}', response_model=ProcedureItemResponse)
def update_procedure(procedure_id: int,
                     procedure_data: ProcedureUpdateRequest,
                     current_user: User = Depends(login_required),
                     procedure_service: ProcedureService = Depends()) -> Any:
    procedure = procedure_service.update_procedure(procedure_id, procedure_data, current_user)
    return ProcedureItemResponse(procedure=procedure)


@router.delete('/{procedure_id}', response_model=MessageResponse)
def delete_procedure(procedure_id: int,
                     current_user: User = Depends(login_required),
                     procedure_service: ProcedureService = Depends()) -> Any:
    """
    Delete a procedure together with its records and its schedule.
    """
    procedure_service.delete_procedure(procedure_id, current_user)
    return MessageResponse(message='Procedure deleted successfully')
