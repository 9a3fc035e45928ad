from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.sche_schedule import ProcedureScheduleResponse


class ProcedureCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class ProcedureUpdateRequest(ProcedureCreateRequest):
    pass


class ProcedureResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    created_at: Optional[datetime] = None


class ProcedureRecordCreateRequest(BaseModel):
    procedure_id: int = Field(..., gt=0)
    procedure_date: date
    notes: Optional[str] = None
    performed_at: Optional[datetime] = None


class ProcedureRecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    procedure_id: int
    procedure_date: date
    performed_at: Optional[datetime] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    procedure_name: Optional[str] = None


class ProcedureListResponse(BaseModel):
    procedures: List[ProcedureResponse]


class ProcedureItemResponse(BaseModel):
    procedure: ProcedureResponse


class ProcedureRecordListResponse(BaseModel):
    records: List[ProcedureRecordResponse]


class ProcedureRecordItemResponse(BaseModel):
    record: ProcedureRecordResponse


class ProcedureScheduleListResponse(BaseModel):
    schedules: List[ProcedureScheduleResponse]


class ProcedureScheduleItemResponse(BaseModel):
    schedule: ProcedureScheduleResponse
