from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.helpers.enums import ScheduleType


class ScheduleBase(BaseModel):
    schedule_type: ScheduleType
    interval_hours: Optional[int] = None
    times_per_day: Optional[int] = None
    notes: Optional[str] = None

    @model_validator(mode='after')
    def check_cadence(self):
        if self.schedule_type == ScheduleType.INTERVAL and (not self.interval_hours or self.interval_hours <= 0):
            raise ValueError('interval_hours must be a positive number for interval schedules')
        if self.schedule_type == ScheduleType.PER_DAY and (not self.times_per_day or self.times_per_day <= 0):
            raise ValueError('times_per_day must be a positive number for per_day schedules')
        return self


class DrugScheduleUpsertRequest(ScheduleBase):
    drug_id: int = Field(..., gt=0)


class ProcedureScheduleUpsertRequest(ScheduleBase):
    procedure_id: int = Field(..., gt=0)


class ScheduleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    schedule_type: str
    interval_hours: Optional[int] = None
    times_per_day: Optional[int] = None
    notes: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None


class DrugScheduleResponse(ScheduleResponse):
    drug_id: int
    drug_name: Optional[str] = None


class ProcedureScheduleResponse(ScheduleResponse):
    procedure_id: int
    procedure_name: Optional[str] = None
