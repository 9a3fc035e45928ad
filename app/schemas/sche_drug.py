from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.helpers.enums import UnitType
from app.schemas.sche_schedule import DrugScheduleResponse


class DrugBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    unit_type: UnitType
    default_dosage: Optional[float] = Field(None, ge=0)


class DrugCreateRequest(DrugBase):
    pass


class DrugUpdateRequest(DrugBase):
    pass


class DrugResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    unit_type: str
    default_dosage: Optional[float] = None
    created_at: Optional[datetime] = None


class ConsumptionCreateRequest(BaseModel):
    drug_id: int = Field(..., gt=0)
    consumption_date: date
    quantity: float = Field(..., ge=0)
    unit_type: UnitType
    notes: Optional[str] = None
    consumed_at: Optional[datetime] = None


class ConsumptionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    drug_id: int
    consumption_date: date
    consumed_at: Optional[datetime] = None
    quantity: float
    unit_type: str
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    drug_name: Optional[str] = None
    drug_unit_type: Optional[str] = None


class DrugListResponse(BaseModel):
    drugs: List[DrugResponse]


class DrugItemResponse(BaseModel):
    drug: DrugResponse


class ConsumptionListResponse(BaseModel):
    consumptions: List[ConsumptionResponse]


class ConsumptionItemResponse(BaseModel):
    consumption: ConsumptionResponse


class DrugScheduleListResponse(BaseModel):
    schedules: List[DrugScheduleResponse]


class DrugScheduleItemResponse(BaseModel):
    schedule: DrugScheduleResponse
