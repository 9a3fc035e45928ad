import datetime
from typing import List

from pydantic import BaseModel

from app.schemas.sche_drug import ConsumptionResponse
from app.schemas.sche_procedure import ProcedureRecordResponse


class TodaySummaryResponse(BaseModel):
    date: datetime.date
    consumptions: List[ConsumptionResponse]
    procedures: List[ProcedureRecordResponse]
