from app.models.model_base import Base
from app.models.model_user import User
from app.models.model_drug import Drug
from app.models.model_drug_consumption import DrugConsumption
from app.models.model_procedure import Procedure
from app.models.model_procedure_record import ProcedureRecord
from app.models.model_schedule import DrugSchedule, ProcedureSchedule

__all__ = [
    "Base", "User", "Drug", "DrugConsumption", "Procedure", "ProcedureRecord",
    "DrugSchedule", "ProcedureSchedule",
]
