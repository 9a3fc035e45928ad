from sqlalchemy import Column, Integer, String, Boolean, DateTime, Text, ForeignKey, CheckConstraint, UniqueConstraint, func, true
from sqlalchemy.orm import relationship, declared_attr
from app.models.model_base import Base


class ScheduleMixin:
    """Cadence configuration shared by drug and procedure schedules.

    A schedule is descriptive only: nothing in the backend fires it. The
    client compares it with the day's events to show progress.
    """

    id = Column(Integer, primary_key=True, autoincrement=True)
    schedule_type = Column(String(20), nullable=False)
    interval_hours = Column(Integer)
    times_per_day = Column(Integer)
    notes = Column(Text)
    is_active = Column(Boolean, server_default=true(), nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    @declared_attr
    def user_id(cls):
        return Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)


class DrugSchedule(ScheduleMixin, Base):
    __tablename__ = "drug_schedules"

    drug_id = Column(Integer, ForeignKey("drugs.id", ondelete="CASCADE"), nullable=False)

    drug = relationship("Drug", back_populates="schedule", lazy="joined")

    __table_args__ = (
        UniqueConstraint('user_id', 'drug_id', name='uq_drug_schedules_user_drug'),
        CheckConstraint("schedule_type IN ('interval', 'per_day')", name="ck_drug_schedules_type"),
    )

    @property
    def drug_name(self):
        return self.drug.name if self.drug else None


class ProcedureSchedule(ScheduleMixin, Base):
    __tablename__ = "procedure_schedules"

    procedure_id = Column(Integer, ForeignKey("medical_procedures.id", ondelete="CASCADE"), nullable=False)

    procedure = relationship("Procedure", back_populates="schedule", lazy="joined")

    __table_args__ = (
        UniqueConstraint('user_id', 'procedure_id', name='uq_procedure_schedules_user_procedure'),
        CheckConstraint("schedule_type IN ('interval', 'per_day')", name="ck_procedure_schedules_type"),
    )

    @property
    def procedure_name(self):
        return self.procedure.name if self.procedure else None
