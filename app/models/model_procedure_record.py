from sqlalchemy import Column, Integer, Date, DateTime, Text, ForeignKey, Index, func
from sqlalchemy.orm import relationship
from app.models.model_base import Base


class ProcedureRecord(Base):
    __tablename__ = "procedure_records"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    procedure_id = Column(Integer, ForeignKey("medical_procedures.id", ondelete="CASCADE"), nullable=False)
    procedure_date = Column(Date, nullable=False)
    performed_at = Column(DateTime, server_default=func.now())
    notes = Column(Text)
    created_at = Column(DateTime, server_default=func.now())

    procedure = relationship("Procedure", back_populates="records", lazy="joined")

    __table_args__ = (
        Index("idx_procedure_records_user_date", "user_id", "procedure_date"),
    )

    @property
    def procedure_name(self):
        return self.procedure.name if self.procedure else None
