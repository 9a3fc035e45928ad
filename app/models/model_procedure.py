from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from app.models.model_base import Base


class Procedure(Base):
    __tablename__ = "medical_procedures"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    records = relationship("ProcedureRecord", back_populates="procedure", passive_deletes=True)
    schedule = relationship("ProcedureSchedule", back_populates="procedure", passive_deletes=True, uselist=False)
