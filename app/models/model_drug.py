from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey, CheckConstraint, func
from sqlalchemy.orm import relationship
from app.models.model_base import Base


class Drug(Base):
    __tablename__ = "drugs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    unit_type = Column(String(20), nullable=False)
    default_dosage = Column(Numeric(10, 2, asdecimal=False))
    created_at = Column(DateTime, server_default=func.now())

    consumptions = relationship("DrugConsumption", back_populates="drug", passive_deletes=True)
    schedule = relationship("DrugSchedule", back_populates="drug", passive_deletes=True, uselist=False)

    __table_args__ = (
        CheckConstraint("unit_type IN ('pills', 'mg')", name="ck_drugs_unit_type"),
    )
