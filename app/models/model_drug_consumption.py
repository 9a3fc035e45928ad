from sqlalchemy import Column, Integer, String, Numeric, Date, DateTime, Text, ForeignKey, CheckConstraint, Index, func
from sqlalchemy.orm import relationship
from app.models.model_base import Base


class DrugConsumption(Base):
    __tablename__ = "drug_consumptions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    drug_id = Column(Integer, ForeignKey("drugs.id", ondelete="CASCADE"), nullable=False)
    consumption_date = Column(Date, nullable=False)
    consumed_at = Column(DateTime, server_default=func.now())
    quantity = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    # Stored per event so history survives a later change of the drug's unit
    unit_type = Column(String(20), nullable=False)
    notes = Column(Text)
    created_at = Column(DateTime, server_default=func.now())

    drug = relationship("Drug", back_populates="consumptions", lazy="joined")

    __table_args__ = (
        CheckConstraint("unit_type IN ('pills', 'mg')", name="ck_drug_consumptions_unit_type"),
        Index("idx_drug_consumptions_user_date", "user_id", "consumption_date"),
    )

    @property
    def drug_name(self):
        return self.drug.name if self.drug else None

    @property
    def drug_unit_type(self):
        return self.drug.unit_type if self.drug else None
