# models/rent.py
from sqlalchemy import Column, Integer, Numeric, Boolean, DateTime, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import relationship
from .base import Base


class Rent(Base):
     """
     Rent model - the amount due for one contract period.

     Index-adjustment bookkeeping (factor and the two index values it was
     computed from) is kept on the row so the schedule can be audited.
     """
     __table_args__ = (
          UniqueConstraint("contract_id", "period_year", "period_month", name="uq_rents_contract_period"),
     )

     id = Column(Integer, primary_key=True, autoincrement=True)
     contract_id = Column(Integer, ForeignKey("contracts.id", ondelete="CASCADE"), nullable=False, index=True)
     period_year = Column(Integer, nullable=False)
     period_month = Column(Integer, nullable=False)

     amount = Column(Numeric(12, 2), nullable=False)
     amount_paid = Column(Numeric(12, 2), default=0, nullable=False)
     balance = Column(Numeric(12, 2), default=0, nullable=False)

     # Index adjustment
     base_amount = Column(Numeric(12, 2), nullable=True)  # Initial rent before adjustment
     adjustment_factor = Column(Numeric(12, 6), nullable=True)  # target_index / base_index
     base_index_value = Column(Numeric(12, 4), nullable=True)
     adjustment_index_value = Column(Numeric(12, 4), nullable=True)
     is_adjusted = Column(Boolean, default=False, nullable=False)
     adjustment_period_year = Column(Integer, nullable=True)
     adjustment_period_month = Column(Integer, nullable=True)

     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     # Relationships
     contract = relationship("Contract", back_populates="rents")

     def __repr__(self):
          return f"<Rent(id={self.id}, contract_id={self.contract_id}, period={self.period_year}-{self.period_month:02d}, amount={self.amount})>"
