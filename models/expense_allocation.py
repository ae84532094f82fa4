# models/expense_allocation.py
import enum
from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import relationship
from .base import Base


class AllocationStatus(str, enum.Enum):
     PENDING = "pending"
     PAID = "paid"


class ExpenseAllocation(Base):
     """
     ExpenseAllocation model - a unit's share of a monthly expense summary.
     One row per (summary, unit).
     """
     __table_args__ = (
          UniqueConstraint("monthly_expense_summary_id", "unit_id", name="uq_expense_allocations_summary_unit"),
     )

     id = Column(Integer, primary_key=True, autoincrement=True)
     monthly_expense_summary_id = Column(
          Integer,
          ForeignKey("monthly_expense_summaries.id", ondelete="CASCADE"),
          nullable=False,
          index=True
     )
     unit_id = Column(Integer, ForeignKey("units.id"), nullable=False, index=True)

     allocated_amount = Column(Numeric(12, 2), nullable=False)
     allocation_percentage = Column(Numeric(5, 2), nullable=False)
     amount_paid = Column(Numeric(12, 2), default=0, nullable=False)
     status = Column(String(20), default=AllocationStatus.PENDING.value, nullable=False)

     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     # Relationships
     monthly_summary = relationship("MonthlyExpenseSummary", back_populates="allocations")
     unit = relationship("Unit", back_populates="allocations")

     def __repr__(self):
          return f"<ExpenseAllocation(id={self.id}, unit_id={self.unit_id}, amount={self.allocated_amount})>"
