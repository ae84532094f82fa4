# models/monthly_expense_summary.py
"""
MonthlyExpenseSummary model - per-property, per-period expense total.

``total_expenses`` is derived data: it is always rewritten from the sum of
the linked expense rows, never adjusted incrementally.
"""
from sqlalchemy import Column, Integer, Numeric, ForeignKey, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class MonthlyExpenseSummary(TimestampMixin, Base):
     __table_args__ = (
          UniqueConstraint(
               "property_id", "period_year", "period_month",
               name="uq_monthly_expense_summaries_period"
          ),
          CheckConstraint("period_month >= 1 AND period_month <= 12", name="ck_monthly_expense_summaries_month"),
          CheckConstraint("total_expenses >= 0", name="ck_monthly_expense_summaries_total"),
     )

     id = Column(Integer, primary_key=True, autoincrement=True)
     property_id = Column(Integer, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True)
     period_year = Column(Integer, nullable=False)
     period_month = Column(Integer, nullable=False)
     total_expenses = Column(Numeric(12, 2), default=0, nullable=False)

     # Relationships
     property = relationship("Property", back_populates="monthly_summaries")
     expenses = relationship("Expense", back_populates="monthly_summary")
     allocations = relationship(
          "ExpenseAllocation",
          back_populates="monthly_summary",
          cascade="all, delete-orphan"
     )

     def __repr__(self):
          return (
               f"<MonthlyExpenseSummary(id={self.id}, property_id={self.property_id}, "
               f"period={self.period_year}-{self.period_month:02d}, total={self.total_expenses})>"
          )
