# models/expense.py
from sqlalchemy import Column, Integer, String, Numeric, Date, Text, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class Expense(TimestampMixin, Base):
     """
     Expense model - a single building expense.

     Each expense is linked to the monthly summary of the period its ``date``
     falls in; the summary total is recomputed from these links.
     """
     __table_args__ = (
          CheckConstraint("amount > 0", name="ck_expenses_amount_positive"),
     )

     id = Column(Integer, primary_key=True, autoincrement=True)
     property_id = Column(Integer, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True)
     monthly_expense_summary_id = Column(
          Integer,
          ForeignKey("monthly_expense_summaries.id"),
          nullable=True,
          index=True
     )

     expense_type = Column(String(100), nullable=False, index=True)
     amount = Column(Numeric(12, 2), nullable=False)
     date = Column(Date, nullable=False, index=True)
     description = Column(Text, nullable=True)

     # Relationships
     property = relationship("Property", back_populates="expenses")
     monthly_summary = relationship("MonthlyExpenseSummary", back_populates="expenses")

     def __repr__(self):
          return f"<Expense(id={self.id}, property_id={self.property_id}, amount={self.amount}, date={self.date})>"
