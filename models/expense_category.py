# models/expense_category.py
from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class ExpenseCategory(TimestampMixin, Base):
     """Named expense type, scoped to an admin."""
     __table_args__ = (
          UniqueConstraint("admin_id", "name", name="uq_expense_categories_admin_name"),
     )

     id = Column(Integer, primary_key=True, autoincrement=True)
     admin_id = Column(Integer, ForeignKey("admins.id", ondelete="CASCADE"), nullable=False, index=True)
     name = Column(String(100), nullable=False)

     admin = relationship("Admin", back_populates="expense_categories")

     def __repr__(self):
          return f"<ExpenseCategory(id={self.id}, name='{self.name}')>"
