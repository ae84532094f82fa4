# models/property.py
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class Property(TimestampMixin, Base):
     """
     Property model - a building managed by an admin.
     Every other record is owned through this table.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     admin_id = Column(Integer, ForeignKey("admins.id", ondelete="CASCADE"), nullable=False, index=True)
     name = Column(String(255), nullable=False)

     # Address
     street_address = Column(String(255), nullable=False)
     city = Column(String(100), nullable=False)

     description = Column(Text, nullable=True)

     # Relationships
     admin = relationship("Admin", back_populates="properties")
     units = relationship("Unit", back_populates="property", cascade="all, delete-orphan")
     expenses = relationship("Expense", back_populates="property", cascade="all, delete-orphan")
     monthly_summaries = relationship(
          "MonthlyExpenseSummary",
          back_populates="property",
          cascade="all, delete-orphan"
     )

     def __repr__(self):
          return f"<Property(id={self.id}, name='{self.name}')>"
