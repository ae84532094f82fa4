# models/unit.py
import enum
from sqlalchemy import Column, Integer, String, Numeric, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class UnitStatus(str, enum.Enum):
     """Occupancy of a unit."""
     OCCUPIED = "occupied"
     VACANT = "vacant"


class Unit(TimestampMixin, Base):
     """
     Unit model - an apartment within a property.

     ``expense_percentage`` is the unit's fixed share of the property's
     monthly expenses.
     """
     __table_args__ = (
          CheckConstraint(
               "expense_percentage >= 0 AND expense_percentage <= 100",
               name="ck_units_expense_percentage"
          ),
     )

     id = Column(Integer, primary_key=True, autoincrement=True)
     property_id = Column(Integer, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True)

     unit_number = Column(String(50), nullable=False)
     status = Column(String(20), default=UnitStatus.VACANT.value, nullable=False)  # vacant, occupied
     expense_percentage = Column(Numeric(5, 2), default=0, nullable=False)

     # Relationships
     property = relationship("Property", back_populates="units")
     residents = relationship("Resident", back_populates="unit")
     contracts = relationship("Contract", back_populates="unit", cascade="all, delete-orphan")
     allocations = relationship("ExpenseAllocation", back_populates="unit", cascade="all, delete-orphan")

     def __repr__(self):
          return f"<Unit(id={self.id}, unit_number='{self.unit_number}', status='{self.status}')>"
