# models/resident.py
import enum
from sqlalchemy import Column, Integer, String, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class ResidentRole(str, enum.Enum):
     """Whether the resident owns the unit or rents it."""
     OWNER = "owner"
     TENANT = "tenant"


class Resident(TimestampMixin, Base):
     """
     Resident model - the owner or tenant living in a unit.

     A unit holds at most one resident; this is checked by the API before
     any insert or reassignment.
     """
     __table_args__ = (
          CheckConstraint("role IN ('owner', 'tenant')", name="ck_residents_role"),
     )

     id = Column(Integer, primary_key=True, autoincrement=True)
     admin_id = Column(Integer, ForeignKey("admins.id", ondelete="CASCADE"), nullable=False, index=True)
     property_id = Column(Integer, ForeignKey("properties.id"), nullable=True, index=True)
     unit_id = Column(Integer, ForeignKey("units.id"), nullable=True, index=True)

     name = Column(String(100), nullable=False, index=True)
     email = Column(String(100), nullable=True)
     phone = Column(String(20), nullable=True)
     role = Column(String(10), nullable=False)

     # Relationships
     admin = relationship("Admin", back_populates="residents")
     property = relationship("Property")
     unit = relationship("Unit", back_populates="residents")
     contracts = relationship("Contract", back_populates="tenant")

     def is_tenant(self) -> bool:
          return self.role == ResidentRole.TENANT.value

     def __repr__(self):
          return f"<Resident(id={self.id}, name='{self.name}', role='{self.role}')>"
