# models/contract.py
import enum
from sqlalchemy import Column, Integer, String, Numeric, Date, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class RentIncreaseFrequency(str, enum.Enum):
     """How often the rent is re-indexed."""
     MONTHLY = "monthly"
     QUARTERLY = "quarterly"
     SEMI_ANNUALLY = "semi-annually"
     ANNUALLY = "annually"


class RentIncreaseIndex(str, enum.Enum):
     """Published index used to escalate rent. AVERAGE is the mean of ICL and IPC."""
     ICL = "ICL"
     IPC = "IPC"
     AVERAGE = "AVERAGE"


class ContractStatus(str, enum.Enum):
     ACTIVE = "active"
     EXPIRED = "expired"
     RENEWED = "renewed"


class Contract(TimestampMixin, Base):
     """
     Contract model - a lease between a tenant resident and a unit.
     Rent rows are derived from it by the rent schedule service.
     """
     __table_args__ = (
          CheckConstraint("end_date >= start_date", name="ck_contracts_dates"),
     )

     id = Column(Integer, primary_key=True, autoincrement=True)
     unit_id = Column(Integer, ForeignKey("units.id", ondelete="CASCADE"), nullable=False, index=True)
     tenant_id = Column(Integer, ForeignKey("residents.id"), nullable=False, index=True)

     # Lease period
     start_date = Column(Date, nullable=False)
     end_date = Column(Date, nullable=False)

     # Pricing
     initial_rent_amount = Column(Numeric(12, 2), nullable=False)
     currency = Column(String(10), nullable=True)
     rent_increase_frequency = Column(
          String(20),
          default=RentIncreaseFrequency.QUARTERLY.value,
          nullable=False
     )
     rent_increase_index = Column(String(10), default=RentIncreaseIndex.ICL.value, nullable=False)

     status = Column(String(20), default=ContractStatus.ACTIVE.value, nullable=False)

     # Relationships
     unit = relationship("Unit", back_populates="contracts")
     tenant = relationship("Resident", back_populates="contracts")
     rents = relationship("Rent", back_populates="contract", cascade="all, delete-orphan")

     def __repr__(self):
          return f"<Contract(id={self.id}, unit_id={self.unit_id}, tenant_id={self.tenant_id})>"
