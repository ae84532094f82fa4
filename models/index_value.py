# models/index_value.py
import enum
from sqlalchemy import Column, Integer, String, Numeric, UniqueConstraint, CheckConstraint
from .base import Base, TimestampMixin


class IndexType(str, enum.Enum):
     """Published economic indices used for rent escalation."""
     ICL = "ICL"
     IPC = "IPC"


class IndexValue(TimestampMixin, Base):
     """
     Published monthly value of an economic index (ICL or IPC).
     Shared by all admins; one value per index and period.
     """
     __table_args__ = (
          UniqueConstraint("index_type", "period_year", "period_month", name="uq_index_values_period"),
          CheckConstraint("period_month >= 1 AND period_month <= 12", name="ck_index_values_month"),
     )

     id = Column(Integer, primary_key=True, autoincrement=True)
     index_type = Column(String(10), nullable=False, index=True)
     period_year = Column(Integer, nullable=False)
     period_month = Column(Integer, nullable=False)
     value = Column(Numeric(12, 4), nullable=False)

     def __repr__(self):
          return f"<IndexValue({self.index_type} {self.period_year}-{self.period_month:02d}={self.value})>"
