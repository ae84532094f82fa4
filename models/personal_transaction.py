# models/personal_transaction.py
from sqlalchemy import Column, Integer, String, Numeric, Date, Text, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from .base import Base


# "Edificio" transactions belong to a building and must reference a property
BUILDING_CATEGORY = "Edificio"
PERSONAL_TRANSACTION_CATEGORIES = (BUILDING_CATEGORY, "Luiggi", "Nosotros")


class PersonalTransaction(Base):
     """
     PersonalTransaction model - the admin's own ledger of payments,
     optionally tied to a property.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     admin_id = Column(Integer, ForeignKey("admins.id", ondelete="CASCADE"), nullable=False, index=True)
     property_id = Column(Integer, ForeignKey("properties.id"), nullable=True)

     transaction_date = Column(Date, nullable=False, index=True)
     amount = Column(Numeric(12, 2), nullable=False)
     category = Column(String(50), nullable=False)
     description = Column(Text, nullable=True)

     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     # Relationships
     admin = relationship("Admin", back_populates="personal_transactions")
     property = relationship("Property")

     def __repr__(self):
          return f"<PersonalTransaction(id={self.id}, amount={self.amount}, category='{self.category}')>"
