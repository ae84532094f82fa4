# models/admin.py
"""
Admin model - the property-management account linked 1:1 to an identity
from the external identity provider (the JWT ``sub`` claim).
"""
from sqlalchemy import Column, Integer, String, Boolean
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class Admin(TimestampMixin, Base):
     """Account record that owns properties, residents and categories."""

     id = Column(Integer, primary_key=True, autoincrement=True)
     user_id = Column(String(64), nullable=False, unique=True, index=True)
     email = Column(String(255), nullable=False)
     full_name = Column(String(200), nullable=True)
     is_active = Column(Boolean, default=True, nullable=False)

     # Relationships
     properties = relationship("Property", back_populates="admin", cascade="all, delete-orphan")
     residents = relationship("Resident", back_populates="admin", cascade="all, delete-orphan")
     expense_categories = relationship("ExpenseCategory", back_populates="admin", cascade="all, delete-orphan")
     personal_transactions = relationship("PersonalTransaction", back_populates="admin", cascade="all, delete-orphan")

     def __repr__(self):
          return f"<Admin(id={self.id}, email='{self.email}')>"
