# schemas/personal_transaction.py
"""
Pydantic schemas for PersonalTransaction API request/response validation.
"""
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict

from schemas.common import Money


class PersonalTransactionCategoryEnum(str, Enum):
     """Fixed ledger categories; EDIFICIO entries must reference a property."""
     EDIFICIO = "Edificio"
     LUIGGI = "Luiggi"
     NOSOTROS = "Nosotros"


class PersonalTransactionCreate(BaseModel):
     transaction_date: date
     amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
     category: PersonalTransactionCategoryEnum
     property_id: Optional[int] = Field(None, gt=0)
     description: Optional[str] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "transaction_date": "2026-03-05",
                    "amount": 120000.00,
                    "category": "Edificio",
                    "property_id": 1,
                    "description": "Reparación de bomba"
               }
          }
     )


class PersonalTransactionUpdate(BaseModel):
     transaction_date: Optional[date] = None
     amount: Optional[Decimal] = Field(None, gt=0, max_digits=12, decimal_places=2)
     category: Optional[PersonalTransactionCategoryEnum] = None
     property_id: Optional[int] = Field(None, gt=0)
     description: Optional[str] = None


class PersonalTransactionResponse(BaseModel):
     id: int
     admin_id: int
     property_id: Optional[int] = None
     transaction_date: date
     amount: Money
     category: PersonalTransactionCategoryEnum
     description: Optional[str] = None
     created_at: datetime

     property_name: Optional[str] = None

     model_config = ConfigDict(from_attributes=True)


class PersonalTransactionListResponse(BaseModel):
     transactions: List[PersonalTransactionResponse]
     total: Money
