# schemas/unit.py
"""
Pydantic schemas for Unit API request/response validation.
"""
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict

from schemas.common import Money


class UnitStatusEnum(str, Enum):
     """Unit occupancy options."""
     OCCUPIED = "occupied"
     VACANT = "vacant"


class UnitCreate(BaseModel):
     """Schema for creating a unit. ``property_id`` comes from the path on nested routes."""
     property_id: Optional[int] = Field(None, gt=0)
     unit_number: str = Field(..., min_length=1, max_length=50)
     status: UnitStatusEnum = Field(default=UnitStatusEnum.VACANT)
     expense_percentage: Decimal = Field(
          default=Decimal("0"),
          ge=0,
          le=100,
          max_digits=5,
          decimal_places=2,
          description="Share of the property's monthly expenses, in percent"
     )

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "unit_number": "3B",
                    "status": "vacant",
                    "expense_percentage": 12.5
               }
          }
     )


class UnitUpdate(BaseModel):
     unit_number: Optional[str] = Field(None, min_length=1, max_length=50)
     status: Optional[UnitStatusEnum] = None
     expense_percentage: Optional[Decimal] = Field(None, ge=0, le=100, max_digits=5, decimal_places=2)


class UnitResponse(BaseModel):
     """Schema for unit response."""
     id: int
     property_id: int
     unit_number: str
     status: UnitStatusEnum
     expense_percentage: Money
     created_at: datetime
     updated_at: datetime

     # Optional related data
     property_name: Optional[str] = None
     resident_name: Optional[str] = None

     model_config = ConfigDict(from_attributes=True)


class UnitListResponse(BaseModel):
     units: List[UnitResponse]
