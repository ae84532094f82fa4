# schemas/index_value.py
"""
Schemas shared by the ICL and IPC value endpoints.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict

from schemas.common import Money


class IndexValueCreate(BaseModel):
     period_year: int = Field(..., ge=1900, le=9999)
     period_month: int = Field(..., ge=1, le=12)
     value: Decimal = Field(..., gt=0, max_digits=12, decimal_places=4)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "period_year": 2026,
                    "period_month": 3,
                    "value": 24.5123
               }
          }
     )


class IndexValueUpdate(BaseModel):
     period_year: Optional[int] = Field(None, ge=1900, le=9999)
     period_month: Optional[int] = Field(None, ge=1, le=12)
     value: Optional[Decimal] = Field(None, gt=0, max_digits=12, decimal_places=4)


class IndexValueResponse(BaseModel):
     id: int
     index_type: str
     period_year: int
     period_month: int
     value: Money
     created_at: datetime

     model_config = ConfigDict(from_attributes=True)


class IndexValueListResponse(BaseModel):
     values: List[IndexValueResponse]
