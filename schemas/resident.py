# schemas/resident.py
"""
Pydantic schemas for Resident API request/response validation.
"""
from datetime import datetime
from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict

from schemas.common import Pagination


class ResidentRoleEnum(str, Enum):
     OWNER = "owner"
     TENANT = "tenant"


class ResidentCreate(BaseModel):
     """Schema for creating a resident, optionally assigned to a unit."""
     name: str = Field(..., min_length=1, max_length=100)
     role: ResidentRoleEnum
     property_id: Optional[int] = Field(None, gt=0)
     unit_id: Optional[int] = Field(None, gt=0)
     email: Optional[str] = Field(None, max_length=100)
     phone: Optional[str] = Field(None, max_length=20)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "name": "María González",
                    "role": "tenant",
                    "property_id": 1,
                    "unit_id": 4,
                    "email": "maria@example.com",
                    "phone": "+54 11 5555 0000"
               }
          }
     )


class ResidentUpdate(BaseModel):
     """
     Schema for updating a resident.

     Sending ``unit_id: null`` explicitly frees the current unit.
     """
     name: Optional[str] = Field(None, min_length=1, max_length=100)
     role: Optional[ResidentRoleEnum] = None
     property_id: Optional[int] = Field(None, gt=0)
     unit_id: Optional[int] = Field(None, gt=0)
     email: Optional[str] = Field(None, max_length=100)
     phone: Optional[str] = Field(None, max_length=20)


class ResidentResponse(BaseModel):
     id: int
     admin_id: int
     property_id: Optional[int] = None
     unit_id: Optional[int] = None
     name: str
     email: Optional[str] = None
     phone: Optional[str] = None
     role: ResidentRoleEnum
     created_at: datetime
     updated_at: datetime

     unit_number: Optional[str] = None

     model_config = ConfigDict(from_attributes=True)


class ResidentListResponse(BaseModel):
     residents: List[ResidentResponse]
     pagination: Pagination
