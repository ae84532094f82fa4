# schemas/property.py
"""
Pydantic schemas for Property API request/response validation.
"""
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict


class PropertyCreate(BaseModel):
     """Schema for creating a new property."""
     name: str = Field(..., min_length=1, max_length=255)
     street_address: str = Field(..., min_length=1, max_length=255)
     city: str = Field(..., min_length=1, max_length=100)
     description: Optional[str] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "name": "Edificio Belgrano",
                    "street_address": "Av. Cabildo 1234",
                    "city": "Buenos Aires",
                    "description": "12 unidades"
               }
          }
     )


class PropertyUpdate(BaseModel):
     """Schema for updating an existing property. Only provided fields change."""
     name: Optional[str] = Field(None, min_length=1, max_length=255)
     street_address: Optional[str] = Field(None, min_length=1, max_length=255)
     city: Optional[str] = Field(None, min_length=1, max_length=100)
     description: Optional[str] = None


class PropertyResponse(BaseModel):
     """Schema for property response."""
     id: int
     admin_id: int
     name: str
     street_address: str
     city: str
     description: Optional[str] = None
     created_at: datetime
     updated_at: datetime

     # Derived
     units_count: int = 0

     model_config = ConfigDict(from_attributes=True)


class PropertyListResponse(BaseModel):
     properties: List[PropertyResponse]
