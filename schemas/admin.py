# schemas/admin.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class AdminCreate(BaseModel):
     """
     Optional profile fields when provisioning the caller's admin record.
     The email falls back to the token's ``email`` claim.
     """
     email: Optional[str] = Field(None, max_length=255)
     full_name: Optional[str] = Field(None, max_length=200)


class AdminResponse(BaseModel):
     id: int
     user_id: str
     email: str
     full_name: Optional[str] = None
     is_active: bool
     created_at: datetime

     model_config = ConfigDict(from_attributes=True)
