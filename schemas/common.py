# schemas/common.py
"""
Shared building blocks for the request/response schemas.
"""
from decimal import Decimal
from typing import Annotated
from pydantic import BaseModel, ConfigDict, PlainSerializer


# Decimal columns are validated as Decimal but rendered as JSON numbers
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class Pagination(BaseModel):
     """Pagination block attached to every paginated list response."""
     page: int
     limit: int
     total: int
     totalPages: int

     @classmethod
     def build(cls, page: int, limit: int, total: int) -> "Pagination":
          total_pages = (total + limit - 1) // limit if limit else 0
          return cls(page=page, limit=limit, total=total, totalPages=total_pages)


class MessageResponse(BaseModel):
     """Plain acknowledgement, e.g. after a delete."""
     message: str

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "message": "Property deleted successfully"
               }
          }
     )
