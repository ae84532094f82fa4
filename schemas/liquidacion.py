# schemas/liquidacion.py
"""
Schemas for the liquidación (per-unit monthly statement) endpoints.
"""
from typing import Optional, List
from pydantic import BaseModel

from schemas.common import Money


class LiquidacionRow(BaseModel):
     """One unit's statement for a period."""
     unit_id: int
     unit_number: str
     expense_percentage: Money
     resident_name: Optional[str] = None
     resident_email: Optional[str] = None
     role: Optional[str] = None
     expense_due: Optional[Money] = None
     rent_due: Optional[Money] = None
     allocation_id: Optional[int] = None


class PeriodInfo(BaseModel):
     year: int
     month: int


class LiquidacionMeta(BaseModel):
     total_units: int
     period: PeriodInfo


class LiquidacionListResponse(BaseModel):
     data: List[LiquidacionRow]
     meta: LiquidacionMeta


class AllocationCalculationResponse(BaseModel):
     """Result of splitting a monthly summary across the property's units."""
     message: str
     monthly_summary_id: int
     total_expenses: Money
     total_allocated: Money
     units_count: int
     allocations_created: int


class AllocationDeleteResponse(BaseModel):
     message: str
     allocations_deleted: int


class ReceiptFailure(BaseModel):
     email: str
     unit_number: str
     error: str


class SendReceiptsResponse(BaseModel):
     success: bool
     sent: int
     failed: List[ReceiptFailure]
