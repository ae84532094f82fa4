# schemas/expense.py
"""
Pydantic schemas for Expense and MonthlyExpenseSummary API request/response validation.
"""
import datetime
from decimal import Decimal
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict

from schemas.common import Money, Pagination


class ExpenseCreate(BaseModel):
     """Schema for creating a new expense. The summary period is derived from ``date``."""
     property_id: int = Field(..., gt=0)
     expense_type: str = Field(..., min_length=1, max_length=100)
     amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
     date: datetime.date
     description: Optional[str] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "property_id": 1,
                    "expense_type": "Limpieza",
                    "amount": 85000.00,
                    "date": "2026-03-10",
                    "description": "Servicio mensual"
               }
          }
     )


class ExpenseUpdate(BaseModel):
     """Schema for updating an expense. Changing ``date`` may move it to another period."""
     expense_type: Optional[str] = Field(None, min_length=1, max_length=100)
     amount: Optional[Decimal] = Field(None, gt=0, max_digits=12, decimal_places=2)
     date: Optional[datetime.date] = None
     description: Optional[str] = None


class ExpenseResponse(BaseModel):
     id: int
     property_id: int
     monthly_expense_summary_id: Optional[int] = None
     expense_type: str
     amount: Money
     date: datetime.date
     description: Optional[str] = None
     created_at: datetime.datetime
     updated_at: datetime.datetime

     model_config = ConfigDict(from_attributes=True)


class ExpenseListResponse(BaseModel):
     expenses: List[ExpenseResponse]
     pagination: Pagination


class MonthlyExpenseSummaryResponse(BaseModel):
     id: int
     property_id: int
     period_year: int
     period_month: int
     total_expenses: Money
     expenses_count: int = 0
     allocations_count: int = 0

     model_config = ConfigDict(from_attributes=True)


class MonthlyExpenseSummaryListResponse(BaseModel):
     summaries: List[MonthlyExpenseSummaryResponse]


class PeriodRequest(BaseModel):
     """Property and period, used by the rebuild and liquidación operations."""
     property_id: int = Field(..., gt=0)
     year: int = Field(..., ge=1900, le=9999)
     month: int = Field(..., ge=1, le=12)
