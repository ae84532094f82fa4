# schemas/contract.py
"""
Pydantic schemas for Contract and Rent API request/response validation.
"""
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict, model_validator

from schemas.common import Money, Pagination


class RentIncreaseFrequencyEnum(str, Enum):
     MONTHLY = "monthly"
     QUARTERLY = "quarterly"
     SEMI_ANNUALLY = "semi-annually"
     ANNUALLY = "annually"


class RentIncreaseIndexEnum(str, Enum):
     ICL = "ICL"
     IPC = "IPC"
     AVERAGE = "AVERAGE"


class ContractStatusEnum(str, Enum):
     ACTIVE = "active"
     EXPIRED = "expired"
     RENEWED = "renewed"


class ContractCreate(BaseModel):
     """Schema for creating a new lease contract."""
     unit_id: int = Field(..., gt=0, description="Unit ID (must belong to the caller)")
     tenant_id: int = Field(..., gt=0, description="Resident ID of the tenant")
     start_date: date
     end_date: date
     initial_rent_amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
     currency: Optional[str] = Field("ARS", max_length=10)
     rent_increase_frequency: RentIncreaseFrequencyEnum = Field(default=RentIncreaseFrequencyEnum.QUARTERLY)
     rent_increase_index: RentIncreaseIndexEnum = Field(default=RentIncreaseIndexEnum.ICL)
     status: ContractStatusEnum = Field(default=ContractStatusEnum.ACTIVE)

     @model_validator(mode="after")
     def check_dates(self):
          if self.end_date < self.start_date:
               raise ValueError("end_date must be on or after start_date")
          return self

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "unit_id": 4,
                    "tenant_id": 7,
                    "start_date": "2026-01-01",
                    "end_date": "2027-12-31",
                    "initial_rent_amount": 450000.00,
                    "currency": "ARS",
                    "rent_increase_frequency": "quarterly",
                    "rent_increase_index": "ICL"
               }
          }
     )


class ContractUpdate(BaseModel):
     """Schema for updating a contract. Date order is re-checked against stored values."""
     tenant_id: Optional[int] = Field(None, gt=0)
     start_date: Optional[date] = None
     end_date: Optional[date] = None
     initial_rent_amount: Optional[Decimal] = Field(None, gt=0, max_digits=12, decimal_places=2)
     currency: Optional[str] = Field(None, max_length=10)
     rent_increase_frequency: Optional[RentIncreaseFrequencyEnum] = None
     rent_increase_index: Optional[RentIncreaseIndexEnum] = None
     status: Optional[ContractStatusEnum] = None


class ContractResponse(BaseModel):
     id: int
     unit_id: int
     tenant_id: int
     start_date: date
     end_date: date
     initial_rent_amount: Money
     currency: Optional[str] = None
     rent_increase_frequency: RentIncreaseFrequencyEnum
     rent_increase_index: RentIncreaseIndexEnum
     status: ContractStatusEnum
     created_at: datetime
     updated_at: datetime

     # Optional related data
     unit_number: Optional[str] = None
     tenant_name: Optional[str] = None

     model_config = ConfigDict(from_attributes=True)


class ContractListResponse(BaseModel):
     contracts: List[ContractResponse]
     pagination: Pagination


class RentResponse(BaseModel):
     """One rent period of a contract."""
     id: int
     contract_id: int
     period_year: int
     period_month: int
     amount: Money
     amount_paid: Money
     balance: Money
     base_amount: Optional[Money] = None
     adjustment_factor: Optional[Money] = None
     base_index_value: Optional[Money] = None
     adjustment_index_value: Optional[Money] = None
     is_adjusted: bool
     adjustment_period_year: Optional[int] = None
     adjustment_period_month: Optional[int] = None

     model_config = ConfigDict(from_attributes=True)


class RentListResponse(BaseModel):
     rents: List[RentResponse]
     message: Optional[str] = None
