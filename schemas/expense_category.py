# schemas/expense_category.py
from typing import List
from pydantic import BaseModel, Field, ConfigDict


class ExpenseCategoryCreate(BaseModel):
     name: str = Field(..., min_length=1, max_length=100)


class ExpenseCategoryUpdate(BaseModel):
     name: str = Field(..., min_length=1, max_length=100)


class ExpenseCategoryResponse(BaseModel):
     id: int
     admin_id: int
     name: str

     model_config = ConfigDict(from_attributes=True)


class ExpenseCategoryListResponse(BaseModel):
     categories: List[ExpenseCategoryResponse]
