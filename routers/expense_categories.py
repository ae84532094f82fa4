# routers/expense_categories.py
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import func
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_admin, get_owned_category
from models import Admin, Expense, ExpenseCategory, Property
from schemas.common import MessageResponse
from schemas.expense_category import (
     ExpenseCategoryCreate,
     ExpenseCategoryUpdate,
     ExpenseCategoryResponse,
     ExpenseCategoryListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/expense-categories", tags=["expense-categories"])


def _ensure_name_free(db: Session, admin: Admin, name: str, category_id: int = None) -> None:
     query = db.query(ExpenseCategory).filter(
          ExpenseCategory.admin_id == admin.id,
          func.lower(ExpenseCategory.name) == name.lower()
     )
     if category_id is not None:
          query = query.filter(ExpenseCategory.id != category_id)
     if query.first():
          raise HTTPException(
               status_code=status.HTTP_409_CONFLICT,
               detail="A category with this name already exists"
          )


@router.get("", response_model=ExpenseCategoryListResponse, summary="List expense categories")
def list_categories(
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     categories = (
          db.query(ExpenseCategory)
          .filter(ExpenseCategory.admin_id == admin.id)
          .order_by(ExpenseCategory.name)
          .all()
     )
     return ExpenseCategoryListResponse(
          categories=[ExpenseCategoryResponse.model_validate(c) for c in categories]
     )


@router.post(
     "",
     response_model=ExpenseCategoryResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create an expense category"
)
def create_category(
     category_data: ExpenseCategoryCreate,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     name = category_data.name.strip()
     _ensure_name_free(db, admin, name)

     category = ExpenseCategory(admin_id=admin.id, name=name)
     db.add(category)
     db.commit()
     db.refresh(category)
     return ExpenseCategoryResponse.model_validate(category)


@router.put("/{category_id}", response_model=ExpenseCategoryResponse, summary="Rename an expense category")
def update_category(
     category_id: int,
     category_data: ExpenseCategoryUpdate,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     """
     Rename a category. Expenses store the category name, so existing
     expenses of the caller's properties are renamed along with it.
     """
     category = get_owned_category(db, admin, category_id)
     name = category_data.name.strip()
     _ensure_name_free(db, admin, name, category_id=category.id)

     if name != category.name:
          property_ids = db.query(Property.id).filter(Property.admin_id == admin.id)
          renamed = (
               db.query(Expense)
               .filter(Expense.property_id.in_(property_ids), Expense.expense_type == category.name)
               .update({Expense.expense_type: name}, synchronize_session="fetch")
          )
          logger.info("Renamed category %s to %r (%d expenses)", category.id, name, renamed)
          category.name = name

     db.commit()
     db.refresh(category)
     return ExpenseCategoryResponse.model_validate(category)


@router.delete("/{category_id}", response_model=MessageResponse, summary="Delete an expense category")
def delete_category(
     category_id: int,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     category = get_owned_category(db, admin, category_id)

     in_use = (
          db.query(Expense)
          .join(Property, Expense.property_id == Property.id)
          .filter(Property.admin_id == admin.id, Expense.expense_type == category.name)
          .first()
     )
     if in_use:
          raise HTTPException(
               status_code=status.HTTP_409_CONFLICT,
               detail="Category is in use by existing expenses"
          )

     db.delete(category)
     db.commit()
     return MessageResponse(message="Category deleted successfully")
