# routers/expenses.py
"""
Expense API routes and the monthly expense summaries derived from them.

Every expense write goes through the summary service in the same
transaction, so a summary total never disagrees with its expenses.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import extract
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_admin, get_owned_expense, get_owned_property
from models import Admin, Expense, ExpenseAllocation, MonthlyExpenseSummary
from services.summary_service import sync_expense, remove_expense, rebuild_summary
from schemas.common import MessageResponse, Pagination
from schemas.expense import (
     ExpenseCreate,
     ExpenseUpdate,
     ExpenseResponse,
     ExpenseListResponse,
     MonthlyExpenseSummaryResponse,
     MonthlyExpenseSummaryListResponse,
     PeriodRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/expenses", tags=["expenses"])
summaries_router = APIRouter(prefix="/api/expense-summaries", tags=["expense-summaries"])


@router.get(
     "",
     response_model=ExpenseListResponse,
     summary="List expenses of a property with filters"
)
def list_expenses(
     property_id: int = Query(..., description="Property ID"),
     month: Optional[int] = Query(None, ge=1, le=12, description="Filter by month"),
     year: Optional[int] = Query(None, description="Filter by year"),
     expense_type: Optional[str] = Query(None, description="Filter by expense type"),
     page: int = Query(1, ge=1, description="Page number"),
     limit: int = Query(50, ge=1, le=100, description="Items per page"),
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     get_owned_property(db, admin, property_id)

     query = db.query(Expense).filter(Expense.property_id == property_id)
     if year:
          query = query.filter(extract("year", Expense.date) == year)
     if month:
          query = query.filter(extract("month", Expense.date) == month)
     if expense_type:
          query = query.filter(Expense.expense_type == expense_type)

     total = query.count()
     offset = (page - 1) * limit
     expenses = query.order_by(Expense.date.desc(), Expense.id.desc()).offset(offset).limit(limit).all()

     return ExpenseListResponse(
          expenses=[ExpenseResponse.model_validate(e) for e in expenses],
          pagination=Pagination.build(page, limit, total)
     )


@router.post(
     "",
     response_model=ExpenseResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new expense"
)
def create_expense(
     expense_data: ExpenseCreate,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     """
     Create an expense and fold it into the summary of its period.
     The summary is created on first use.
     """
     prop = get_owned_property(db, admin, expense_data.property_id)

     expense = Expense(
          property_id=prop.id,
          expense_type=expense_data.expense_type,
          amount=expense_data.amount,
          date=expense_data.date,
          description=expense_data.description,
     )
     db.add(expense)
     sync_expense(db, expense)
     db.commit()
     db.refresh(expense)

     logger.info("Created expense %s in summary %s", expense.id, expense.monthly_expense_summary_id)
     return ExpenseResponse.model_validate(expense)


@router.get("/{expense_id}", response_model=ExpenseResponse, summary="Get expense by ID")
def get_expense(
     expense_id: int,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     return ExpenseResponse.model_validate(get_owned_expense(db, admin, expense_id))


@router.put("/{expense_id}", response_model=ExpenseResponse, summary="Update expense")
def update_expense(
     expense_id: int,
     expense_data: ExpenseUpdate,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     """
     Update an expense. A new date may move it to another period; both the
     old and the new summary are recomputed.
     """
     expense = get_owned_expense(db, admin, expense_id)
     previous_summary_id = expense.monthly_expense_summary_id

     if expense_data.expense_type is not None:
          expense.expense_type = expense_data.expense_type
     if expense_data.amount is not None:
          expense.amount = expense_data.amount
     if expense_data.date is not None:
          expense.date = expense_data.date
     if "description" in expense_data.model_fields_set:
          expense.description = expense_data.description

     sync_expense(db, expense, previous_summary_id=previous_summary_id)
     db.commit()
     db.refresh(expense)
     return ExpenseResponse.model_validate(expense)


@router.delete("/{expense_id}", response_model=MessageResponse, summary="Delete expense")
def delete_expense(
     expense_id: int,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     expense = get_owned_expense(db, admin, expense_id)
     remove_expense(db, expense)
     db.commit()

     logger.info("Deleted expense %s", expense_id)
     return MessageResponse(message="Expense deleted successfully")


# ---------------------------------------------------------------------------
# Monthly expense summaries
# ---------------------------------------------------------------------------

@summaries_router.get(
     "",
     response_model=MonthlyExpenseSummaryListResponse,
     summary="List monthly expense summaries of a property"
)
def list_summaries(
     property_id: int = Query(..., description="Property ID"),
     year: Optional[int] = Query(None, description="Filter by year"),
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     get_owned_property(db, admin, property_id)

     query = db.query(MonthlyExpenseSummary).filter(MonthlyExpenseSummary.property_id == property_id)
     if year:
          query = query.filter(MonthlyExpenseSummary.period_year == year)
     summaries = query.order_by(
          MonthlyExpenseSummary.period_year.desc(),
          MonthlyExpenseSummary.period_month.desc()
     ).all()

     return MonthlyExpenseSummaryListResponse(
          summaries=[_build_summary_response(db, s) for s in summaries]
     )


@summaries_router.post(
     "/rebuild",
     response_model=MonthlyExpenseSummaryResponse,
     summary="Relink and recompute a period's summary"
)
def rebuild_period_summary(
     period: PeriodRequest,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     get_owned_property(db, admin, period.property_id)
     summary = rebuild_summary(db, period.property_id, period.year, period.month)
     db.commit()
     db.refresh(summary)
     return _build_summary_response(db, summary)


def _build_summary_response(db: Session, summary: MonthlyExpenseSummary) -> MonthlyExpenseSummaryResponse:
     response = MonthlyExpenseSummaryResponse.model_validate(summary)
     response.expenses_count = (
          db.query(Expense).filter(Expense.monthly_expense_summary_id == summary.id).count()
     )
     response.allocations_count = (
          db.query(ExpenseAllocation).filter(ExpenseAllocation.monthly_expense_summary_id == summary.id).count()
     )
     return response
