# services/allocation_service.py
"""
Expense allocation - splits a monthly expense summary across a property's
units by their fixed ``expense_percentage``.

allocated_amount = total * percentage / 100, rounded half-up to cents.
There is no remainder reconciliation and percentages are not forced to
sum to 100 (a warning is logged when they don't).

Allocations for a period are created once; recalculating requires an
explicit delete first.
"""
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Dict, Any

from sqlalchemy.orm import Session

from models import ExpenseAllocation, MonthlyExpenseSummary, Unit
from models.expense_allocation import AllocationStatus
from services.exceptions import NotFoundError, ConflictError


logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")
HUNDRED = Decimal("100")


def _find_summary(db: Session, property_id: int, year: int, month: int):
     return (
          db.query(MonthlyExpenseSummary)
          .filter(
               MonthlyExpenseSummary.property_id == property_id,
               MonthlyExpenseSummary.period_year == year,
               MonthlyExpenseSummary.period_month == month,
          )
          .first()
     )


def compute_allocations(total: Decimal, units: Iterable[Any]) -> List[Dict[str, Any]]:
     """
     Compute each unit's share of ``total``.

     ``units`` are objects with ``id`` and ``expense_percentage``; a missing
     percentage counts as 0.

     Returns:
          One dict per unit with unit_id, allocation_percentage and allocated_amount
     """
     total = Decimal(str(total))
     rows = []
     for unit in units:
          percentage = Decimal(str(unit.expense_percentage or 0))
          amount = (total * percentage / HUNDRED).quantize(CENTS, rounding=ROUND_HALF_UP)
          rows.append({
               "unit_id": unit.id,
               "allocation_percentage": percentage,
               "allocated_amount": amount,
          })
     return rows


def calculate_allocations(db: Session, property_id: int, year: int, month: int) -> Dict[str, Any]:
     """
     Create one allocation per unit for the period's summary.

     Args:
          db: SQLAlchemy database session
          property_id: Property whose summary is split
          year: Period year
          month: Period month

     Returns:
          Totals of the calculation (summary id, total, allocated, counts)

     Raises:
          NotFoundError: No summary for the period, or the property has no units
          ConflictError: Allocations already exist for the period
     """
     summary = _find_summary(db, property_id, year, month)
     if summary is None:
          raise NotFoundError(
               "No monthly expense summary found for this period. Please create expenses first."
          )

     existing = (
          db.query(ExpenseAllocation)
          .filter(ExpenseAllocation.monthly_expense_summary_id == summary.id)
          .count()
     )
     if existing:
          raise ConflictError(
               "Expense allocations already exist for this period. "
               "Delete existing allocations first if you want to recalculate."
          )

     units = (
          db.query(Unit)
          .filter(Unit.property_id == property_id)
          .order_by(Unit.unit_number)
          .all()
     )
     if not units:
          raise NotFoundError("No units found for this property")

     total = Decimal(str(summary.total_expenses or 0))
     rows = compute_allocations(total, units)

     percentage_sum = sum((row["allocation_percentage"] for row in rows), Decimal("0"))
     if percentage_sum != HUNDRED:
          logger.warning(
               "Unit percentages for property %s sum to %s, not 100; allocations will not add up to the total",
               property_id, percentage_sum
          )

     for row in rows:
          db.add(ExpenseAllocation(
               monthly_expense_summary_id=summary.id,
               unit_id=row["unit_id"],
               allocated_amount=row["allocated_amount"],
               allocation_percentage=row["allocation_percentage"],
               amount_paid=Decimal("0"),
               status=AllocationStatus.PENDING.value,
          ))
     db.flush()

     total_allocated = sum((row["allocated_amount"] for row in rows), Decimal("0"))
     logger.info(
          "Created %d allocations for summary %s (total %s, allocated %s)",
          len(rows), summary.id, total, total_allocated
     )
     return {
          "message": f"Expense allocations calculated successfully for {len(units)} units",
          "monthly_summary_id": summary.id,
          "total_expenses": total,
          "total_allocated": total_allocated,
          "units_count": len(units),
          "allocations_created": len(rows),
     }


def delete_allocations(db: Session, property_id: int, year: int, month: int) -> int:
     """
     Delete the allocations of a period so they can be recalculated.

     Raises:
          NotFoundError: No summary for the period
     """
     summary = _find_summary(db, property_id, year, month)
     if summary is None:
          raise NotFoundError("No monthly expense summary found for this period")

     deleted = (
          db.query(ExpenseAllocation)
          .filter(ExpenseAllocation.monthly_expense_summary_id == summary.id)
          .delete()
     )
     db.expire(summary, ["allocations"])
     db.flush()
     logger.info("Deleted %d allocations for summary %s", deleted, summary.id)
     return deleted
