# services/summary_service.py
"""
Monthly Expense Summary Service - keeps per-property, per-period totals
equal to the sum of the expenses linked to them.

Every mutation that touches an expense's amount or date goes through here:
1. Link the expense to the summary of the period its date falls in
   (creating the summary on first use)
2. Recompute the affected summaries by re-querying and summing the linked
   expense amounts; totals are never adjusted incrementally

Functions only flush. The caller commits, so the expense write and the
recomputation land in the same transaction.
"""
import logging
from calendar import monthrange
from datetime import date
from decimal import Decimal
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from models import Expense, ExpenseAllocation, MonthlyExpenseSummary


logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def period_of(day: date) -> Tuple[int, int]:
     """(year, month) of the summary period a date belongs to."""
     return day.year, day.month


def get_or_create_summary(db: Session, property_id: int, year: int, month: int) -> MonthlyExpenseSummary:
     """Return the summary for a property and period, creating an empty one if missing."""
     summary = (
          db.query(MonthlyExpenseSummary)
          .filter(
               MonthlyExpenseSummary.property_id == property_id,
               MonthlyExpenseSummary.period_year == year,
               MonthlyExpenseSummary.period_month == month,
          )
          .first()
     )
     if summary is None:
          summary = MonthlyExpenseSummary(
               property_id=property_id,
               period_year=year,
               period_month=month,
               total_expenses=Decimal("0.00"),
          )
          db.add(summary)
          db.flush()
          logger.info("Created monthly expense summary %s for property %s (%s-%02d)", summary.id, property_id, year, month)
     return summary


def recompute_summary(db: Session, summary: MonthlyExpenseSummary) -> Decimal:
     """
     Rewrite ``total_expenses`` from the linked expense rows.

     Args:
          db: SQLAlchemy database session
          summary: Summary to recompute

     Returns:
          The new total (0 when no expense is linked)
     """
     db.flush()  # pending links must be visible to the query below

     amounts = (
          db.query(Expense.amount)
          .filter(Expense.monthly_expense_summary_id == summary.id)
          .all()
     )
     total = sum((Decimal(str(amount)) for (amount,) in amounts), Decimal("0")).quantize(CENTS)

     previous = Decimal(str(summary.total_expenses or 0)).quantize(CENTS)
     if previous != total:
          allocations = (
               db.query(ExpenseAllocation)
               .filter(ExpenseAllocation.monthly_expense_summary_id == summary.id)
               .count()
          )
          if allocations:
               logger.warning(
                    "Summary %s total changed from %s to %s but %d allocations exist; "
                    "delete and recalculate them",
                    summary.id, previous, total, allocations
               )

     summary.total_expenses = total
     db.flush()
     logger.info("Recomputed summary %s: %d expenses, total %s", summary.id, len(amounts), total)
     return total


def link_expense(db: Session, expense: Expense) -> MonthlyExpenseSummary:
     """Point the expense at the summary of the period derived from its date."""
     year, month = period_of(expense.date)
     summary = get_or_create_summary(db, expense.property_id, year, month)
     expense.monthly_expense_summary_id = summary.id
     return summary


def sync_expense(
     db: Session,
     expense: Expense,
     previous_summary_id: Optional[int] = None
) -> MonthlyExpenseSummary:
     """
     Re-link an expense after create or update and recompute the affected totals.

     When the expense moved to another period, the previous summary is
     recomputed too, so it only keeps its remaining expenses and the moved
     one is counted once in the new period.

     Args:
          db: SQLAlchemy database session
          expense: Expense that was just created or updated (already added to the session)
          previous_summary_id: Summary the expense was linked to before the change

     Returns:
          The summary the expense is now linked to
     """
     current = link_expense(db, expense)
     db.flush()

     if previous_summary_id is not None and previous_summary_id != current.id:
          previous = db.get(MonthlyExpenseSummary, previous_summary_id)
          if previous is not None:
               recompute_summary(db, previous)

     recompute_summary(db, current)
     return current


def remove_expense(db: Session, expense: Expense) -> Optional[MonthlyExpenseSummary]:
     """
     Delete an expense and recompute the summary it belonged to.

     The summary row is kept even when its last expense goes away; its
     total simply becomes 0.
     """
     summary_id = expense.monthly_expense_summary_id
     db.delete(expense)
     db.flush()

     if summary_id is None:
          return None
     summary = db.get(MonthlyExpenseSummary, summary_id)
     if summary is not None:
          recompute_summary(db, summary)
     return summary


def rebuild_summary(db: Session, property_id: int, year: int, month: int) -> MonthlyExpenseSummary:
     """
     Repair a period: relink every expense by its date and recompute.

     Expenses dated inside the period are pointed at its summary. Expenses
     linked to it but dated elsewhere are moved to their own period, whose
     summary is recomputed as well.
     """
     summary = get_or_create_summary(db, property_id, year, month)
     first_day = date(year, month, 1)
     last_day = date(year, month, monthrange(year, month)[1])

     in_period = (
          db.query(Expense)
          .filter(
               Expense.property_id == property_id,
               Expense.date >= first_day,
               Expense.date <= last_day,
          )
          .all()
     )
     stale_ids = set()
     for expense in in_period:
          if expense.monthly_expense_summary_id != summary.id:
               if expense.monthly_expense_summary_id is not None:
                    stale_ids.add(expense.monthly_expense_summary_id)
               expense.monthly_expense_summary_id = summary.id

     misplaced = (
          db.query(Expense)
          .filter(
               Expense.monthly_expense_summary_id == summary.id,
               (Expense.date < first_day) | (Expense.date > last_day),
          )
          .all()
     )
     touched = []
     for expense in misplaced:
          touched.append(link_expense(db, expense))
     db.flush()

     for stale_id in stale_ids:
          stale = db.get(MonthlyExpenseSummary, stale_id)
          if stale is not None:
               recompute_summary(db, stale)
     for other in touched:
          recompute_summary(db, other)

     recompute_summary(db, summary)
     logger.info(
          "Rebuilt summary %s: %d expenses in period, %d relinked elsewhere",
          summary.id, len(in_period), len(misplaced)
     )
     return summary
