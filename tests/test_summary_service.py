"""Monthly expense summary maintenance.

Invariants:
    - After recompute, total_expenses == sum of linked expense amounts
    - Moving an expense between periods updates both summaries; it is counted once
    - Deleting the last expense leaves the summary row at 0
"""

import logging
from datetime import date
from decimal import Decimal

from models import Expense, ExpenseAllocation, MonthlyExpenseSummary
from services.summary_service import (
    get_or_create_summary,
    rebuild_summary,
    recompute_summary,
    remove_expense,
    sync_expense,
)


def add_expense(db, prop, amount, day, expense_type="Limpieza"):
    expense = Expense(property_id=prop.id, expense_type=expense_type, amount=Decimal(amount), date=day)
    db.add(expense)
    sync_expense(db, expense)
    db.commit()
    return expense


def summary_for(db, prop, year, month):
    db.expire_all()
    return (
        db.query(MonthlyExpenseSummary)
        .filter_by(property_id=prop.id, period_year=year, period_month=month)
        .one()
    )


def test_create_links_expense_and_sets_total(db, prop):
    expense = add_expense(db, prop, "1500.50", date(2026, 3, 10))

    summary = summary_for(db, prop, 2026, 3)
    assert expense.monthly_expense_summary_id == summary.id
    assert summary.total_expenses == Decimal("1500.50")


def test_total_equals_sum_of_linked_expenses(db, prop):
    for amount in ("100.10", "200.20", "300.30"):
        add_expense(db, prop, amount, date(2026, 3, 5))

    summary = summary_for(db, prop, 2026, 3)
    assert summary.total_expenses == Decimal("600.60")


def test_recompute_overwrites_drifted_total(db, prop):
    add_expense(db, prop, "250.00", date(2026, 3, 1))
    summary = summary_for(db, prop, 2026, 3)
    summary.total_expenses = Decimal("9999.99")
    db.commit()

    assert recompute_summary(db, summary) == Decimal("250.00")


def test_moving_expense_updates_both_periods(db, prop):
    add_expense(db, prop, "1000.00", date(2026, 3, 1))
    moved = add_expense(db, prop, "400.00", date(2026, 3, 20))
    previous_summary_id = moved.monthly_expense_summary_id

    moved.date = date(2026, 4, 2)
    sync_expense(db, moved, previous_summary_id=previous_summary_id)
    db.commit()

    assert summary_for(db, prop, 2026, 3).total_expenses == Decimal("1000.00")
    assert summary_for(db, prop, 2026, 4).total_expenses == Decimal("400.00")


def test_updating_amount_in_place_is_counted_once(db, prop):
    expense = add_expense(db, prop, "300.00", date(2026, 5, 1))

    expense.amount = Decimal("350.00")
    sync_expense(db, expense, previous_summary_id=expense.monthly_expense_summary_id)
    db.commit()

    assert summary_for(db, prop, 2026, 5).total_expenses == Decimal("350.00")


def test_deleting_last_expense_leaves_zero(db, prop):
    expense = add_expense(db, prop, "75.00", date(2026, 6, 1))

    remove_expense(db, expense)
    db.commit()

    summary = summary_for(db, prop, 2026, 6)
    assert summary.total_expenses == Decimal("0")
    # still idempotent
    assert recompute_summary(db, summary) == Decimal("0")


def test_get_or_create_summary_is_idempotent(db, prop):
    first = get_or_create_summary(db, prop.id, 2026, 7)
    second = get_or_create_summary(db, prop.id, 2026, 7)
    db.commit()

    assert first.id == second.id
    assert db.query(MonthlyExpenseSummary).filter_by(property_id=prop.id).count() == 1


def test_rebuild_relinks_expenses_by_date(db, prop):
    good = add_expense(db, prop, "100.00", date(2026, 8, 3))
    misplaced = add_expense(db, prop, "50.00", date(2026, 8, 9))
    august = summary_for(db, prop, 2026, 8)

    # simulate a bad link: September expense pointing at August
    misplaced.date = date(2026, 9, 1)
    db.commit()

    rebuild_summary(db, prop.id, 2026, 8)
    db.commit()

    db.expire_all()
    assert db.get(Expense, good.id).monthly_expense_summary_id == august.id
    assert summary_for(db, prop, 2026, 8).total_expenses == Decimal("100.00")
    assert summary_for(db, prop, 2026, 9).total_expenses == Decimal("50.00")


def test_total_change_with_allocations_logs_warning(db, prop, caplog):
    expense = add_expense(db, prop, "1000.00", date(2026, 3, 1))
    summary = summary_for(db, prop, 2026, 3)
    unit = prop.units[0]
    db.add(ExpenseAllocation(
        monthly_expense_summary_id=summary.id,
        unit_id=unit.id,
        allocated_amount=Decimal("600.00"),
        allocation_percentage=Decimal("60"),
    ))
    db.commit()

    with caplog.at_level(logging.WARNING, logger="services.summary_service"):
        expense.amount = Decimal("1200.00")
        sync_expense(db, expense, previous_summary_id=summary.id)
        db.commit()

    assert "allocations exist" in caplog.text
    # allocations are left untouched
    assert db.query(ExpenseAllocation).filter_by(monthly_expense_summary_id=summary.id).count() == 1
