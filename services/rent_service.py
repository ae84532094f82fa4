# services/rent_service.py
"""
Rent schedule service - derives one Rent row per contract month, escalated
by a published index (ICL, IPC, or the average of both).

Schedule rules:
- Periods run from the contract's start month to min(end month, current month)
- Month 0 is the initial rent
- On an adjustment month (every 1, 3, 6 or 12 months depending on the
  frequency) the amount becomes round(initial * target / base, 2), where
  base is the index value of the start month and target the value of the
  adjustment month; the amount carries forward until the next adjustment
- When a needed index value is not published yet, the previous amount
  carries forward and the row is not marked as adjusted
"""
import logging
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Optional, Tuple, Any

from sqlalchemy.orm import Session

from models import Contract, IndexValue, Rent
from models.contract import RentIncreaseFrequency, RentIncreaseIndex
from models.index_value import IndexType


logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")
FACTOR_PLACES = Decimal("0.000001")

# months between adjustments
ADJUSTMENT_INTERVALS = {
     RentIncreaseFrequency.MONTHLY.value: 1,
     RentIncreaseFrequency.QUARTERLY.value: 3,
     RentIncreaseFrequency.SEMI_ANNUALLY.value: 6,
     RentIncreaseFrequency.ANNUALLY.value: 12,
}

Period = Tuple[int, int]
IndexSeries = Dict[str, Dict[Period, Decimal]]


def months_between(start: Period, end: Period) -> int:
     return (end[0] - start[0]) * 12 + (end[1] - start[1])


def add_months(period: Period, offset: int) -> Period:
     year, month = period
     zero_based = month - 1 + offset
     return year + zero_based // 12, zero_based % 12 + 1


def is_adjustment_month(offset: int, frequency: str) -> bool:
     interval = ADJUSTMENT_INTERVALS.get(frequency)
     if interval is None:
          return False
     return offset % interval == 0


def _index_types_for(index: str) -> List[str]:
     if index == RentIncreaseIndex.AVERAGE.value:
          return [IndexType.ICL.value, IndexType.IPC.value]
     return [index]


def _adjustment(index: str, series: IndexSeries, base: Period, target: Period):
     """
     Factor for ``target`` relative to ``base``, or None if a value is missing.

     Returns (factor, base_value, target_value); the two values are only
     reported for a single index.
     """
     factors = []
     values = []
     for index_type in _index_types_for(index):
          values_by_period = series.get(index_type, {})
          base_value = values_by_period.get(base)
          target_value = values_by_period.get(target)
          if not base_value or not target_value:
               return None
          factors.append(Decimal(target_value) / Decimal(base_value))
          values.append((Decimal(base_value), Decimal(target_value)))

     factor = sum(factors, Decimal("0")) / len(factors)
     if len(values) == 1:
          return factor, values[0][0], values[0][1]
     return factor, None, None


def build_rent_schedule(
     initial_amount: Decimal,
     start: date,
     cutoff: date,
     frequency: str,
     index: str,
     series: IndexSeries,
) -> List[Dict[str, Any]]:
     """
     Compute the rent of every month from ``start`` through ``cutoff``.

     Args:
          initial_amount: Rent of the first month
          start: Contract start date (only year/month matter)
          cutoff: Last date to schedule (only year/month matter)
          frequency: monthly, quarterly, semi-annually or annually
          index: ICL, IPC or AVERAGE
          series: Published values keyed by index type, then (year, month)

     Returns:
          One dict per period, ordered; empty when cutoff precedes start
     """
     initial = Decimal(str(initial_amount))
     base_period = (start.year, start.month)
     total_months = months_between(base_period, (cutoff.year, cutoff.month)) + 1

     schedule = []
     current_amount = initial
     for offset in range(max(total_months, 0)):
          year, month = add_months(base_period, offset)
          row = {
               "period_year": year,
               "period_month": month,
               "amount": current_amount,
               "base_amount": initial,
               "adjustment_factor": None,
               "base_index_value": None,
               "adjustment_index_value": None,
               "is_adjusted": False,
               "adjustment_period_year": None,
               "adjustment_period_month": None,
          }

          if offset > 0 and is_adjustment_month(offset, frequency):
               adjustment = _adjustment(index, series, base_period, (year, month))
               if adjustment is not None:
                    factor, base_value, target_value = adjustment
                    current_amount = (initial * factor).quantize(CENTS, rounding=ROUND_HALF_UP)
                    row.update({
                         "amount": current_amount,
                         "adjustment_factor": factor.quantize(FACTOR_PLACES, rounding=ROUND_HALF_UP),
                         "base_index_value": base_value,
                         "adjustment_index_value": target_value,
                         "is_adjusted": True,
                         "adjustment_period_year": year,
                         "adjustment_period_month": month,
                    })
               else:
                    logger.debug("No %s value for %s-%02d; carrying %s forward", index, year, month, current_amount)

          schedule.append(row)
     return schedule


def load_index_series(db: Session, index: str, start_year: int, end_year: int) -> IndexSeries:
     """Published values needed by a schedule, keyed by index type and period."""
     rows = (
          db.query(IndexValue)
          .filter(
               IndexValue.index_type.in_(_index_types_for(index)),
               IndexValue.period_year >= start_year,
               IndexValue.period_year <= end_year,
          )
          .all()
     )
     series: IndexSeries = {}
     for row in rows:
          series.setdefault(row.index_type, {})[(row.period_year, row.period_month)] = Decimal(str(row.value))
     return series


def schedule_cutoff(contract: Contract, today: Optional[date] = None) -> date:
     """Earlier of the contract end and the current month."""
     today = today or date.today()
     return min(contract.end_date, today)


def recalculate_contract_rents(db: Session, contract: Contract, today: Optional[date] = None) -> List[Rent]:
     """
     Insert or update the contract's Rent rows from its schedule.

     Existing rows are updated in place and keep ``amount_paid``; the
     balance is recomputed as amount - amount_paid.

     Returns:
          The contract's rents ordered by period (empty when nothing to schedule)
     """
     cutoff = schedule_cutoff(contract, today)
     series = load_index_series(db, contract.rent_increase_index, contract.start_date.year, cutoff.year)
     schedule = build_rent_schedule(
          contract.initial_rent_amount,
          contract.start_date,
          cutoff,
          contract.rent_increase_frequency or RentIncreaseFrequency.QUARTERLY.value,
          contract.rent_increase_index or RentIncreaseIndex.ICL.value,
          series,
     )
     if not schedule:
          return []

     existing = {
          (rent.period_year, rent.period_month): rent
          for rent in db.query(Rent).filter(Rent.contract_id == contract.id).all()
     }

     inserted = 0
     for row in schedule:
          rent = existing.get((row["period_year"], row["period_month"]))
          if rent is None:
               rent = Rent(contract_id=contract.id, amount_paid=Decimal("0"), **row)
               db.add(rent)
               inserted += 1
          else:
               for field, value in row.items():
                    setattr(rent, field, value)
          rent.balance = Decimal(str(rent.amount)) - Decimal(str(rent.amount_paid or 0))
     db.flush()

     logger.info(
          "Recalculated contract %s: %d periods (%d new, %d updated)",
          contract.id, len(schedule), inserted, len(schedule) - inserted
     )
     return list_contract_rents(db, contract.id)


def list_contract_rents(db: Session, contract_id: int) -> List[Rent]:
     return (
          db.query(Rent)
          .filter(Rent.contract_id == contract_id)
          .order_by(Rent.period_year, Rent.period_month)
          .all()
     )
