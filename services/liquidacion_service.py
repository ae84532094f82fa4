# services/liquidacion_service.py
"""
Liquidación - per-unit monthly statement combining the unit's expense
allocation and, when the resident is a tenant, the rent due.
"""
import logging
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy.orm import Session, selectinload

from models import Contract, ExpenseAllocation, MonthlyExpenseSummary, Rent, Unit
from models.resident import ResidentRole


logger = logging.getLogger(__name__)


def _allocations_by_unit(db: Session, property_id: int, year: int, month: int) -> Dict[int, ExpenseAllocation]:
     allocations = (
          db.query(ExpenseAllocation)
          .join(MonthlyExpenseSummary, ExpenseAllocation.monthly_expense_summary_id == MonthlyExpenseSummary.id)
          .filter(
               MonthlyExpenseSummary.property_id == property_id,
               MonthlyExpenseSummary.period_year == year,
               MonthlyExpenseSummary.period_month == month,
          )
          .all()
     )
     return {allocation.unit_id: allocation for allocation in allocations}


def _rents_by_unit(db: Session, property_id: int, year: int, month: int) -> Dict[int, Rent]:
     rents = (
          db.query(Rent, Contract.unit_id)
          .join(Contract, Rent.contract_id == Contract.id)
          .join(Unit, Contract.unit_id == Unit.id)
          .filter(
               Unit.property_id == property_id,
               Rent.period_year == year,
               Rent.period_month == month,
          )
          .order_by(Contract.id)
          .all()
     )
     # the newest contract of a unit wins when leases overlap
     return {unit_id: rent for rent, unit_id in rents}


def build_liquidaciones(db: Session, property_id: int, year: int, month: int) -> List[Dict[str, Any]]:
     """
     One row per unit of the property for the given period.

     Args:
          db: SQLAlchemy database session
          property_id: Property to report on (ownership already checked)
          year: Period year
          month: Period month

     Returns:
          Rows with unit, resident, expense_due, rent_due and allocation_id
     """
     units = (
          db.query(Unit)
          .options(selectinload(Unit.residents))
          .filter(Unit.property_id == property_id)
          .order_by(Unit.unit_number)
          .all()
     )
     allocations = _allocations_by_unit(db, property_id, year, month)
     rents = _rents_by_unit(db, property_id, year, month)

     rows = []
     for unit in units:
          resident = unit.residents[0] if unit.residents else None
          allocation = allocations.get(unit.id)
          rent = rents.get(unit.id) if resident and resident.role == ResidentRole.TENANT.value else None

          rows.append({
               "unit_id": unit.id,
               "unit_number": unit.unit_number,
               "expense_percentage": Decimal(str(unit.expense_percentage or 0)),
               "resident_name": resident.name if resident else None,
               "resident_email": resident.email if resident else None,
               "role": resident.role if resident else None,
               "expense_due": allocation.allocated_amount if allocation else None,
               "rent_due": rent.amount if rent else None,
               "allocation_id": allocation.id if allocation else None,
          })

     logger.info("Built %d liquidaciones for property %s (%s-%02d)", len(rows), property_id, year, month)
     return rows
