# routers/liquidaciones.py
"""
Liquidación API routes.

- GET    /api/liquidaciones               per-unit statement for a period
- POST   /api/liquidaciones/calculate     split the period's summary across units
- DELETE /api/liquidaciones/allocations   drop the period's allocations
- POST   /api/liquidaciones/send-receipts email every resident their receipt
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_admin, get_owned_property
from models import Admin
from services.allocation_service import calculate_allocations, delete_allocations
from services.exceptions import ConflictError, NotFoundError
from services.liquidacion_service import build_liquidaciones
from services import receipt_service
from utils.email import EmailNotConfiguredError
from schemas.expense import PeriodRequest
from schemas.liquidacion import (
     LiquidacionListResponse,
     AllocationCalculationResponse,
     AllocationDeleteResponse,
     SendReceiptsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/liquidaciones", tags=["liquidaciones"])


@router.get(
     "",
     response_model=LiquidacionListResponse,
     summary="Per-unit statement for a period"
)
def list_liquidaciones(
     property_id: int = Query(..., description="Property ID"),
     year: int = Query(..., ge=1900, le=9999, description="Period year"),
     month: int = Query(..., ge=1, le=12, description="Period month"),
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     get_owned_property(db, admin, property_id)
     rows = build_liquidaciones(db, property_id, year, month)
     return {
          "data": rows,
          "meta": {
               "total_units": len(rows),
               "period": {"year": year, "month": month},
          },
     }


@router.post(
     "/calculate",
     response_model=AllocationCalculationResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Calculate expense allocations for a period"
)
def calculate(
     period: PeriodRequest,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     """
     Split the period's monthly expense summary across the property's units.

     Rejected with 409 while allocations exist for the period; delete them
     first to recalculate.
     """
     get_owned_property(db, admin, period.property_id)
     try:
          result = calculate_allocations(db, period.property_id, period.year, period.month)
     except NotFoundError as e:
          raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
     except ConflictError as e:
          raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

     db.commit()
     return result


@router.delete(
     "/allocations",
     response_model=AllocationDeleteResponse,
     summary="Delete the expense allocations of a period"
)
def remove_allocations(
     property_id: int = Query(..., description="Property ID"),
     year: int = Query(..., ge=1900, le=9999, description="Period year"),
     month: int = Query(..., ge=1, le=12, description="Period month"),
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     get_owned_property(db, admin, property_id)
     try:
          deleted = delete_allocations(db, property_id, year, month)
     except NotFoundError as e:
          raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

     db.commit()
     return AllocationDeleteResponse(
          message="Expense allocations deleted successfully",
          allocations_deleted=deleted
     )


@router.post(
     "/send-receipts",
     response_model=SendReceiptsResponse,
     summary="Email the period's receipts to residents"
)
def send_receipts(
     period: PeriodRequest,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     """
     Send one HTML receipt per resident with an email and something due.
     Individual delivery failures are reported in ``failed``.
     """
     prop = get_owned_property(db, admin, period.property_id)
     try:
          return receipt_service.send_receipts(db, prop, period.year, period.month)
     except EmailNotConfiguredError as e:
          logger.error("Cannot send receipts for property %s: %s", prop.id, e)
          raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
