# routers/units.py
"""
Unit API routes.

Units are exposed two ways:
- /api/units: flat list across the caller's properties, with filters
- /api/properties/{property_id}/units: scoped to one property
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_admin, get_owned_property, get_owned_unit
from models import Admin, Property, Unit
from schemas.common import MessageResponse
from schemas.unit import (
     UnitCreate,
     UnitUpdate,
     UnitResponse,
     UnitListResponse,
     UnitStatusEnum,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/units", tags=["units"])
property_units_router = APIRouter(prefix="/api/properties/{property_id}/units", tags=["units"])


# ---------------------------------------------------------------------------
# /api/units
# ---------------------------------------------------------------------------

@router.get(
     "",
     response_model=UnitListResponse,
     summary="List units with filters"
)
def list_units(
     property_id: Optional[int] = Query(None, description="Filter by property ID"),
     status: Optional[UnitStatusEnum] = Query(None, description="Filter by occupancy"),
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     query = (
          db.query(Unit)
          .join(Property, Unit.property_id == Property.id)
          .filter(Property.admin_id == admin.id)
     )
     if property_id:
          get_owned_property(db, admin, property_id)
          query = query.filter(Unit.property_id == property_id)
     if status:
          query = query.filter(Unit.status == status.value)

     units = query.order_by(Unit.property_id, Unit.unit_number).all()
     return UnitListResponse(units=[_build_unit_response(u) for u in units])


@router.post(
     "",
     response_model=UnitResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new unit"
)
def create_unit(
     unit_data: UnitCreate,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     if not unit_data.property_id:
          raise HTTPException(
               status_code=status.HTTP_400_BAD_REQUEST,
               detail="Missing required fields: property_id"
          )
     prop = get_owned_property(db, admin, unit_data.property_id)
     return _create_unit(db, prop, unit_data)


@router.get("/{unit_id}", response_model=UnitResponse, summary="Get unit by ID")
def get_unit(
     unit_id: int,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     return _build_unit_response(get_owned_unit(db, admin, unit_id))


@router.put("/{unit_id}", response_model=UnitResponse, summary="Update unit")
def update_unit(
     unit_id: int,
     unit_data: UnitUpdate,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     return _update_unit(db, get_owned_unit(db, admin, unit_id), unit_data)


@router.delete("/{unit_id}", response_model=MessageResponse, summary="Delete unit")
def delete_unit(
     unit_id: int,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     return _delete_unit(db, get_owned_unit(db, admin, unit_id))


# ---------------------------------------------------------------------------
# /api/properties/{property_id}/units
# ---------------------------------------------------------------------------

@property_units_router.get(
     "",
     response_model=UnitListResponse,
     summary="List the units of a property"
)
def list_property_units(
     property_id: int,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     prop = get_owned_property(db, admin, property_id)
     units = (
          db.query(Unit)
          .filter(Unit.property_id == prop.id)
          .order_by(Unit.unit_number)
          .all()
     )
     return UnitListResponse(units=[_build_unit_response(u) for u in units])


@property_units_router.post(
     "",
     response_model=UnitResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a unit in a property"
)
def create_property_unit(
     property_id: int,
     unit_data: UnitCreate,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     prop = get_owned_property(db, admin, property_id)
     return _create_unit(db, prop, unit_data)


@property_units_router.get("/{unit_id}", response_model=UnitResponse, summary="Get a property's unit")
def get_property_unit(
     property_id: int,
     unit_id: int,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     return _build_unit_response(get_owned_unit(db, admin, unit_id, property_id=property_id))


@property_units_router.put("/{unit_id}", response_model=UnitResponse, summary="Update a property's unit")
def update_property_unit(
     property_id: int,
     unit_id: int,
     unit_data: UnitUpdate,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     unit = get_owned_unit(db, admin, unit_id, property_id=property_id)
     return _update_unit(db, unit, unit_data)


@property_units_router.delete("/{unit_id}", response_model=MessageResponse, summary="Delete a property's unit")
def delete_property_unit(
     property_id: int,
     unit_id: int,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     return _delete_unit(db, get_owned_unit(db, admin, unit_id, property_id=property_id))


# ---------------------------------------------------------------------------
# Shared handlers
# ---------------------------------------------------------------------------

def _create_unit(db: Session, prop: Property, unit_data: UnitCreate) -> UnitResponse:
     unit = Unit(
          property_id=prop.id,
          unit_number=unit_data.unit_number,
          status=unit_data.status.value,
          expense_percentage=unit_data.expense_percentage,
     )
     db.add(unit)
     db.commit()
     db.refresh(unit)

     logger.info("Created unit %s in property %s", unit.id, prop.id)
     return _build_unit_response(unit)


def _update_unit(db: Session, unit: Unit, unit_data: UnitUpdate) -> UnitResponse:
     if unit_data.unit_number is not None:
          unit.unit_number = unit_data.unit_number
     if unit_data.status is not None:
          unit.status = unit_data.status.value
     if unit_data.expense_percentage is not None:
          unit.expense_percentage = unit_data.expense_percentage

     db.commit()
     db.refresh(unit)
     return _build_unit_response(unit)


def _delete_unit(db: Session, unit: Unit) -> MessageResponse:
     """Delete a unit with its contracts and allocations; its residents are unassigned."""
     for resident in unit.residents:
          resident.unit_id = None
     db.flush()

     unit_id = unit.id
     db.delete(unit)
     db.commit()

     logger.info("Deleted unit %s", unit_id)
     return MessageResponse(message="Unit deleted successfully")


def _build_unit_response(unit: Unit) -> UnitResponse:
     """Build unit response with property and resident names."""
     response = UnitResponse.model_validate(unit)
     response.property_name = unit.property.name if unit.property else None
     response.resident_name = unit.residents[0].name if unit.residents else None
     return response
