# routers/residents.py
"""
Resident API routes.

A unit holds at most one resident. Assigning a resident marks the unit
occupied; freeing it (reassignment or delete) marks it vacant again.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import (
     get_current_admin,
     get_owned_property,
     get_owned_resident,
     get_owned_unit,
)
from models import Admin, Contract, Resident, Unit
from models.unit import UnitStatus
from schemas.common import MessageResponse, Pagination
from schemas.resident import (
     ResidentCreate,
     ResidentUpdate,
     ResidentResponse,
     ResidentListResponse,
     ResidentRoleEnum,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/residents", tags=["residents"])


# ---------------------------------------------------------------------------
# Unit assignment helpers
# ---------------------------------------------------------------------------

def _resolve_unit(db: Session, admin: Admin, unit_id: int, property_id: Optional[int]) -> Unit:
     unit = get_owned_unit(db, admin, unit_id)
     if property_id is not None and unit.property_id != property_id:
          raise HTTPException(
               status_code=status.HTTP_400_BAD_REQUEST,
               detail="Unit does not belong to the specified property"
          )
     return unit


def _ensure_unit_free(db: Session, unit: Unit, resident_id: Optional[int] = None) -> None:
     query = db.query(Resident).filter(Resident.unit_id == unit.id)
     if resident_id is not None:
          query = query.filter(Resident.id != resident_id)
     if query.first():
          raise HTTPException(
               status_code=status.HTTP_409_CONFLICT,
               detail="Unit already has a resident assigned"
          )


def _release_unit(db: Session, unit_id: Optional[int], resident_id: int) -> None:
     """Mark a unit vacant unless another resident still lives there."""
     if unit_id is None:
          return
     others = (
          db.query(Resident)
          .filter(Resident.unit_id == unit_id, Resident.id != resident_id)
          .first()
     )
     if others:
          return
     unit = db.get(Unit, unit_id)
     if unit is not None:
          unit.status = UnitStatus.VACANT.value


@router.get(
     "",
     response_model=ResidentListResponse,
     summary="List residents of a property"
)
def list_residents(
     property_id: int = Query(..., description="Property ID"),
     role: Optional[ResidentRoleEnum] = Query(None, description="Filter by role"),
     page: int = Query(1, ge=1, description="Page number"),
     limit: int = Query(50, ge=1, le=100, description="Items per page"),
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     get_owned_property(db, admin, property_id)

     query = db.query(Resident).filter(
          Resident.admin_id == admin.id,
          Resident.property_id == property_id
     )
     if role:
          query = query.filter(Resident.role == role.value)

     total = query.count()
     offset = (page - 1) * limit
     residents = query.order_by(Resident.name).offset(offset).limit(limit).all()

     return ResidentListResponse(
          residents=[_build_resident_response(r) for r in residents],
          pagination=Pagination.build(page, limit, total)
     )


@router.post(
     "",
     response_model=ResidentResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new resident"
)
def create_resident(
     resident_data: ResidentCreate,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     """
     Create a resident, optionally assigned to a unit.

     - **unit_id**: must belong to the caller and be free (409 otherwise)
     - **property_id**: derived from the unit when omitted
     """
     property_id = resident_data.property_id
     if property_id is not None:
          get_owned_property(db, admin, property_id)

     unit = None
     if resident_data.unit_id is not None:
          unit = _resolve_unit(db, admin, resident_data.unit_id, property_id)
          _ensure_unit_free(db, unit)
          property_id = unit.property_id

     resident = Resident(
          admin_id=admin.id,
          property_id=property_id,
          unit_id=unit.id if unit else None,
          name=resident_data.name,
          email=resident_data.email,
          phone=resident_data.phone,
          role=resident_data.role.value,
     )
     db.add(resident)
     if unit is not None:
          unit.status = UnitStatus.OCCUPIED.value

     db.commit()
     db.refresh(resident)

     logger.info("Created resident %s (unit %s)", resident.id, resident.unit_id)
     return _build_resident_response(resident)


@router.get("/{resident_id}", response_model=ResidentResponse, summary="Get resident by ID")
def get_resident(
     resident_id: int,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     return _build_resident_response(get_owned_resident(db, admin, resident_id))


@router.put("/{resident_id}", response_model=ResidentResponse, summary="Update resident")
def update_resident(
     resident_id: int,
     resident_data: ResidentUpdate,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     """
     Update a resident. Only provided fields change.

     Moving the resident to another unit frees the old one; sending
     ``unit_id: null`` unassigns it.
     """
     resident = get_owned_resident(db, admin, resident_id)
     provided = resident_data.model_fields_set

     if "property_id" in provided and resident_data.property_id is not None:
          get_owned_property(db, admin, resident_data.property_id)
          target_unit_id = resident_data.unit_id if "unit_id" in provided else resident.unit_id
          if (
               resident.unit is not None
               and target_unit_id == resident.unit_id
               and resident.unit.property_id != resident_data.property_id
          ):
               raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Unit does not belong to the specified property"
               )
          resident.property_id = resident_data.property_id

     if "unit_id" in provided and resident_data.unit_id != resident.unit_id:
          previous_unit_id = resident.unit_id
          if resident_data.unit_id is None:
               resident.unit_id = None
          else:
               unit = _resolve_unit(db, admin, resident_data.unit_id, resident_data.property_id)
               _ensure_unit_free(db, unit, resident_id=resident.id)
               resident.unit_id = unit.id
               resident.property_id = unit.property_id
               unit.status = UnitStatus.OCCUPIED.value
          _release_unit(db, previous_unit_id, resident.id)

     if resident_data.name is not None:
          resident.name = resident_data.name
     if resident_data.role is not None:
          resident.role = resident_data.role.value
     if "email" in provided:
          resident.email = resident_data.email
     if "phone" in provided:
          resident.phone = resident_data.phone

     db.commit()
     db.refresh(resident)
     return _build_resident_response(resident)


@router.delete("/{resident_id}", response_model=MessageResponse, summary="Delete resident")
def delete_resident(
     resident_id: int,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     resident = get_owned_resident(db, admin, resident_id)

     has_contracts = db.query(Contract).filter(Contract.tenant_id == resident.id).first()
     if has_contracts:
          raise HTTPException(
               status_code=status.HTTP_409_CONFLICT,
               detail="Resident has contracts; delete them first"
          )

     _release_unit(db, resident.unit_id, resident.id)
     db.delete(resident)
     db.commit()

     logger.info("Deleted resident %s", resident_id)
     return MessageResponse(message="Resident deleted successfully")


def _build_resident_response(resident: Resident) -> ResidentResponse:
     response = ResidentResponse.model_validate(resident)
     response.unit_number = resident.unit.unit_number if resident.unit else None
     return response
