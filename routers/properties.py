# routers/properties.py
"""
Property API routes.

Properties are the ownership root: every unit, expense and contract is
reachable only through a property whose admin_id is the caller's.
"""
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_admin, get_owned_property
from models import Admin, Property, Resident, PersonalTransaction
from schemas.common import MessageResponse
from schemas.property import (
     PropertyCreate,
     PropertyUpdate,
     PropertyResponse,
     PropertyListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/properties", tags=["properties"])


@router.get(
     "",
     response_model=PropertyListResponse,
     summary="List the caller's properties"
)
def list_properties(
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     properties = (
          db.query(Property)
          .filter(Property.admin_id == admin.id)
          .order_by(Property.name)
          .all()
     )
     return PropertyListResponse(properties=[_build_property_response(p) for p in properties])


@router.post(
     "",
     response_model=PropertyResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new property"
)
def create_property(
     property_data: PropertyCreate,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     prop = Property(admin_id=admin.id, **property_data.model_dump())
     db.add(prop)
     db.commit()
     db.refresh(prop)

     logger.info("Admin %s created property %s", admin.id, prop.id)
     return _build_property_response(prop)


@router.get(
     "/{property_id}",
     response_model=PropertyResponse,
     summary="Get property by ID"
)
def get_property(
     property_id: int,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     return _build_property_response(get_owned_property(db, admin, property_id))


@router.put(
     "/{property_id}",
     response_model=PropertyResponse,
     summary="Update property"
)
def update_property(
     property_id: int,
     property_data: PropertyUpdate,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     prop = get_owned_property(db, admin, property_id)

     for field, value in property_data.model_dump(exclude_unset=True).items():
          if value is not None or field == "description":
               setattr(prop, field, value)

     db.commit()
     db.refresh(prop)
     return _build_property_response(prop)


@router.delete(
     "/{property_id}",
     response_model=MessageResponse,
     summary="Delete property"
)
def delete_property(
     property_id: int,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     """
     Delete a property with its units, contracts, expenses and summaries.

     Residents and personal transactions survive, detached from the property.
     """
     prop = get_owned_property(db, admin, property_id)

     db.query(Resident).filter(Resident.property_id == prop.id).update(
          {Resident.property_id: None}, synchronize_session="fetch"
     )
     db.query(PersonalTransaction).filter(PersonalTransaction.property_id == prop.id).update(
          {PersonalTransaction.property_id: None}, synchronize_session="fetch"
     )
     db.delete(prop)
     db.commit()

     logger.info("Admin %s deleted property %s", admin.id, property_id)
     return MessageResponse(message="Property deleted successfully")


def _build_property_response(prop: Property) -> PropertyResponse:
     """Build property response with its unit count."""
     response = PropertyResponse.model_validate(prop)
     response.units_count = len(prop.units)
     return response
