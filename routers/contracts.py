# routers/contracts.py
"""
Contract (lease) API routes and the derived rent schedule.

POST /api/contracts/{id}/recalculate rebuilds the contract's Rent rows
from the published index values; GET /api/rents reads them back.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import (
     get_current_admin,
     get_owned_contract,
     get_owned_property,
     get_owned_resident,
     get_owned_unit,
)
from models import Admin, Contract, Unit
from services.rent_service import recalculate_contract_rents, list_contract_rents
from schemas.common import MessageResponse, Pagination
from schemas.contract import (
     ContractCreate,
     ContractUpdate,
     ContractResponse,
     ContractListResponse,
     ContractStatusEnum,
     RentResponse,
     RentListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/contracts", tags=["contracts"])
rents_router = APIRouter(prefix="/api/rents", tags=["rents"])


def _check_tenant(db: Session, admin: Admin, tenant_id: int, unit: Unit):
     """The tenant must be the caller's resident and live in the unit's property."""
     tenant = get_owned_resident(db, admin, tenant_id)
     if tenant.property_id != unit.property_id:
          raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tenant not found")
     return tenant


@router.get(
     "",
     response_model=ContractListResponse,
     summary="List contracts of a property"
)
def list_contracts(
     property_id: int = Query(..., description="Property ID"),
     status: Optional[ContractStatusEnum] = Query(None, description="Filter by status"),
     page: int = Query(1, ge=1, description="Page number"),
     limit: int = Query(50, ge=1, le=100, description="Items per page"),
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     get_owned_property(db, admin, property_id)

     query = (
          db.query(Contract)
          .join(Unit, Contract.unit_id == Unit.id)
          .filter(Unit.property_id == property_id)
     )
     if status:
          query = query.filter(Contract.status == status.value)

     total = query.count()
     offset = (page - 1) * limit
     contracts = query.order_by(Contract.start_date.desc()).offset(offset).limit(limit).all()

     return ContractListResponse(
          contracts=[_build_contract_response(c) for c in contracts],
          pagination=Pagination.build(page, limit, total)
     )


@router.post(
     "",
     response_model=ContractResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new contract"
)
def create_contract(
     contract_data: ContractCreate,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     """
     Create a lease between a tenant resident and a unit.

     Rents are not generated here; call the recalculate endpoint once the
     contract exists.
     """
     unit = get_owned_unit(db, admin, contract_data.unit_id)
     _check_tenant(db, admin, contract_data.tenant_id, unit)

     contract = Contract(
          unit_id=unit.id,
          tenant_id=contract_data.tenant_id,
          start_date=contract_data.start_date,
          end_date=contract_data.end_date,
          initial_rent_amount=contract_data.initial_rent_amount,
          currency=contract_data.currency,
          rent_increase_frequency=contract_data.rent_increase_frequency.value,
          rent_increase_index=contract_data.rent_increase_index.value,
          status=contract_data.status.value,
     )
     db.add(contract)
     db.commit()
     db.refresh(contract)

     logger.info("Created contract %s for unit %s", contract.id, unit.id)
     return _build_contract_response(contract)


@router.get("/{contract_id}", response_model=ContractResponse, summary="Get contract by ID")
def get_contract(
     contract_id: int,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     return _build_contract_response(get_owned_contract(db, admin, contract_id))


@router.put("/{contract_id}", response_model=ContractResponse, summary="Update contract")
def update_contract(
     contract_id: int,
     contract_data: ContractUpdate,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     contract = get_owned_contract(db, admin, contract_id)

     if contract_data.tenant_id is not None:
          _check_tenant(db, admin, contract_data.tenant_id, contract.unit)
          contract.tenant_id = contract_data.tenant_id

     start_date = contract_data.start_date or contract.start_date
     end_date = contract_data.end_date or contract.end_date
     if end_date < start_date:
          raise HTTPException(
               status_code=status.HTTP_400_BAD_REQUEST,
               detail="end_date must be on or after start_date"
          )
     contract.start_date = start_date
     contract.end_date = end_date

     if contract_data.initial_rent_amount is not None:
          contract.initial_rent_amount = contract_data.initial_rent_amount
     if contract_data.currency is not None:
          contract.currency = contract_data.currency
     if contract_data.rent_increase_frequency is not None:
          contract.rent_increase_frequency = contract_data.rent_increase_frequency.value
     if contract_data.rent_increase_index is not None:
          contract.rent_increase_index = contract_data.rent_increase_index.value
     if contract_data.status is not None:
          contract.status = contract_data.status.value

     db.commit()
     db.refresh(contract)
     return _build_contract_response(contract)


@router.delete("/{contract_id}", response_model=MessageResponse, summary="Delete contract")
def delete_contract(
     contract_id: int,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     contract = get_owned_contract(db, admin, contract_id)
     db.delete(contract)
     db.commit()

     logger.info("Deleted contract %s", contract_id)
     return MessageResponse(message="Contract deleted successfully")


@router.post(
     "/{contract_id}/recalculate",
     response_model=RentListResponse,
     summary="Recalculate the contract's rent schedule"
)
def recalculate_rents(
     contract_id: int,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     """
     Rebuild the contract's rents from its start month up to the earlier of
     its end month and the current month. Paid amounts are preserved.
     """
     contract = get_owned_contract(db, admin, contract_id)
     rents = recalculate_contract_rents(db, contract)
     if not rents:
          return RentListResponse(rents=[], message="No periods to calculate")

     db.commit()
     return RentListResponse(rents=[RentResponse.model_validate(r) for r in rents])


@rents_router.get(
     "",
     response_model=RentListResponse,
     summary="List the rents of a contract"
)
def list_rents(
     contract_id: int = Query(..., description="Contract ID"),
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     contract = get_owned_contract(db, admin, contract_id)
     rents = list_contract_rents(db, contract.id)
     return RentListResponse(rents=[RentResponse.model_validate(r) for r in rents])


def _build_contract_response(contract: Contract) -> ContractResponse:
     response = ContractResponse.model_validate(contract)
     response.unit_number = contract.unit.unit_number if contract.unit else None
     response.tenant_name = contract.tenant.name if contract.tenant else None
     return response
