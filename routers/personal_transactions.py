# routers/personal_transactions.py
"""
Personal transaction API routes - the admin's own payment ledger.

Entries in the "Edificio" category belong to one of the caller's
properties; other categories never carry a property.
"""
import logging
from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import extract
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_admin, get_owned_property, get_owned_transaction
from models import Admin, PersonalTransaction
from models.personal_transaction import BUILDING_CATEGORY
from schemas.common import MessageResponse
from schemas.personal_transaction import (
     PersonalTransactionCreate,
     PersonalTransactionUpdate,
     PersonalTransactionResponse,
     PersonalTransactionListResponse,
     PersonalTransactionCategoryEnum,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/personal-transactions", tags=["personal-transactions"])


def _resolve_property_id(db: Session, admin: Admin, category: str, property_id: Optional[int]) -> Optional[int]:
     if category != BUILDING_CATEGORY:
          return None
     if not property_id:
          raise HTTPException(
               status_code=status.HTTP_400_BAD_REQUEST,
               detail=f"Property is required for {BUILDING_CATEGORY} category"
          )
     return get_owned_property(db, admin, property_id).id


@router.get(
     "",
     response_model=PersonalTransactionListResponse,
     summary="List personal transactions with their total"
)
def list_transactions(
     month: Optional[int] = Query(None, ge=1, le=12, description="Filter by month"),
     year: Optional[int] = Query(None, description="Filter by year"),
     category: Optional[PersonalTransactionCategoryEnum] = Query(None, description="Filter by category"),
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     query = db.query(PersonalTransaction).filter(PersonalTransaction.admin_id == admin.id)
     if year:
          query = query.filter(extract("year", PersonalTransaction.transaction_date) == year)
     if month:
          query = query.filter(extract("month", PersonalTransaction.transaction_date) == month)
     if category:
          query = query.filter(PersonalTransaction.category == category.value)

     transactions = query.order_by(
          PersonalTransaction.transaction_date.desc(),
          PersonalTransaction.id.desc()
     ).all()
     total = sum((Decimal(str(t.amount)) for t in transactions), Decimal("0"))

     return PersonalTransactionListResponse(
          transactions=[_build_transaction_response(t) for t in transactions],
          total=total
     )


@router.post(
     "",
     response_model=PersonalTransactionResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Record a personal transaction"
)
def create_transaction(
     transaction_data: PersonalTransactionCreate,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     category = transaction_data.category.value
     transaction = PersonalTransaction(
          admin_id=admin.id,
          property_id=_resolve_property_id(db, admin, category, transaction_data.property_id),
          transaction_date=transaction_data.transaction_date,
          amount=transaction_data.amount,
          category=category,
          description=transaction_data.description,
     )
     db.add(transaction)
     db.commit()
     db.refresh(transaction)
     return _build_transaction_response(transaction)


@router.get("/{transaction_id}", response_model=PersonalTransactionResponse, summary="Get personal transaction")
def get_transaction(
     transaction_id: int,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     return _build_transaction_response(get_owned_transaction(db, admin, transaction_id))


@router.put("/{transaction_id}", response_model=PersonalTransactionResponse, summary="Update personal transaction")
def update_transaction(
     transaction_id: int,
     transaction_data: PersonalTransactionUpdate,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     transaction = get_owned_transaction(db, admin, transaction_id)

     category = transaction_data.category.value if transaction_data.category else transaction.category
     property_id = (
          transaction_data.property_id
          if "property_id" in transaction_data.model_fields_set
          else transaction.property_id
     )
     transaction.property_id = _resolve_property_id(db, admin, category, property_id)
     transaction.category = category

     if transaction_data.transaction_date is not None:
          transaction.transaction_date = transaction_data.transaction_date
     if transaction_data.amount is not None:
          transaction.amount = transaction_data.amount
     if "description" in transaction_data.model_fields_set:
          transaction.description = transaction_data.description

     db.commit()
     db.refresh(transaction)
     return _build_transaction_response(transaction)


@router.delete("/{transaction_id}", response_model=MessageResponse, summary="Delete personal transaction")
def delete_transaction(
     transaction_id: int,
     db: Session = Depends(get_session),
     admin: Admin = Depends(get_current_admin)
):
     transaction = get_owned_transaction(db, admin, transaction_id)
     db.delete(transaction)
     db.commit()
     return MessageResponse(message="Transaction deleted successfully")


def _build_transaction_response(transaction: PersonalTransaction) -> PersonalTransactionResponse:
     response = PersonalTransactionResponse.model_validate(transaction)
     response.property_name = transaction.property.name if transaction.property else None
     return response
