# dependencies.py
"""
Request-scoped FastAPI dependencies: bearer-token verification, the
caller's admin record, and ownership lookups.

Tokens are issued by the external identity provider and signed with a
shared HS256 secret. The ``sub`` claim is the identity's user id, which
maps 1:1 onto ``admins.user_id``.

Ownership misses always raise 404 so that the existence of another
admin's records is never revealed.
"""
import logging
import os
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from jose import JWTError, jwt
from sqlalchemy.orm import Session
from dotenv import load_dotenv

from database import get_session
from models import (
     Admin,
     Property,
     Unit,
     Resident,
     Contract,
     Expense,
     ExpenseCategory,
     PersonalTransaction,
)

load_dotenv()

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


def _decode_token(token: str) -> dict:
     secret = os.getenv("AUTH_JWT_SECRET")
     if not secret:
          logger.error("AUTH_JWT_SECRET is not set; rejecting token")
          raise JWTError("signing secret not configured")

     audience = os.getenv("AUTH_JWT_AUDIENCE", "authenticated")
     if audience:
          return jwt.decode(token, secret, algorithms=[ALGORITHM], audience=audience)
     return jwt.decode(token, secret, algorithms=[ALGORITHM], options={"verify_aud": False})


# Token Auth Dependency
def verify_token(request: Request) -> dict:
     auth = request.headers.get("Authorization")
     if not auth or not auth.startswith("Bearer "):
          raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
     token = auth.split(" ", 1)[1].strip()
     try:
          payload = _decode_token(token)
     except JWTError as e:
          logger.info("Rejected bearer token: %s", e)
          raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")

     if not payload.get("sub"):
          raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
     return payload


def get_current_admin(
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
) -> Admin:
     """Resolve the caller's admin record from the token subject."""
     admin = db.query(Admin).filter(Admin.user_id == token["sub"]).first()
     if not admin:
          raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Admin record not found")
     return admin


# ---------------------------------------------------------------------------
# Ownership lookups
# ---------------------------------------------------------------------------

def _not_found(what: str) -> HTTPException:
     return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{what} not found")


def get_owned_property(db: Session, admin: Admin, property_id: int) -> Property:
     prop = (
          db.query(Property)
          .filter(Property.id == property_id, Property.admin_id == admin.id)
          .first()
     )
     if not prop:
          raise _not_found("Property")
     return prop


def get_owned_unit(db: Session, admin: Admin, unit_id: int, property_id: Optional[int] = None) -> Unit:
     """Unit owned through its property; optionally pinned to ``property_id``."""
     query = (
          db.query(Unit)
          .join(Property, Unit.property_id == Property.id)
          .filter(Unit.id == unit_id, Property.admin_id == admin.id)
     )
     if property_id is not None:
          query = query.filter(Unit.property_id == property_id)
     unit = query.first()
     if not unit:
          raise _not_found("Unit")
     return unit


def get_owned_resident(db: Session, admin: Admin, resident_id: int) -> Resident:
     resident = (
          db.query(Resident)
          .filter(Resident.id == resident_id, Resident.admin_id == admin.id)
          .first()
     )
     if not resident:
          raise _not_found("Resident")
     return resident


def get_owned_contract(db: Session, admin: Admin, contract_id: int) -> Contract:
     contract = (
          db.query(Contract)
          .join(Unit, Contract.unit_id == Unit.id)
          .join(Property, Unit.property_id == Property.id)
          .filter(Contract.id == contract_id, Property.admin_id == admin.id)
          .first()
     )
     if not contract:
          raise _not_found("Contract")
     return contract


def get_owned_expense(db: Session, admin: Admin, expense_id: int) -> Expense:
     expense = (
          db.query(Expense)
          .join(Property, Expense.property_id == Property.id)
          .filter(Expense.id == expense_id, Property.admin_id == admin.id)
          .first()
     )
     if not expense:
          raise _not_found("Expense")
     return expense


def get_owned_category(db: Session, admin: Admin, category_id: int) -> ExpenseCategory:
     category = (
          db.query(ExpenseCategory)
          .filter(ExpenseCategory.id == category_id, ExpenseCategory.admin_id == admin.id)
          .first()
     )
     if not category:
          raise _not_found("Expense category")
     return category


def get_owned_transaction(db: Session, admin: Admin, transaction_id: int) -> PersonalTransaction:
     transaction = (
          db.query(PersonalTransaction)
          .filter(PersonalTransaction.id == transaction_id, PersonalTransaction.admin_id == admin.id)
          .first()
     )
     if not transaction:
          raise _not_found("Transaction")
     return transaction
