# routers/admins.py
"""
Admin record of the authenticated identity.

The identity provider owns sign-in; this router only reads or provisions
the matching admin row keyed by the token's ``sub`` claim.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import verify_token, get_current_admin
from models import Admin
from schemas.admin import AdminCreate, AdminResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admins", tags=["admins"])


@router.get(
     "/me",
     response_model=AdminResponse,
     summary="Get the caller's admin record"
)
def get_me(admin: Admin = Depends(get_current_admin)):
     return admin


@router.post(
     "/me",
     response_model=AdminResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Provision the caller's admin record"
)
def provision_me(
     response: Response,
     admin_data: Optional[AdminCreate] = None,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     """
     Create the admin row for the token subject.

     Idempotent: when the record already exists it is returned with 200.
     """
     admin = db.query(Admin).filter(Admin.user_id == token["sub"]).first()
     if admin:
          response.status_code = status.HTTP_200_OK
          return admin

     admin_data = admin_data or AdminCreate()
     email = admin_data.email or token.get("email")
     if not email:
          raise HTTPException(
               status_code=status.HTTP_400_BAD_REQUEST,
               detail="Missing required fields: email"
          )

     admin = Admin(
          user_id=token["sub"],
          email=email,
          full_name=admin_data.full_name or (token.get("user_metadata") or {}).get("full_name"),
          is_active=True,
     )
     db.add(admin)
     db.commit()
     db.refresh(admin)

     logger.info("Provisioned admin %s for subject %s", admin.id, admin.user_id)
     return admin
