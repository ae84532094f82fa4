# routers/index_values.py
"""
ICL and IPC value routes.

Both indices share the index_values table; one router is built per index
type with identical handlers.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_admin
from models import Admin, IndexValue
from models.index_value import IndexType
from schemas.common import MessageResponse
from schemas.index_value import (
     IndexValueCreate,
     IndexValueUpdate,
     IndexValueResponse,
     IndexValueListResponse,
)

logger = logging.getLogger(__name__)


def build_index_router(index_type: IndexType, prefix: str) -> APIRouter:
     """Create the CRUD router for one published index."""
     router = APIRouter(prefix=prefix, tags=[f"{index_type.value.lower()}-values"])
     label = index_type.value

     def _get_value(db: Session, value_id: int) -> IndexValue:
          value = (
               db.query(IndexValue)
               .filter(IndexValue.id == value_id, IndexValue.index_type == label)
               .first()
          )
          if not value:
               raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{label} value not found")
          return value

     def _ensure_period_free(db: Session, year: int, month: int, value_id: Optional[int] = None) -> None:
          query = db.query(IndexValue).filter(
               IndexValue.index_type == label,
               IndexValue.period_year == year,
               IndexValue.period_month == month,
          )
          if value_id is not None:
               query = query.filter(IndexValue.id != value_id)
          if query.first():
               raise HTTPException(
                    status_code=status.HTTP_409_CONFLICT,
                    detail=f"{label} value already exists for {year}-{month:02d}"
               )

     @router.get("", response_model=IndexValueListResponse, summary=f"List {label} values")
     def list_values(
          year: Optional[int] = Query(None, description="Filter by year"),
          db: Session = Depends(get_session),
          admin: Admin = Depends(get_current_admin)
     ):
          query = db.query(IndexValue).filter(IndexValue.index_type == label)
          if year:
               query = query.filter(IndexValue.period_year == year)
          values = query.order_by(IndexValue.period_year.desc(), IndexValue.period_month.desc()).all()
          return IndexValueListResponse(values=[IndexValueResponse.model_validate(v) for v in values])

     @router.post(
          "",
          response_model=IndexValueResponse,
          status_code=status.HTTP_201_CREATED,
          summary=f"Publish a {label} value"
     )
     def create_value(
          value_data: IndexValueCreate,
          db: Session = Depends(get_session),
          admin: Admin = Depends(get_current_admin)
     ):
          _ensure_period_free(db, value_data.period_year, value_data.period_month)

          value = IndexValue(index_type=label, **value_data.model_dump())
          db.add(value)
          db.commit()
          db.refresh(value)

          logger.info("Admin %s published %s %s-%02d = %s", admin.id, label, value.period_year, value.period_month, value.value)
          return IndexValueResponse.model_validate(value)

     @router.put("/{value_id}", response_model=IndexValueResponse, summary=f"Update a {label} value")
     def update_value(
          value_id: int,
          value_data: IndexValueUpdate,
          db: Session = Depends(get_session),
          admin: Admin = Depends(get_current_admin)
     ):
          value = _get_value(db, value_id)
          year = value_data.period_year or value.period_year
          month = value_data.period_month or value.period_month
          if (year, month) != (value.period_year, value.period_month):
               _ensure_period_free(db, year, month, value_id=value.id)

          value.period_year = year
          value.period_month = month
          if value_data.value is not None:
               value.value = value_data.value

          db.commit()
          db.refresh(value)
          return IndexValueResponse.model_validate(value)

     @router.delete("/{value_id}", response_model=MessageResponse, summary=f"Delete a {label} value")
     def delete_value(
          value_id: int,
          db: Session = Depends(get_session),
          admin: Admin = Depends(get_current_admin)
     ):
          value = _get_value(db, value_id)
          db.delete(value)
          db.commit()
          return MessageResponse(message=f"{label} value deleted successfully")

     return router


icl_router = build_index_router(IndexType.ICL, "/api/icl-values")
ipc_router = build_index_router(IndexType.IPC, "/api/ipc-values")
