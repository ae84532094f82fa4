# routers/health.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_session, check_connection

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", summary="Service and database status")
def health(db: Session = Depends(get_session)):
     connected = check_connection(db.get_bind())
     return {
          "status": "ok" if connected else "degraded",
          "database": "connected" if connected else "unavailable",
     }
