from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import get_session_claims
from schemas.session import SessionClaims
from services.dashboard_service import get_dashboard

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


# ✅ [READ] 역할별 대시보드
@router.get("")
def read_dashboard(
    db: Session = Depends(get_db),
    claims: SessionClaims = Depends(get_session_claims),
):
    view = get_dashboard(db, claims)
    return {"success": True, "data": view.model_dump(mode="json")}
