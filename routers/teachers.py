from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import get_session_claims
from schemas.session import SessionClaims
from services.classes_service import list_teachers

router = APIRouter(prefix="/teachers", tags=["교사 정보"])


# ✅ [READ] 전체 교사 조회 (이름 오름차순)
@router.get("")
def read_teachers(
    db: Session = Depends(get_db),
    claims: SessionClaims = Depends(get_session_claims),
):
    teachers = list_teachers(db, claims)
    return {"success": True, "data": [t.model_dump(mode="json") for t in teachers]}
