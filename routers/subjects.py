from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import get_session_claims
from schemas.session import SessionClaims
from services.classes_service import list_subjects

router = APIRouter(prefix="/subjects", tags=["과목 정보"])


# ✅ [READ] 전체 과목 조회 (이름 오름차순)
@router.get("")
def read_subjects(
    db: Session = Depends(get_db),
    claims: SessionClaims = Depends(get_session_claims),
):
    subjects = list_subjects(db, claims)
    return {"success": True, "data": [s.model_dump(mode="json") for s in subjects]}
