import logging

from fastapi import APIRouter, Depends, Form, Request
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import get_session_claims, store_session_claims
from models.users import User as UserModel
from schemas.session import SessionClaims
from services.errors import ValidationError
from utils.display import get_initials, role_label
from utils.forms import clean, require_text
from utils.security import verify_password

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["인증"])


# ✅ 로그인 화면 (렌더링은 프론트 담당 → 필요한 필드만 안내)
@router.get("/login")
def login_surface():
    return {
        "success": True,
        "data": {"fields": ["email", "password"], "action": "/auth/login"},
    }


# ✅ [LOGIN] 로그인 → 세션에 사용자 정보 저장
@router.post("/login")
def login(
    request: Request,
    email: str = Form(""),
    password: str = Form(""),
    db: Session = Depends(get_db),
):
    email = require_text(email, "email")
    require_text(password, "password")

    user = db.query(UserModel).filter(UserModel.email == email).first()
    if user is None or not verify_password(password, user.password):
        logger.warning(f"로그인 실패: email={email}")
        raise ValidationError("email", "invalid email or password")

    claims = SessionClaims(user_id=user.id, name=user.name, email=user.email, role=user.role)
    store_session_claims(request, claims)
    logger.info(f"로그인: user={user.id} role={user.role.value}")
    return {"success": True, "data": claims.model_dump(mode="json")}


# ✅ [LOGOUT] 세션 삭제
@router.post("/logout")
def logout(request: Request):
    user = request.session.get("user") or {}
    request.session.clear()
    logger.info(f"로그아웃: user={clean(user.get('user_id'))}")
    return {"success": True, "data": None}


# ✅ [READ] 현재 사용자
@router.get("/me")
def me(claims: SessionClaims = Depends(get_session_claims)):
    return {
        "success": True,
        "data": {
            **claims.model_dump(mode="json"),
            "initials": get_initials(claims.name, claims.email),
            "role_label": role_label(claims.role),
        },
    }
