import logging

from fastapi import Request
from pydantic import ValidationError as PydanticValidationError

from schemas.session import SessionClaims
from services.errors import Unauthenticated
from services.revalidation import StalePaths

logger = logging.getLogger(__name__)

SESSION_USER_KEY = "user"


def get_session_claims(request: Request) -> SessionClaims:
    """
    세션 쿠키의 사용자 정보를 SessionClaims 로 한 번만 검증
    - 없거나 형식이 틀리면 Unauthenticated → 로그인 화면으로 리다이렉트
    """
    raw = request.session.get(SESSION_USER_KEY)
    if not raw:
        raise Unauthenticated()
    try:
        return SessionClaims.model_validate(raw)
    except PydanticValidationError:
        logger.warning("세션 정보 형식 오류 → 세션 초기화")
        request.session.clear()
        raise Unauthenticated("Invalid session")


def store_session_claims(request: Request, claims: SessionClaims) -> None:
    request.session[SESSION_USER_KEY] = claims.model_dump(mode="json")


def get_stale_paths() -> StalePaths:
    # 요청마다 새 수집기
    return StalePaths()
