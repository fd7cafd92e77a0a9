"""
schemas/session.py

- 외부 인증(세션)에서 넘어온 사용자 정보를 신뢰 경계에서 한 번만 검증하는 스키마
- 검증 후에는 변경 불가(frozen) 컨텍스트 값으로 모든 서비스 함수에 전달
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from models.users import Role


class SessionClaims(BaseModel):
    user_id: str = Field(..., min_length=1, description="사용자 고유 ID")
    name: Optional[str] = Field(default=None, description="표시 이름")
    email: Optional[str] = Field(default=None, description="이메일")
    role: Role = Field(..., description="ADMIN / TEACHER / PARENT")

    model_config = ConfigDict(frozen=True, extra="ignore")
