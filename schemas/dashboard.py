from typing import List, Optional
from pydantic import BaseModel

from models.users import Role
from schemas.classes import ClassListItem


class AdminMetrics(BaseModel):
    total_students: int      # 전체 학생 수
    total_classes: int       # 전체 학급 수
    risk_students: int       # 기준점 미만 성적 "행" 수 (학생 수가 아님)


# ✅ 화면 상단 사용자 카드
class UserCard(BaseModel):
    user_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    initials: str
    role: Role
    role_label: str


class DashboardView(BaseModel):
    user: UserCard
    admin_metrics: Optional[AdminMetrics] = None     # ADMIN 전용
    classes: Optional[List[ClassListItem]] = None    # TEACHER: 담당 학급
