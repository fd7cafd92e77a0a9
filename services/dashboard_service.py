"""
services/dashboard_service.py

역할별 대시보드 데이터
- ADMIN: 학생 수, 학급 수, 위험 성적 수
- TEACHER: 담당 학급 목록
- PARENT: 사용자 카드만
"""

from sqlalchemy.orm import Session

from config.settings import settings
from database.db import store_errors
from models.classes import Class as ClassModel
from models.grades import Grade as GradeModel
from models.students import Student as StudentModel
from models.users import Role
from schemas.dashboard import AdminMetrics, DashboardView, UserCard
from schemas.session import SessionClaims
from services.authorization import Action, authorize
from services.classes_service import list_classes
from utils.display import get_initials, role_label


# ✅ [SUMMARY] 관리자 지표
# - risk_students 는 기준점 미만 성적 "행" 수 (한 학생이 낮은 성적 3개면 3으로 집계)
def get_admin_metrics(db: Session, claims: SessionClaims) -> AdminMetrics:
    authorize(claims, Action.VIEW_ADMIN_METRICS)

    with store_errors():
        total_students = db.query(StudentModel).count()
        total_classes = db.query(ClassModel).count()
        risk_students = (
            db.query(GradeModel)
            .filter(GradeModel.value < settings.RISK_GRADE_THRESHOLD)
            .count()
        )
    return AdminMetrics(
        total_students=total_students,
        total_classes=total_classes,
        risk_students=risk_students,
    )


def get_dashboard(db: Session, claims: SessionClaims) -> DashboardView:
    authorize(claims, Action.VIEW_DASHBOARD)

    view = DashboardView(
        user=UserCard(
            user_id=claims.user_id,
            name=claims.name,
            email=claims.email,
            initials=get_initials(claims.name, claims.email),
            role=claims.role,
            role_label=role_label(claims.role),
        )
    )
    if claims.role == Role.ADMIN:
        view.admin_metrics = get_admin_metrics(db, claims)
    elif claims.role == Role.TEACHER:
        view.classes = list_classes(db, claims)
    return view
