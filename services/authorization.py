"""
services/authorization.py

- (역할, 행동) → 허용/거부 매핑
- 거부 시 Forbidden 을 던져 어떤 쓰기도 일어나기 전에 작업을 중단
"""

import enum
import logging
from typing import Dict, FrozenSet

from models.users import Role
from schemas.session import SessionClaims
from services.errors import Forbidden

logger = logging.getLogger(__name__)


class Action(str, enum.Enum):
    CREATE_CLASS = "createClass"
    DELETE_CLASS = "deleteClass"
    ADD_STUDENT = "addStudentToClass"
    REMOVE_STUDENT = "removeStudentFromClass"
    ADD_GRADE = "addGradeToStudent"
    VIEW_DASHBOARD = "viewDashboard"
    VIEW_ADMIN_METRICS = "viewAdminMetrics"
    VIEW_CLASSES = "viewClasses"


ALL_ROLES: FrozenSet[Role] = frozenset(Role)
STAFF: FrozenSet[Role] = frozenset({Role.ADMIN, Role.TEACHER})

# ==========================================================
# 권한 표
# ==========================================================
PERMISSIONS: Dict[Action, FrozenSet[Role]] = {
    Action.CREATE_CLASS: frozenset({Role.ADMIN}),
    Action.DELETE_CLASS: frozenset({Role.ADMIN}),
    Action.ADD_STUDENT: STAFF,
    Action.REMOVE_STUDENT: STAFF,
    Action.ADD_GRADE: STAFF,
    Action.VIEW_DASHBOARD: ALL_ROLES,
    Action.VIEW_ADMIN_METRICS: frozenset({Role.ADMIN}),
    Action.VIEW_CLASSES: ALL_ROLES,
}


def is_allowed(role: Role, action: Action) -> bool:
    return role in PERMISSIONS.get(action, frozenset())


def authorize(claims: SessionClaims, action: Action) -> None:
    if not is_allowed(claims.role, action):
        logger.warning(f"권한 거부: user={claims.user_id} role={claims.role.value} action={action.value}")
        raise Forbidden(action.value, claims.role.value)
