"""
services/enrollment_service.py

학급에 학생 추가 / 학급에서 학생 제거
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from database.db import unit_of_work
from models.classes import Class as ClassModel
from models.enrollments import Enrollment as EnrollmentModel
from models.grades import Grade as GradeModel
from models.students import Student as StudentModel
from schemas.session import SessionClaims
from schemas.students import EnrollmentOut, StudentOut
from services.authorization import Action, authorize
from services.errors import NotFound
from services.revalidation import (
    CLASSES_PATH, DASHBOARD_PATH, StalePaths, class_path, mark_stale,
)
from utils.forms import require_text

logger = logging.getLogger(__name__)


# ✅ [CREATE] 학급에 학생 추가
# - 이름으로 기존 학생을 찾지 않고 항상 새 학생을 만든 뒤 등록
def add_student_to_class(
    db: Session,
    claims: SessionClaims,
    class_id,
    student_name,
    stale: Optional[StalePaths] = None,
) -> EnrollmentOut:
    authorize(claims, Action.ADD_STUDENT)

    class_id = require_text(class_id, "classId")
    student_name = require_text(student_name, "studentName")

    with unit_of_work(db):
        if db.get(ClassModel, class_id) is None:
            raise NotFound("Class", class_id)

        student = StudentModel(name=student_name)
        db.add(student)
        db.flush()

        enrollment = EnrollmentModel(student_id=student.id, class_id=class_id)
        db.add(enrollment)
        db.flush()

        created = EnrollmentOut(
            enrollment_id=enrollment.id,
            class_id=class_id,
            student=StudentOut.model_validate(student),
        )

    logger.info(
        f"학생 등록: class={class_id} student={created.student.id} "
        f"enrollment={created.enrollment_id} by={claims.user_id}"
    )
    mark_stale(stale, class_path(class_id), CLASSES_PATH, DASHBOARD_PATH)
    return created


# ✅ [DELETE] 학급에서 학생 제거
# - 등록이 없으면 조용히 아무 일도 하지 않음 (False 반환)
# - 해당 학급의 그 학생 성적 → 등록 순서로 삭제, 학생 행 자체는 유지
def remove_student_from_class(
    db: Session,
    claims: SessionClaims,
    class_id,
    enrollment_id,
    stale: Optional[StalePaths] = None,
) -> bool:
    authorize(claims, Action.REMOVE_STUDENT)

    class_id = require_text(class_id, "classId")
    enrollment_id = require_text(enrollment_id, "enrollmentId")

    with unit_of_work(db):
        enrollment = db.get(EnrollmentModel, enrollment_id)
        if enrollment is None or enrollment.class_id != class_id:
            logger.info(f"제거할 등록 없음: class={class_id} enrollment={enrollment_id}")
            return False

        student_id = enrollment.student_id
        grades = (
            db.query(GradeModel)
            .filter(GradeModel.class_id == class_id, GradeModel.student_id == student_id)
            .delete(synchronize_session=False)
        )
        db.delete(enrollment)

    logger.info(
        f"학생 제거: class={class_id} student={student_id} enrollment={enrollment_id} "
        f"grades={grades} by={claims.user_id}"
    )
    mark_stale(stale, class_path(class_id), CLASSES_PATH, DASHBOARD_PATH)
    return True
