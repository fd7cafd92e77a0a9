"""
services/grades_service.py

성적 입력과 학급별 성적 조회.
같은 (학생, 학급, 과목, 학기) 성적은 덮어쓰지 않고 계속 쌓인다.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from config.settings import settings
from database.db import store_errors, unit_of_work
from models.classes import Class as ClassModel
from models.enrollments import Enrollment as EnrollmentModel
from models.grades import Grade as GradeModel
from models.students import Student as StudentModel
from models.subjects import Subject as SubjectModel
from schemas.grades import ClassGradeRow, GradeOut
from schemas.session import SessionClaims
from services.authorization import Action, authorize
from services.errors import NotFound, ValidationError
from services.revalidation import DASHBOARD_PATH, StalePaths, class_path, mark_stale
from utils.forms import check_range, parse_decimal, parse_optional_int, require_text

logger = logging.getLogger(__name__)

GRADE_MIN, GRADE_MAX = 0.0, 10.0
TERM_MIN, TERM_MAX = 1, 4
DEFAULT_TERM = 1


# ✅ [CREATE] 학생 성적 입력
def add_grade_to_student(
    db: Session,
    claims: SessionClaims,
    class_id,
    student_id,
    subject_id,
    value,
    term=None,
    stale: Optional[StalePaths] = None,
) -> GradeOut:
    authorize(claims, Action.ADD_GRADE)

    class_id = require_text(class_id, "classId")
    student_id = require_text(student_id, "studentId")
    subject_id = require_text(subject_id, "subjectId")
    value = parse_decimal(value, "value")
    term = parse_optional_int(term, "term", DEFAULT_TERM)

    # 범위 밖 값은 기본적으로 저장하되 경고만 남김
    for warning in (
        check_range(value, "value", GRADE_MIN, GRADE_MAX, strict=False),
        check_range(term, "term", TERM_MIN, TERM_MAX, strict=settings.GRADE_TERM_STRICT),
    ):
        if warning:
            logger.warning(f"성적 입력 범위 경고: {warning} class={class_id} student={student_id}")

    with unit_of_work(db):
        if db.get(ClassModel, class_id) is None:
            raise NotFound("Class", class_id)
        if db.get(StudentModel, student_id) is None:
            raise NotFound("Student", student_id)
        if db.get(SubjectModel, subject_id) is None:
            raise NotFound("Subject", subject_id)

        enrolled = (
            db.query(EnrollmentModel.id)
            .filter(EnrollmentModel.class_id == class_id, EnrollmentModel.student_id == student_id)
            .first()
        )
        if enrolled is None:
            raise ValidationError("studentId", "student is not enrolled in this class")

        grade = GradeModel(
            class_id=class_id,
            student_id=student_id,
            subject_id=subject_id,
            value=value,
            term=term,
        )
        db.add(grade)
        db.flush()
        created = GradeOut.model_validate(grade)

    logger.info(
        f"성적 입력: grade={created.id} class={class_id} student={student_id} "
        f"subject={subject_id} term={term} by={claims.user_id}"
    )
    mark_stale(stale, class_path(class_id), DASHBOARD_PATH)
    return created


# ✅ [READ] 학급 성적 목록
# - 학생 이름 → 과목 이름 → 학기 → 입력 순
def list_class_grades(db: Session, claims: SessionClaims, class_id) -> List[ClassGradeRow]:
    authorize(claims, Action.VIEW_CLASSES)
    class_id = require_text(class_id, "classId")

    with store_errors():
        if db.get(ClassModel, class_id) is None:
            raise NotFound("Class", class_id)

        rows = (
            db.query(GradeModel, StudentModel.name, SubjectModel.name)
            .join(StudentModel, StudentModel.id == GradeModel.student_id)
            .join(SubjectModel, SubjectModel.id == GradeModel.subject_id)
            .filter(GradeModel.class_id == class_id)
            .order_by(
                StudentModel.name.asc(),
                SubjectModel.name.asc(),
                GradeModel.term.asc(),
                GradeModel.created_at.asc(),
            )
            .all()
        )
    return [
        ClassGradeRow(
            **GradeOut.model_validate(grade).model_dump(),
            student_name=student_name,
            subject_name=subject_name,
        )
        for grade, student_name, subject_name in rows
    ]
