"""
services/classes_service.py

학급 생성/삭제와 학급 관련 조회 (목록, 명단, 교사/과목 목록)
"""

import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from database.db import store_errors, unit_of_work
from models.classes import Class as ClassModel
from models.enrollments import Enrollment as EnrollmentModel
from models.grades import Grade as GradeModel
from models.students import Student as StudentModel
from models.subjects import Subject as SubjectModel
from models.users import Role, User as UserModel
from schemas.classes import ClassListItem, ClassOut, ClassRoster
from schemas.session import SessionClaims
from schemas.students import EnrollmentOut, StudentOut
from schemas.subjects import SubjectOut
from schemas.teachers import TeacherOut
from services.authorization import Action, authorize
from services.errors import NotFound, ValidationError
from services.revalidation import (
    CLASSES_PATH, DASHBOARD_PATH, StalePaths, class_path, mark_stale,
)
from utils.forms import parse_positive_int, require_text

logger = logging.getLogger(__name__)


# ==========================================================
# [1단계] 변경 작업 (ADMIN 전용)
# ==========================================================

# ✅ [CREATE] 학급 추가
def create_class(
    db: Session,
    claims: SessionClaims,
    name,
    year,
    teacher_id,
    stale: Optional[StalePaths] = None,
) -> ClassOut:
    authorize(claims, Action.CREATE_CLASS)

    name = require_text(name, "name")
    year = parse_positive_int(year, "year")
    teacher_id = require_text(teacher_id, "teacherId")

    with unit_of_work(db):
        teacher = db.get(UserModel, teacher_id)
        if teacher is None or teacher.role != Role.TEACHER:
            raise ValidationError("teacherId", "must reference a user with role TEACHER")

        db_class = ClassModel(name=name, year=year, teacher_id=teacher_id)
        db.add(db_class)
        db.flush()
        created = ClassOut.model_validate(db_class)

    logger.info(f"학급 생성: class={created.id} name={created.name!r} teacher={teacher_id} by={claims.user_id}")
    mark_stale(stale, CLASSES_PATH, DASHBOARD_PATH)
    return created


# ✅ [DELETE] 학급 삭제
# - 성적 → 등록 → 학급 순서로, 하나의 트랜잭션에서 삭제
def delete_class(
    db: Session,
    claims: SessionClaims,
    class_id,
    stale: Optional[StalePaths] = None,
) -> None:
    authorize(claims, Action.DELETE_CLASS)

    class_id = require_text(class_id, "classId")

    with unit_of_work(db):
        db_class = db.get(ClassModel, class_id)
        if db_class is None:
            raise NotFound("Class", class_id)

        grades = (
            db.query(GradeModel)
            .filter(GradeModel.class_id == class_id)
            .delete(synchronize_session=False)
        )
        enrollments = (
            db.query(EnrollmentModel)
            .filter(EnrollmentModel.class_id == class_id)
            .delete(synchronize_session=False)
        )
        db.delete(db_class)

    logger.info(
        f"학급 삭제: class={class_id} grades={grades} enrollments={enrollments} by={claims.user_id}"
    )
    mark_stale(stale, CLASSES_PATH, class_path(class_id), DASHBOARD_PATH)


# ==========================================================
# [2단계] 조회
# ==========================================================

def _class_rows(db: Session, teacher_id: Optional[str] = None) -> List[ClassListItem]:
    student_count = func.count(EnrollmentModel.id).label("student_count")
    query = (
        db.query(ClassModel, UserModel.name, student_count)
        .outerjoin(UserModel, UserModel.id == ClassModel.teacher_id)
        .outerjoin(EnrollmentModel, EnrollmentModel.class_id == ClassModel.id)
    )
    if teacher_id is not None:
        query = query.filter(ClassModel.teacher_id == teacher_id)
    with store_errors():
        rows = (
            query.group_by(ClassModel.id, UserModel.name)
            .order_by(ClassModel.name.asc())
            .all()
        )
    return [
        ClassListItem(
            id=cls.id,
            name=cls.name,
            year=cls.year,
            teacher_id=cls.teacher_id,
            teacher_name=teacher_name,
            student_count=count,
        )
        for cls, teacher_name, count in rows
    ]


# ✅ [READ] 학급 목록
# - ADMIN/PARENT: 전체, TEACHER: 본인 담당 학급만
def list_classes(db: Session, claims: SessionClaims) -> List[ClassListItem]:
    authorize(claims, Action.VIEW_CLASSES)
    if claims.role == Role.TEACHER:
        return _class_rows(db, teacher_id=claims.user_id)
    return _class_rows(db)


# ✅ [READ] 교사 목록 (학급 생성/변경 폼 선택지)
def list_teachers(db: Session, claims: SessionClaims) -> List[TeacherOut]:
    authorize(claims, Action.VIEW_CLASSES)
    with store_errors():
        teachers = (
            db.query(UserModel)
            .filter(UserModel.role == Role.TEACHER)
            .order_by(UserModel.name.asc())
            .all()
        )
    return [TeacherOut.model_validate(t) for t in teachers]


# ✅ [READ] 과목 목록 (성적 입력 폼 선택지)
def list_subjects(db: Session, claims: SessionClaims) -> List[SubjectOut]:
    authorize(claims, Action.VIEW_CLASSES)
    with store_errors():
        subjects = db.query(SubjectModel).order_by(SubjectModel.name.asc()).all()
    return [SubjectOut.model_validate(s) for s in subjects]


# ✅ [READ] 학급 명단
# - 학급 + 담임 교사 + 등록(학생 이름 오름차순) + 과목 목록
def get_class_roster(db: Session, claims: SessionClaims, class_id) -> ClassRoster:
    authorize(claims, Action.VIEW_CLASSES)
    class_id = require_text(class_id, "classId")

    with store_errors():
        db_class = (
            db.query(ClassModel)
            .options(joinedload(ClassModel.teacher))
            .filter(ClassModel.id == class_id)
            .first()
        )
        if db_class is None:
            raise NotFound("Class", class_id)

        enrollments = (
            db.query(EnrollmentModel)
            .join(StudentModel, StudentModel.id == EnrollmentModel.student_id)
            .options(joinedload(EnrollmentModel.student))
            .filter(EnrollmentModel.class_id == class_id)
            .order_by(StudentModel.name.asc())
            .all()
        )
    students = [
        EnrollmentOut(
            enrollment_id=e.id,
            class_id=e.class_id,
            student=StudentOut.model_validate(e.student),
        )
        for e in enrollments
    ]

    return ClassRoster(
        id=db_class.id,
        name=db_class.name,
        year=db_class.year,
        teacher=TeacherOut.model_validate(db_class.teacher) if db_class.teacher else None,
        students=students,
        total_students=len(students),
        subjects=list_subjects(db, claims),
    )
