from fastapi import APIRouter, Depends, Form, Response
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import get_session_claims, get_stale_paths
from models.users import Role
from schemas.session import SessionClaims
from services import classes_service, enrollment_service, grades_service
from services.revalidation import StalePaths
from utils.forms import form_value

router = APIRouter(prefix="/classes", tags=["classes"])


def _revalidated(response: Response, stale: StalePaths) -> list:
    # 변경된 화면 경로를 헤더와 본문 모두로 알림
    if stale.paths:
        response.headers["X-Revalidate-Paths"] = ",".join(stale.paths)
    return stale.paths


# ==========================================================
# [1단계] 학급 목록 / 생성 / 삭제
# ==========================================================

# ✅ [READ] 학급 목록 (+ ADMIN 은 학급 생성 폼용 교사 목록)
@router.get("")
def read_classes(
    db: Session = Depends(get_db),
    claims: SessionClaims = Depends(get_session_claims),
):
    classes = classes_service.list_classes(db, claims)
    teachers = classes_service.list_teachers(db, claims) if claims.role == Role.ADMIN else []
    return {
        "success": True,
        "data": {
            "classes": [c.model_dump(mode="json") for c in classes],
            "teachers": [t.model_dump(mode="json") for t in teachers],
            "can_manage": claims.role == Role.ADMIN,
        },
    }


# ✅ [CREATE] 학급 추가 (ADMIN)
@router.post("", status_code=201)
def create_class(
    response: Response,
    name: str = Form(""),
    year: str = Form(""),
    teacherId: str = Form(""),
    db: Session = Depends(get_db),
    claims: SessionClaims = Depends(get_session_claims),
    stale: StalePaths = Depends(get_stale_paths),
):
    created = classes_service.create_class(db, claims, name, year, teacherId, stale=stale)
    return {
        "success": True,
        "data": created.model_dump(mode="json"),
        "message": "Class created successfully",
        "revalidate": _revalidated(response, stale),
    }


# ✅ [DELETE] 학급 삭제 (ADMIN) - 성적/등록까지 함께 삭제
@router.post("/delete")
def delete_class(
    response: Response,
    classId: str = Form(""),
    db: Session = Depends(get_db),
    claims: SessionClaims = Depends(get_session_claims),
    stale: StalePaths = Depends(get_stale_paths),
):
    classes_service.delete_class(db, claims, classId, stale=stale)
    return {
        "success": True,
        "data": {"class_id": classId.strip()},
        "message": "Class deleted successfully",
        "revalidate": _revalidated(response, stale),
    }


# ==========================================================
# [2단계] 학급 상세 (명단 / 성적)
# ==========================================================

# ✅ [READ] 학급 명단
@router.get("/{class_id}")
def read_class(
    class_id: str,
    db: Session = Depends(get_db),
    claims: SessionClaims = Depends(get_session_claims),
):
    roster = classes_service.get_class_roster(db, claims, class_id)
    return {
        "success": True,
        "data": roster.model_dump(mode="json"),
        "can_manage": claims.role in (Role.ADMIN, Role.TEACHER),
    }


# ✅ [READ] 학급 성적 목록
@router.get("/{class_id}/grades")
def read_class_grades(
    class_id: str,
    db: Session = Depends(get_db),
    claims: SessionClaims = Depends(get_session_claims),
):
    grades = grades_service.list_class_grades(db, claims, class_id)
    return {"success": True, "data": [g.model_dump(mode="json") for g in grades]}


# ==========================================================
# [3단계] 학생 추가/제거, 성적 입력 (ADMIN, TEACHER)
# ==========================================================

# ✅ [CREATE] 학급에 학생 추가
@router.post("/{class_id}/students", status_code=201)
def add_student(
    class_id: str,
    response: Response,
    studentName: str = Form(""),
    db: Session = Depends(get_db),
    claims: SessionClaims = Depends(get_session_claims),
    stale: StalePaths = Depends(get_stale_paths),
):
    created = enrollment_service.add_student_to_class(db, claims, class_id, studentName, stale=stale)
    return {
        "success": True,
        "data": created.model_dump(mode="json"),
        "message": "Student added to class",
        "revalidate": _revalidated(response, stale),
    }


# ✅ [DELETE] 학급에서 학생 제거 (없으면 아무 일 없이 성공)
@router.post("/{class_id}/students/remove")
def remove_student(
    class_id: str,
    response: Response,
    enrollmentId: str = Form(""),
    db: Session = Depends(get_db),
    claims: SessionClaims = Depends(get_session_claims),
    stale: StalePaths = Depends(get_stale_paths),
):
    removed = enrollment_service.remove_student_from_class(db, claims, class_id, enrollmentId, stale=stale)
    return {
        "success": True,
        "data": {"removed": removed},
        "revalidate": _revalidated(response, stale),
    }


# ✅ [CREATE] 성적 입력
# - 과목은 "subject"(기존 폼) 또는 "subjectId" 로 받음
@router.post("/{class_id}/grades", status_code=201)
def add_grade(
    class_id: str,
    response: Response,
    studentId: str = Form(""),
    subject: str = Form(""),
    subjectId: str = Form(""),
    value: str = Form(""),
    term: str = Form(""),
    db: Session = Depends(get_db),
    claims: SessionClaims = Depends(get_session_claims),
    stale: StalePaths = Depends(get_stale_paths),
):
    subject_id = form_value({"subjectId": subjectId, "subject": subject}, "subjectId", "subject")
    created = grades_service.add_grade_to_student(
        db, claims, class_id, studentId, subject_id, value, term, stale=stale
    )
    return {
        "success": True,
        "data": created.model_dump(mode="json"),
        "message": "Grade recorded",
        "revalidate": _revalidated(response, stale),
    }
