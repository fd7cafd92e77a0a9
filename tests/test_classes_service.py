import pytest
from sqlalchemy.exc import SQLAlchemyError

from models.classes import Class
from models.enrollments import Enrollment
from models.grades import Grade
from models.students import Student
from services.classes_service import (
    create_class, delete_class, get_class_roster, list_classes, list_subjects, list_teachers,
)
from services.enrollment_service import add_student_to_class
from services.errors import NotFound, StoreFailure, ValidationError
from services.grades_service import add_grade_to_student
from services.revalidation import StalePaths


def _seed_students_with_grades(db, claims, class_id, subject_id, names=("João Silva", "Maria Oliveira")):
    enrollments = []
    for name in names:
        enrollment = add_student_to_class(db, claims, class_id, name)
        add_grade_to_student(db, claims, class_id, enrollment.student.id, subject_id, "5")
        enrollments.append(enrollment)
    return enrollments


# ==========================================================
# create_class
# ==========================================================

def test_create_class_persists_and_marks_stale(db, users, admin_claims):
    stale = StalePaths()

    created = create_class(db, admin_claims, " 6º Ano A ", "2025", users["teacher"].id, stale=stale)

    stored = db.get(Class, created.id)
    assert stored.name == "6º Ano A"
    assert stored.year == 2025
    assert stored.teacher_id == users["teacher"].id
    assert "/classes" in stale
    assert "/dashboard" in stale


def test_create_class_allows_duplicate_names(db, users, admin_claims):
    create_class(db, admin_claims, "6º Ano A", "2025", users["teacher"].id)
    create_class(db, admin_claims, "6º Ano A", "2026", users["teacher"].id)

    assert db.query(Class).filter(Class.name == "6º Ano A").count() == 2


@pytest.mark.parametrize(
    "name, year, field",
    [
        ("", "2025", "name"),
        ("6º Ano A", "0", "year"),
        ("6º Ano A", "abc", "year"),
        ("6º Ano A", "", "year"),
    ],
)
def test_create_class_validation(db, users, admin_claims, name, year, field):
    with pytest.raises(ValidationError) as exc_info:
        create_class(db, admin_claims, name, year, users["teacher"].id)

    assert exc_info.value.field == field
    assert db.query(Class).count() == 0


def test_create_class_requires_teacher_id(db, users, admin_claims):
    with pytest.raises(ValidationError) as exc_info:
        create_class(db, admin_claims, "6º Ano A", "2025", "  ")
    assert exc_info.value.field == "teacherId"


def test_create_class_rejects_non_teacher(db, users, admin_claims):
    with pytest.raises(ValidationError) as exc_info:
        create_class(db, admin_claims, "6º Ano A", "2025", users["parent"].id)

    assert exc_info.value.field == "teacherId"
    assert db.query(Class).count() == 0


# ==========================================================
# delete_class
# ==========================================================

def test_delete_class_cascades_grades_and_enrollments(db, users, admin_claims, school_class, subjects):
    other = create_class(db, admin_claims, "7º Ano B", "2025", users["teacher"].id)
    _seed_students_with_grades(db, admin_claims, school_class.id, subjects["math"])
    _seed_students_with_grades(db, admin_claims, other.id, subjects["math"], names=("Lucas Santos",))
    stale = StalePaths()

    delete_class(db, admin_claims, school_class.id, stale=stale)

    assert db.query(Grade).filter(Grade.class_id == school_class.id).count() == 0
    assert db.query(Enrollment).filter(Enrollment.class_id == school_class.id).count() == 0
    assert school_class.id not in [c.id for c in list_classes(db, admin_claims)]
    # 학생 행과 다른 학급 데이터는 그대로
    assert db.query(Student).count() == 3
    assert db.query(Grade).filter(Grade.class_id == other.id).count() == 1
    assert f"/classes/{school_class.id}" in stale


def test_delete_class_unknown_id(db, admin_claims):
    with pytest.raises(NotFound):
        delete_class(db, admin_claims, "missing-class")


def test_delete_class_requires_id(db, admin_claims):
    with pytest.raises(ValidationError) as exc_info:
        delete_class(db, admin_claims, "")
    assert exc_info.value.field == "classId"


def test_delete_class_rolls_back_on_store_failure(db, admin_claims, school_class, subjects, monkeypatch):
    _seed_students_with_grades(db, admin_claims, school_class.id, subjects["math"])

    def boom(instance):
        raise SQLAlchemyError("connection lost")

    monkeypatch.setattr(db, "delete", boom)

    with pytest.raises(StoreFailure):
        delete_class(db, admin_claims, school_class.id)

    monkeypatch.undo()
    assert db.query(Grade).filter(Grade.class_id == school_class.id).count() == 2
    assert db.query(Enrollment).filter(Enrollment.class_id == school_class.id).count() == 2
    assert db.get(Class, school_class.id) is not None


# ==========================================================
# listings
# ==========================================================

def test_list_classes_scoped_by_role(db, users, admin_claims, teacher_claims, other_teacher_claims, parent_claims):
    create_class(db, admin_claims, "8º Ano C", "2025", users["other_teacher"].id)
    mine = create_class(db, admin_claims, "6º Ano A", "2025", users["teacher"].id)
    add_student_to_class(db, admin_claims, mine.id, "Ana Costa")
    add_student_to_class(db, admin_claims, mine.id, "João Silva")

    admin_view = list_classes(db, admin_claims)
    assert [c.name for c in admin_view] == ["6º Ano A", "8º Ano C"]
    assert admin_view[0].teacher_name == "Professora Ana"
    assert admin_view[0].student_count == 2
    assert admin_view[1].student_count == 0

    assert [c.id for c in list_classes(db, teacher_claims)] == [mine.id]
    assert [c.name for c in list_classes(db, other_teacher_claims)] == ["8º Ano C"]
    assert len(list_classes(db, parent_claims)) == 2


def test_list_teachers_ordered_by_name(db, users, parent_claims):
    teachers = list_teachers(db, parent_claims)

    assert [t.name for t in teachers] == ["Bruno Lima", "Professora Ana"]


def test_list_subjects_ordered_by_name(db, subjects, teacher_claims):
    assert [s.name for s in list_subjects(db, teacher_claims)] == ["Matemática", "Português"]


# ==========================================================
# roster
# ==========================================================

def test_roster_orders_students_by_name(db, admin_claims, teacher_claims, school_class, subjects):
    for name in ("Maria Oliveira", "Ana Costa", "Lucas Santos"):
        add_student_to_class(db, admin_claims, school_class.id, name)

    roster = get_class_roster(db, teacher_claims, school_class.id)

    assert roster.name == "6º Ano A"
    assert roster.teacher.name == "Professora Ana"
    assert [e.student.name for e in roster.students] == ["Ana Costa", "Lucas Santos", "Maria Oliveira"]
    assert roster.total_students == 3
    assert [s.name for s in roster.subjects] == ["Matemática", "Português"]


def test_roster_unknown_class(db, admin_claims):
    with pytest.raises(NotFound):
        get_class_roster(db, admin_claims, "missing-class")
