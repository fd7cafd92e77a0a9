"""
Pytest configuration for backend tests.

앱 모듈을 import 하기 전에 인메모리 SQLite 를 쓰도록 환경변수를 먼저 설정한다.
"""
import os

os.environ["DB_DRIVER"] = "sqlite"
os.environ["SQLITE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ENV"] = "dev"

import pytest  # noqa: E402

from database.db import Base, SessionLocal, engine, init_db  # noqa: E402
from models.subjects import Subject  # noqa: E402
from models.users import Role, User  # noqa: E402
from schemas.session import SessionClaims  # noqa: E402
from utils.security import hash_password  # noqa: E402

PASSWORD = "123456"


def claims_for(user: User) -> SessionClaims:
    return SessionClaims(user_id=user.id, name=user.name, email=user.email, role=user.role)


@pytest.fixture(autouse=True)
def _schema():
    init_db(engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def users(db):
    password = hash_password(PASSWORD, rounds=4)
    records = {
        "admin": User(name="Admin SchoolFlow", email="admin@schoolflow.dev", password=password, role=Role.ADMIN),
        "teacher": User(name="Professora Ana", email="prof@schoolflow.dev", password=password, role=Role.TEACHER),
        "other_teacher": User(name="Bruno Lima", email="bruno@schoolflow.dev", password=password, role=Role.TEACHER),
        "parent": User(name="Pai do João", email="pai@schoolflow.dev", password=password, role=Role.PARENT),
    }
    db.add_all(records.values())
    db.commit()
    return records


@pytest.fixture
def subjects(db):
    records = {
        "math": Subject(name="Matemática"),
        "portuguese": Subject(name="Português"),
    }
    db.add_all(records.values())
    db.commit()
    return {key: subject.id for key, subject in records.items()}


@pytest.fixture
def admin_claims(users):
    return claims_for(users["admin"])


@pytest.fixture
def teacher_claims(users):
    return claims_for(users["teacher"])


@pytest.fixture
def other_teacher_claims(users):
    return claims_for(users["other_teacher"])


@pytest.fixture
def parent_claims(users):
    return claims_for(users["parent"])


@pytest.fixture
def claims_by_role(admin_claims, teacher_claims, parent_claims):
    return {Role.ADMIN: admin_claims, Role.TEACHER: teacher_claims, Role.PARENT: parent_claims}


@pytest.fixture
def school_class(db, users, admin_claims):
    from services.classes_service import create_class

    return create_class(db, admin_claims, "6º Ano A", "2025", users["teacher"].id)
