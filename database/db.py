import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event                    # SQLAlchemy 엔진 생성 도구
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from config.settings import settings               # ✅ 환경변수 설정 파일 불러오기
from services.errors import StoreFailure

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite 는 연결마다 FK 검사를 켜야 함
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(url: str) -> Engine:
    """
    URL 로 엔진을 생성합니다.
    - SQLite: 스레드 간 공유 허용 + FK pragma 활성화
    - 인메모리 SQLite: 모든 세션이 같은 연결을 쓰도록 StaticPool 사용
    """
    if not url.startswith("sqlite"):
        return create_engine(url, pool_pre_ping=True)

    kwargs = {"connect_args": {"check_same_thread": False}}
    if url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    sqlite_engine = create_engine(url, **kwargs)
    event.listen(sqlite_engine, "connect", _enable_sqlite_foreign_keys)
    return sqlite_engine


# ✅ 환경변수에서 DB 연결 URL을 불러와 엔진 생성
engine = create_db_engine(settings.DATABASE_URL)

# ✅ 세션 팩토리: DB 연결에 사용할 세션 생성기 정의
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ✅ 모델 정의 시 상속할 Base 클래스 (Declarative 방식 사용)
Base = declarative_base()


# ==========================================================
# [공통] DB 세션 관리
# - 모든 요청에서 DB 연결을 생성하고 종료
# ==========================================================
def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def store_errors(action: str = "조회") -> Iterator[None]:
    """저장소 오류(SQLAlchemyError)를 StoreFailure 로 변환 (조회 경로에서도 같은 에러 코드 유지)"""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error(f"저장소 오류({action}): {exc.__class__.__name__}: {exc}")
        raise StoreFailure(str(exc)) from exc


@contextmanager
def unit_of_work(db: Session) -> Iterator[Session]:
    """
    하나의 트랜잭션 단위로 쓰기 작업을 묶습니다.
    - 블록이 정상 종료되면 commit, 예외가 나면 rollback
    - 저장소 오류(SQLAlchemyError)는 StoreFailure 로 변환
    - 호출한 쪽이 세션에 커밋 전 변경을 올려둔 경우 SAVEPOINT 로 합류
      (버리지 않음, 최종 commit 은 호출한 쪽 몫)
    """
    has_pending = bool(db.new or db.dirty or db.deleted)

    with store_errors("트랜잭션"):
        if db.in_transaction() and has_pending:
            # begin_nested 는 올려둔 변경을 먼저 flush 함
            transaction = db.begin_nested()
        else:
            if db.in_transaction():
                # 조회로 열린 암묵적 트랜잭션은 정리하고 새로 시작
                db.rollback()
            transaction = db.begin()
        with transaction:
            yield db


def init_db(bind: Engine | None = None) -> None:
    """모델을 등록하고 테이블을 생성 (마이그레이션 도구 대신 개발용)"""
    from models import users, classes, students, subjects, enrollments, grades  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
