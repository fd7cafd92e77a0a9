import enum
import uuid

from sqlalchemy import Column, Enum, String
from sqlalchemy.orm import relationship
from database.db import Base


def new_id() -> str:
    return str(uuid.uuid4())


class Role(str, enum.Enum):
    ADMIN = "ADMIN"
    TEACHER = "TEACHER"
    PARENT = "PARENT"


class User(Base):
    __tablename__ = "users"  # 사용자 (관리자/교사/학부모) 계정 테이블

    id = Column(String(36), primary_key=True, default=new_id)           # 사용자 고유 ID (PK)
    name = Column(String(100), nullable=False)                          # 표시 이름
    email = Column(String(255), unique=True, nullable=False, index=True)  # 로그인 이메일 (고유)
    password = Column(String(255), nullable=False)                      # bcrypt 해시
    role = Column(Enum(Role, name="user_role"), nullable=False)         # ADMIN / TEACHER / PARENT

    # ✅ 이 교사가 담당하는 학급들 (1:N)
    classes = relationship("Class", back_populates="teacher")
