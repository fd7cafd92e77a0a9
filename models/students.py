from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from database.db import Base
from models.users import new_id


class Student(Base):
    __tablename__ = "students"  # 학생 기본 정보 테이블

    id = Column(String(36), primary_key=True, default=new_id)       # 고유 학생 ID (Primary Key)
    name = Column(String(100), nullable=False, index=True)          # 학생 이름 (동명이인 허용)

    # ✅ 학생이 속한 학급 등록 목록 (한 학생이 여러 학급에 속할 수 있음)
    enrollments = relationship("Enrollment", back_populates="student")
