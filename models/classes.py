from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from database.db import Base
from models.users import new_id


class Class(Base):
    __tablename__ = "classes"

    id = Column(String(36), primary_key=True, default=new_id)   # 학급 고유 ID (PK)
    name = Column(String(100), nullable=False, index=True)      # 학급 이름 (예: 6º Ano A), 중복 허용
    year = Column(Integer, nullable=False)                      # 학년도 (예: 2025)

    # ==========================================================
    # [관계 설정]
    # ==========================================================

    # ✅ 담임 교사 ID (FK)
    #    - users.id를 참조 (role=TEACHER)
    #    - ON DELETE 규칙 없음: 하위 행 삭제는 서비스 계층이 한 트랜잭션에서 처리
    teacher_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)

    # ✅ 담임 교사와의 관계 (N:1)
    teacher = relationship("User", back_populates="classes")

    # ✅ 이 학급의 수강(등록) 목록 (1:N)
    enrollments = relationship("Enrollment", back_populates="class_")
