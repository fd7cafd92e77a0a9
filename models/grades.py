from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from database.db import Base
from models.users import new_id


def _utcnow():
    return datetime.now(timezone.utc)


class Grade(Base):
    __tablename__ = "grades"  # 성적 테이블 (append-only, 같은 과목/학기 중복 허용)

    id = Column(String(36), primary_key=True, default=new_id)                              # 성적 고유 ID (Primary Key)
    student_id = Column(String(36), ForeignKey("students.id"), nullable=False, index=True)  # 학생 ID
    class_id = Column(String(36), ForeignKey("classes.id"), nullable=False, index=True)     # 학급 ID
    subject_id = Column(String(36), ForeignKey("subjects.id"), nullable=False)              # 과목 ID
    value = Column(Float, nullable=False)                                                   # 점수 (보통 0~10)
    term = Column(Integer, nullable=False, default=1)                                       # 학기(bimestre, 보통 1~4)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)           # 입력 시각

    student = relationship("Student")
    subject = relationship("Subject")
