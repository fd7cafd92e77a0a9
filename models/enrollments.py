from sqlalchemy import Column, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from database.db import Base
from models.users import new_id


class Enrollment(Base):
    __tablename__ = "enrollments"  # 학생-학급 등록 (조인 테이블)

    id = Column(String(36), primary_key=True, default=new_id)                          # 등록 고유 ID
    student_id = Column(String(36), ForeignKey("students.id"), nullable=False, index=True)  # 학생 ID (FK)
    class_id = Column(String(36), ForeignKey("classes.id"), nullable=False, index=True)     # 학급 ID (FK)

    student = relationship("Student", back_populates="enrollments")
    class_ = relationship("Class", back_populates="enrollments")

    # 같은 학생이 같은 학급에 두 번 등록되지 않도록 저장소에서 보장
    __table_args__ = (UniqueConstraint("student_id", "class_id", name="uq_enrollment_student_class"),)
