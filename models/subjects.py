from sqlalchemy import Column, String
from database.db import Base
from models.users import new_id


class Subject(Base):
    __tablename__ = "subjects"  # 과목 정보 테이블 (읽기 전용 참조 데이터)

    id = Column(String(36), primary_key=True, default=new_id)  # 과목 고유 ID (Primary Key)
    name = Column(String(100), nullable=False, unique=True)    # 과목 이름 (예: Matemática, Português)
