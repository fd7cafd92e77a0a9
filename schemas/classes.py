from typing import List, Optional
from pydantic import BaseModel, ConfigDict

from schemas.students import EnrollmentOut
from schemas.subjects import SubjectOut
from schemas.teachers import TeacherOut


# ✅ 응답(Response) / 조회(Read) 용 스키마
# DB에서 불러온 학급 데이터를 API 응답으로 내려줄 때 사용
class ClassOut(BaseModel):
    id: str                          # 학급 고유 ID (PK)
    name: str                        # 학급 이름
    year: int                        # 학년도
    teacher_id: str                  # 담임 교사 ID (FK)

    model_config = ConfigDict(from_attributes=True)


# ✅ 학급 목록의 한 줄 (교사 이름 + 등록 학생 수)
class ClassListItem(BaseModel):
    id: str
    name: str
    year: int
    teacher_id: str
    teacher_name: Optional[str] = None
    student_count: int = 0


# ✅ 학급 상세 (명단)
class ClassRoster(BaseModel):
    id: str
    name: str
    year: int
    teacher: Optional[TeacherOut] = None
    students: List[EnrollmentOut]       # 학생 이름 오름차순
    total_students: int
    subjects: List[SubjectOut]          # 성적 입력 폼 선택지
