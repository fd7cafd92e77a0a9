from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict


class GradeOut(BaseModel):
    id: str                                  # 성적 고유 ID
    student_id: str                          # 학생 ID
    class_id: str                            # 학급 ID
    subject_id: str                          # 과목 ID
    value: float                             # 점수
    term: int                                # 학기 (bimestre)
    created_at: Optional[datetime] = None    # 입력 시각

    model_config = ConfigDict(from_attributes=True)


# ✅ 학급 성적 목록의 한 줄 (이름 포함)
class ClassGradeRow(GradeOut):
    student_name: str
    subject_name: str
