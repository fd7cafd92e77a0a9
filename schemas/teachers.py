from typing import Optional
from pydantic import BaseModel, ConfigDict


# ✅ 응답(Response) 용 스키마
# 학급 생성/담당 교사 변경 폼의 선택지로 사용
class TeacherOut(BaseModel):
    id: str                          # 교사(User) 고유 ID
    name: str                        # 이름
    email: Optional[str] = None      # 이메일

    model_config = ConfigDict(from_attributes=True)
