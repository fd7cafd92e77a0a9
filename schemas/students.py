from pydantic import BaseModel, ConfigDict


class StudentOut(BaseModel):
    id: str                  # 학생 고유 ID
    name: str                # 학생 이름

    model_config = ConfigDict(from_attributes=True)


# ✅ 학급 명단의 한 줄 (등록 + 학생)
class EnrollmentOut(BaseModel):
    enrollment_id: str
    class_id: str
    student: StudentOut
