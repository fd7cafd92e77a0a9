from pydantic import BaseModel, ConfigDict


class SubjectOut(BaseModel):
    id: str          # 과목 고유 ID
    name: str        # 과목 이름

    model_config = ConfigDict(from_attributes=True)
