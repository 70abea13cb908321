# learnhub/schemas/teacher_request.py
from datetime import datetime

from learnhub.schemas.common import CamelModel, Email, NonEmptyStr


class TeacherRequestCreate(CamelModel):
    name: NonEmptyStr
    email: Email
    image: NonEmptyStr
    title: NonEmptyStr
    experience: NonEmptyStr  # beginner / experienced / some idea
    category: NonEmptyStr


class TeacherRequestPublic(TeacherRequestCreate):
    id: int
    status: str  # pending / accepted / rejected
    created_at: datetime | None = None
