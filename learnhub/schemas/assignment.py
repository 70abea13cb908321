# learnhub/schemas/assignment.py
from datetime import datetime

from learnhub.schemas.common import CamelModel, NonEmptyStr


class AssignmentCreate(CamelModel):
    class_id: int
    title: NonEmptyStr
    description: str | None = None
    deadline: datetime | None = None


class AssignmentPublic(AssignmentCreate):
    id: int
    submission_count: int
    created_at: datetime | None = None
