# learnhub/schemas/feedback.py
from datetime import datetime

from pydantic import Field

from learnhub.schemas.common import CamelModel, Email, NonEmptyStr


class FeedbackCreate(CamelModel):
    class_id: int | None = None
    name: str | None = None
    email: Email
    image: str | None = None
    rating: int = Field(ge=1, le=5)
    description: NonEmptyStr


class FeedbackPublic(FeedbackCreate):
    id: int
    created_at: datetime | None = None
