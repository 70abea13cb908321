# learnhub/schemas/course.py
from datetime import datetime
from typing import Literal

from pydantic import ConfigDict, Field

from learnhub.schemas.common import CamelModel, Email, NonEmptyStr


class CourseBase(CamelModel):
    title: NonEmptyStr
    name: NonEmptyStr
    email: Email
    price: float = Field(ge=0)
    description: NonEmptyStr
    image: NonEmptyStr


class CourseCreate(CourseBase):
    pass


class CourseUpdate(CamelModel):
    # unknown keys such as "_id" are dropped instead of stored
    model_config = ConfigDict(extra="ignore")

    title: NonEmptyStr | None = None
    name: NonEmptyStr | None = None
    price: float | None = Field(default=None, ge=0)
    description: NonEmptyStr | None = None
    image: NonEmptyStr | None = None
    status: Literal["pending", "approved", "rejected"] | None = None


class CoursePublic(CourseBase):
    id: int
    status: str
    total_enrollments: int
    created_at: datetime | None = None
