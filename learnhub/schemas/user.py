# learnhub/schemas/user.py
from datetime import datetime

from learnhub.schemas.common import CamelModel, Email, NonEmptyStr


class UserCreate(CamelModel):
    email: Email
    name: str | None = None
    image: str | None = None


class RoleUpdate(CamelModel):
    role: NonEmptyStr


class UserPublic(CamelModel):
    id: int
    email: Email
    name: str | None = None
    image: str | None = None
    role: str
    created_at: datetime | None = None


class AdminStatus(CamelModel):
    admin: bool


class TeacherStatus(CamelModel):
    teacher: bool
