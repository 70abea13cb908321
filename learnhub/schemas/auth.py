# learnhub/schemas/auth.py
from pydantic import BaseModel

from learnhub.schemas.common import Email


class TokenRequest(BaseModel):
    email: Email
    role: str | None = None


class Token(BaseModel):
    token: str


class TokenData(BaseModel):
    email: Email
    role: str | None = None
