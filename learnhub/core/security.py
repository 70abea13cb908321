# learnhub/core/security.py
"""
Identity tokens and the guards placed in front of route handlers.

Tokens carry identity only. Roles are always read back from the users table,
so a role change takes effect on the next request even for tokens issued
before it.
"""
from datetime import datetime, timedelta, timezone

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from pydantic import ValidationError
from sqlalchemy.orm import Session

from learnhub.core.config import settings
from learnhub.core.errors import Forbidden, NotFound, Unauthenticated
from learnhub.db.session import get_db
from learnhub.models.user import ROLE_ADMIN, ROLE_TEACHER, User
from learnhub.schemas.auth import TokenData
from learnhub.services import user_service

bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire, "sub": data["email"]})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str | None) -> TokenData:
    if not token:
        raise Unauthenticated("Missing token")
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as exc:
        raise Unauthenticated("Invalid or expired token") from exc

    try:
        return TokenData(email=payload.get("email"), role=payload.get("role"))
    except ValidationError as exc:
        raise Unauthenticated("Token carries no usable identity") from exc


def get_token_data(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> TokenData:
    if credentials is None:
        raise Unauthenticated()
    try:
        return decode_access_token(credentials.credentials)
    except Unauthenticated as exc:
        # a token was presented but rejected
        raise Forbidden(exc.detail) from exc


def get_current_user(
    token_data: TokenData = Depends(get_token_data),
    db: Session = Depends(get_db),
) -> User:
    user = user_service.get_user_by_email(db, token_data.email)
    if user is None:
        raise NotFound("User not found")
    return user


def require_admin(
    token_data: TokenData = Depends(get_token_data),
    db: Session = Depends(get_db),
) -> TokenData:
    if not user_service.is_admin(db, token_data.email):
        raise Forbidden()
    return token_data


def require_teacher(
    token_data: TokenData = Depends(get_token_data),
    db: Session = Depends(get_db),
) -> TokenData:
    """Teachers and admins."""
    user = user_service.get_user_by_email(db, token_data.email)
    if user is None or user.role not in (ROLE_TEACHER, ROLE_ADMIN):
        raise Forbidden()
    return token_data


def same_email(token_data: TokenData, email: str) -> bool:
    return token_data.email.lower() == email.lower()


def ensure_same_email(token_data: TokenData, email: str) -> None:
    if not same_email(token_data, email):
        raise Forbidden()


def ensure_self_or_admin(db: Session, token_data: TokenData, email: str) -> None:
    """Owner of the resource identified by ``email``, or any admin."""
    if same_email(token_data, email):
        return
    if not user_service.is_admin(db, token_data.email):
        raise Forbidden()
