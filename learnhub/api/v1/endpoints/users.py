# learnhub/api/v1/endpoints/users.py
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from learnhub.core.errors import NotFound
from learnhub.core.security import (
    ensure_same_email,
    get_current_user,
    get_token_data,
    require_admin,
)
from learnhub.db.session import get_db
from learnhub.models.user import User
from learnhub.schemas.auth import TokenData
from learnhub.schemas.common import DeleteResult, InsertResult, UpdateResult
from learnhub.schemas.user import (
    AdminStatus,
    RoleUpdate,
    TeacherStatus,
    UserCreate,
    UserPublic,
)
from learnhub.services import user_service

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=InsertResult)
def register_user(payload: UserCreate, response: Response, db: Session = Depends(get_db)):
    """
    Register on first sign-in. Calling again with the same email is a no-op
    that returns the existing id. Self-registration always yields role normal.
    """
    user, created = user_service.register_user(
        db, email=payload.email, name=payload.name, image=payload.image
    )
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return InsertResult(inserted_id=user.id)


@router.get("", response_model=List[UserPublic])
def list_users(
    search: str | None = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    _: TokenData = Depends(require_admin),
):
    return user_service.list_users(db, search=search, skip=skip, limit=limit)


@router.get("/me", response_model=UserPublic)
def read_me(current_user: User = Depends(get_current_user)):
    return current_user


@router.get("/admin/{email}", response_model=AdminStatus)
def check_admin(
    email: str,
    db: Session = Depends(get_db),
    token_data: TokenData = Depends(get_token_data),
):
    ensure_same_email(token_data, email)
    return AdminStatus(admin=user_service.is_admin(db, email))


@router.get("/teacher/{email}", response_model=TeacherStatus)
def check_teacher(
    email: str,
    db: Session = Depends(get_db),
    token_data: TokenData = Depends(get_token_data),
):
    ensure_same_email(token_data, email)
    return TeacherStatus(teacher=user_service.is_teacher(db, email))


@router.patch("/{user_id}/role", response_model=UpdateResult)
def update_role(
    user_id: int,
    payload: RoleUpdate,
    db: Session = Depends(get_db),
    _: TokenData = Depends(require_admin),
):
    user = user_service.get_user(db, user_id)
    if user is None:
        raise NotFound("User not found")
    modified = int(user.role != payload.role)
    user_service.set_role(db, user=user, role=payload.role)
    return UpdateResult(matched_count=1, modified_count=modified)


@router.delete("/{user_id}", response_model=DeleteResult)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    _: TokenData = Depends(require_admin),
):
    user = user_service.get_user(db, user_id)
    if user is None:
        raise NotFound("User not found")
    user_service.delete_user(db, user=user)
    return DeleteResult(deleted_count=1)
