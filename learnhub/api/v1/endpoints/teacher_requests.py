# learnhub/api/v1/endpoints/teacher_requests.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from learnhub.core.config import settings
from learnhub.core.security import (
    ensure_same_email,
    ensure_self_or_admin,
    get_token_data,
    require_admin,
)
from learnhub.db.session import get_db
from learnhub.schemas.auth import TokenData
from learnhub.schemas.teacher_request import TeacherRequestCreate, TeacherRequestPublic
from learnhub.services import teacher_request_service

router = APIRouter(prefix="/teacher-requests", tags=["teacher-requests"])


@router.post("", response_model=TeacherRequestPublic, status_code=status.HTTP_201_CREATED)
def submit_request(
    obj_in: TeacherRequestCreate,
    db: Session = Depends(get_db),
    token_data: TokenData = Depends(get_token_data),
):
    """
    Ask to become a teacher. Only one request per email is kept.
    """
    ensure_same_email(token_data, obj_in.email)
    return teacher_request_service.submit_request(
        db, obj_in=obj_in, allow_resubmit=settings.TEACHER_REQUEST_ALLOW_RESUBMIT
    )


@router.get("", response_model=List[TeacherRequestPublic])
def list_requests(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    _: TokenData = Depends(require_admin),
):
    return teacher_request_service.list_requests(db, skip=skip, limit=limit)


@router.get("/{email}", response_model=TeacherRequestPublic)
def get_request_status(
    email: str,
    db: Session = Depends(get_db),
    token_data: TokenData = Depends(get_token_data),
):
    ensure_self_or_admin(db, token_data, email)
    return teacher_request_service.get_status(db, email)


@router.patch("/{request_id}/approve", response_model=TeacherRequestPublic)
def approve_request(
    request_id: int,
    db: Session = Depends(get_db),
    _: TokenData = Depends(require_admin),
):
    """
    Accept the request; the requester's role becomes teacher in the same
    transaction.
    """
    return teacher_request_service.approve_request(db, request_id)


@router.patch("/{request_id}/reject", response_model=TeacherRequestPublic)
def reject_request(
    request_id: int,
    db: Session = Depends(get_db),
    _: TokenData = Depends(require_admin),
):
    return teacher_request_service.reject_request(db, request_id)
