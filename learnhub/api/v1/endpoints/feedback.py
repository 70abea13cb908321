# learnhub/api/v1/endpoints/feedback.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from learnhub.core.security import ensure_same_email, get_token_data
from learnhub.db.session import get_db
from learnhub.schemas.auth import TokenData
from learnhub.schemas.feedback import FeedbackCreate, FeedbackPublic
from learnhub.services import feedback_service

router = APIRouter(prefix="/feedback", tags=["feedback"])


@router.post("", response_model=FeedbackPublic, status_code=status.HTTP_201_CREATED)
def add_feedback(
    obj_in: FeedbackCreate,
    db: Session = Depends(get_db),
    token_data: TokenData = Depends(get_token_data),
):
    ensure_same_email(token_data, obj_in.email)
    return feedback_service.add_feedback(db, obj_in=obj_in)


@router.get("", response_model=List[FeedbackPublic])
def list_feedback(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
):
    return feedback_service.list_feedback(db, skip=skip, limit=limit)
