# learnhub/services/feedback_service.py
from typing import List

from sqlalchemy.orm import Session

from learnhub.db.session import commit
from learnhub.models.feedback import Feedback
from learnhub.schemas.feedback import FeedbackCreate


def add_feedback(db: Session, *, obj_in: FeedbackCreate) -> Feedback:
    db_obj = Feedback(**obj_in.model_dump())
    db.add(db_obj)
    commit(db, action="add feedback")
    db.refresh(db_obj)
    return db_obj


def list_feedback(db: Session, *, skip: int = 0, limit: int = 100) -> List[Feedback]:
    return (
        db.query(Feedback)
        .order_by(Feedback.created_at.desc(), Feedback.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )
