# learnhub/api/v1/endpoints/stats.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from learnhub.db.session import get_db
from learnhub.schemas.stats import Stats
from learnhub.services import course_service, user_service

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("", response_model=Stats)
def read_stats(db: Session = Depends(get_db)):
    return Stats(
        users=user_service.count_users(db),
        classes=course_service.count_approved_courses(db),
        enrollments=course_service.total_enrollments(db),
    )
