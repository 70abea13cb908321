# learnhub/api/v1/endpoints/assignments.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from learnhub.core.security import ensure_self_or_admin, get_token_data
from learnhub.db.session import get_db
from learnhub.schemas.assignment import AssignmentCreate, AssignmentPublic
from learnhub.schemas.auth import TokenData
from learnhub.services import assignment_service, course_service

router = APIRouter(prefix="/assignments", tags=["assignments"])


@router.post("", response_model=AssignmentPublic, status_code=status.HTTP_201_CREATED)
def create_assignment(
    obj_in: AssignmentCreate,
    db: Session = Depends(get_db),
    token_data: TokenData = Depends(get_token_data),
):
    """
    The teacher who owns the class (or an admin) adds an assignment.
    """
    course = course_service.get_course_or_404(db, obj_in.class_id)
    ensure_self_or_admin(db, token_data, course.email)
    return assignment_service.create_assignment(db, obj_in=obj_in)


@router.get("/class/{class_id}", response_model=List[AssignmentPublic])
def list_class_assignments(
    class_id: int,
    db: Session = Depends(get_db),
    _: TokenData = Depends(get_token_data),
):
    return assignment_service.list_assignments_for_class(db, class_id=class_id)


@router.post("/{assignment_id}/submissions", response_model=AssignmentPublic)
def submit_assignment(
    assignment_id: int,
    db: Session = Depends(get_db),
    _: TokenData = Depends(get_token_data),
):
    return assignment_service.record_submission(db, assignment_id)
