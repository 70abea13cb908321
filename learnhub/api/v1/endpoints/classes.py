# learnhub/api/v1/endpoints/classes.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from learnhub.core.errors import Forbidden
from learnhub.core.security import (
    ensure_same_email,
    ensure_self_or_admin,
    get_token_data,
    require_admin,
    require_teacher,
)
from learnhub.db.session import get_db
from learnhub.schemas.auth import TokenData
from learnhub.schemas.common import DeleteResult
from learnhub.schemas.course import CourseCreate, CoursePublic, CourseUpdate
from learnhub.services import course_service, user_service

router = APIRouter(prefix="/classes", tags=["classes"])


@router.post("", response_model=CoursePublic, status_code=status.HTTP_201_CREATED)
def propose_class(
    obj_in: CourseCreate,
    db: Session = Depends(get_db),
    token_data: TokenData = Depends(require_teacher),
):
    """
    Teacher proposes a class; it stays pending until an admin approves it.
    """
    ensure_same_email(token_data, obj_in.email)
    return course_service.propose_course(db, obj_in=obj_in)


@router.get("", response_model=List[CoursePublic])
def list_approved_classes(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
):
    return course_service.list_approved_courses(db, skip=skip, limit=limit)


@router.get("/all", response_model=List[CoursePublic])
def list_all_classes(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    _: TokenData = Depends(require_admin),
):
    return course_service.list_all_courses(db, skip=skip, limit=limit)


@router.get("/teacher/{email}", response_model=List[CoursePublic])
def list_teacher_classes(
    email: str,
    db: Session = Depends(get_db),
    token_data: TokenData = Depends(get_token_data),
):
    ensure_self_or_admin(db, token_data, email)
    return course_service.list_courses_for_teacher(db, email=email)


@router.get("/{class_id}", response_model=CoursePublic)
def get_class(class_id: int, db: Session = Depends(get_db)):
    return course_service.get_course_or_404(db, class_id)


@router.patch("/{class_id}", response_model=CoursePublic)
def update_class(
    class_id: int,
    obj_in: CourseUpdate,
    db: Session = Depends(get_db),
    token_data: TokenData = Depends(get_token_data),
):
    """
    Owner or admin edits a class. Moderation status is admin-only.
    """
    course = course_service.get_course_or_404(db, class_id)
    ensure_self_or_admin(db, token_data, course.email)

    patch = obj_in.model_dump(exclude_unset=True, exclude_none=True)
    if "status" in patch and not user_service.is_admin(db, token_data.email):
        raise Forbidden("Only an admin may change the status of a class")
    return course_service.update_course(db, db_obj=course, patch=patch)


@router.patch("/{class_id}/approve", response_model=CoursePublic)
def approve_class(
    class_id: int,
    db: Session = Depends(get_db),
    _: TokenData = Depends(require_admin),
):
    return course_service.approve_course(db, class_id)


@router.patch("/{class_id}/reject", response_model=CoursePublic)
def reject_class(
    class_id: int,
    db: Session = Depends(get_db),
    _: TokenData = Depends(require_admin),
):
    return course_service.reject_course(db, class_id)


@router.delete("/{class_id}", response_model=DeleteResult)
def delete_class(
    class_id: int,
    db: Session = Depends(get_db),
    token_data: TokenData = Depends(get_token_data),
):
    course = course_service.get_course_or_404(db, class_id)
    ensure_self_or_admin(db, token_data, course.email)
    course_service.delete_course(db, db_obj=course)
    return DeleteResult(deleted_count=1)
