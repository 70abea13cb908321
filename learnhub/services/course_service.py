# learnhub/services/course_service.py
import logging
from typing import Any, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from learnhub.core.errors import NotFound
from learnhub.db.session import commit
from learnhub.models.course import (
    STATUS_APPROVED,
    STATUS_PENDING,
    STATUS_REJECTED,
    Course,
)
from learnhub.schemas.course import CourseCreate

logger = logging.getLogger(__name__)

# never taken from a patch
_PROTECTED_FIELDS = {"id", "_id", "total_enrollments", "created_at", "updated_at"}


def propose_course(db: Session, *, obj_in: CourseCreate) -> Course:
    db_obj = Course(
        **obj_in.model_dump(),
        status=STATUS_PENDING,
        total_enrollments=0,
    )
    db.add(db_obj)
    commit(db, action="propose class")
    db.refresh(db_obj)
    logger.info(f"Class {db_obj.id} proposed by {obj_in.email}")
    return db_obj


def get_course(db: Session, course_id: int) -> Optional[Course]:
    return db.get(Course, course_id)


def get_course_or_404(db: Session, course_id: int) -> Course:
    db_obj = get_course(db, course_id)
    if db_obj is None:
        raise NotFound("Class not found")
    return db_obj


def list_approved_courses(db: Session, *, skip: int = 0, limit: int = 100) -> List[Course]:
    return (
        db.query(Course)
        .filter(Course.status == STATUS_APPROVED)
        .order_by(Course.created_at.desc(), Course.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


def list_all_courses(db: Session, *, skip: int = 0, limit: int = 100) -> List[Course]:
    return (
        db.query(Course)
        .order_by(Course.created_at.desc(), Course.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


def list_courses_for_teacher(db: Session, *, email: str) -> List[Course]:
    return (
        db.query(Course)
        .filter(Course.email == email.lower())
        .order_by(Course.created_at.desc(), Course.id.desc())
        .all()
    )


def list_courses_by_ids(db: Session, course_ids: List[int]) -> List[Course]:
    if not course_ids:
        return []
    return db.query(Course).filter(Course.id.in_(course_ids)).order_by(Course.id.asc()).all()


def _set_status(db: Session, course_id: int, new_status: str) -> Course:
    db_obj = get_course(db, course_id)
    if db_obj is None or db_obj.status == new_status:
        raise NotFound("Class not found or not modified")
    db_obj.status = new_status
    db.add(db_obj)
    commit(db, action=f"set status of class {course_id}")
    db.refresh(db_obj)
    logger.info(f"Class {course_id} is now {new_status}")
    return db_obj


def approve_course(db: Session, course_id: int) -> Course:
    return _set_status(db, course_id, STATUS_APPROVED)


def reject_course(db: Session, course_id: int) -> Course:
    return _set_status(db, course_id, STATUS_REJECTED)


def update_course(db: Session, *, db_obj: Course, patch: dict[str, Any]) -> Course:
    """
    Merge ``patch`` into the class. Identifier and counter fields are
    dropped; a patch that changes nothing is a NotFound.
    """
    changes = {
        field: value
        for field, value in patch.items()
        if field not in _PROTECTED_FIELDS
        and hasattr(Course, field)
        and getattr(db_obj, field) != value
    }
    if not changes:
        raise NotFound("Class not modified")

    for field, value in changes.items():
        setattr(db_obj, field, value)
    db.add(db_obj)
    commit(db, action=f"update class {db_obj.id}")
    db.refresh(db_obj)
    logger.info(f"Class {db_obj.id} updated: {', '.join(sorted(changes))}")
    return db_obj


def delete_course(db: Session, *, db_obj: Course) -> None:
    course_id = db_obj.id
    db.delete(db_obj)
    commit(db, action=f"delete class {course_id}")
    logger.info(f"Deleted class {course_id}")


def count_approved_courses(db: Session) -> int:
    return db.query(Course).filter(Course.status == STATUS_APPROVED).count()


def total_enrollments(db: Session) -> int:
    return db.query(func.coalesce(func.sum(Course.total_enrollments), 0)).scalar()
