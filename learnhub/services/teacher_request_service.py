# learnhub/services/teacher_request_service.py
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from learnhub.core.errors import Conflict, NotFound
from learnhub.db.session import commit
from learnhub.models.teacher_request import (
    STATUS_ACCEPTED,
    STATUS_PENDING,
    STATUS_REJECTED,
    TeacherRequest,
)
from learnhub.models.user import ROLE_ADMIN, ROLE_TEACHER
from learnhub.schemas.teacher_request import TeacherRequestCreate
from learnhub.services import user_service

logger = logging.getLogger(__name__)


def get_request(db: Session, request_id: int) -> Optional[TeacherRequest]:
    return db.get(TeacherRequest, request_id)


def get_request_by_email(db: Session, email: str) -> Optional[TeacherRequest]:
    return db.query(TeacherRequest).filter(TeacherRequest.email == email.lower()).first()


def submit_request(
    db: Session,
    *,
    obj_in: TeacherRequestCreate,
    allow_resubmit: bool = False,
) -> TeacherRequest:
    """
    One request per email. A prior request of any status is a Conflict,
    except a rejected one when ``allow_resubmit`` is on: that record is
    overwritten and goes back to pending.
    """
    existing = get_request_by_email(db, obj_in.email)
    if existing is not None:
        if not (allow_resubmit and existing.status == STATUS_REJECTED):
            raise Conflict("A teacher request already exists for this email")
        for field, value in obj_in.model_dump().items():
            setattr(existing, field, value)
        existing.status = STATUS_PENDING
        db.add(existing)
        commit(db, action=f"resubmit teacher request {existing.id}")
        db.refresh(existing)
        logger.info(f"Teacher request {existing.id} resubmitted by {obj_in.email}")
        return existing

    db_obj = TeacherRequest(**obj_in.model_dump(), status=STATUS_PENDING)
    db.add(db_obj)
    commit(db, action="submit teacher request")
    db.refresh(db_obj)
    logger.info(f"Teacher request {db_obj.id} submitted by {obj_in.email}")
    return db_obj


def get_status(db: Session, email: str) -> TeacherRequest:
    db_obj = get_request_by_email(db, email)
    if db_obj is None:
        raise NotFound("No teacher request for this email")
    return db_obj


def list_requests(db: Session, *, skip: int = 0, limit: int = 100) -> List[TeacherRequest]:
    return (
        db.query(TeacherRequest)
        .order_by(TeacherRequest.created_at.desc(), TeacherRequest.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


def _resolve(db: Session, request_id: int, new_status: str) -> TeacherRequest:
    db_obj = get_request(db, request_id)
    if db_obj is None or db_obj.status == new_status:
        raise NotFound("Teacher request not found or not modified")
    if db_obj.status != STATUS_PENDING:
        raise Conflict(f"Teacher request is already {db_obj.status}")
    db_obj.status = new_status
    db.add(db_obj)
    return db_obj


def approve_request(db: Session, request_id: int) -> TeacherRequest:
    """
    Accept the request and promote the matching user in one transaction.
    Without a registered user nothing is written. An admin stays admin.
    """
    db_obj = _resolve(db, request_id, STATUS_ACCEPTED)

    user = user_service.get_user_by_email(db, db_obj.email)
    if user is None:
        db.rollback()
        raise NotFound("No registered user for this teacher request")
    if user.role != ROLE_ADMIN:
        user_service.set_role(db, user=user, role=ROLE_TEACHER, flush_only=True)

    commit(db, action=f"approve teacher request {request_id}")
    db.refresh(db_obj)
    logger.info(f"Teacher request {request_id} accepted, user {user.id} is {user.role}")
    return db_obj


def reject_request(db: Session, request_id: int) -> TeacherRequest:
    db_obj = _resolve(db, request_id, STATUS_REJECTED)
    commit(db, action=f"reject teacher request {request_id}")
    db.refresh(db_obj)
    logger.info(f"Teacher request {request_id} rejected")
    return db_obj
