# learnhub/services/assignment_service.py
import logging
from typing import List, Optional

from sqlalchemy import update
from sqlalchemy.orm import Session

from learnhub.core.errors import NotFound
from learnhub.db.session import commit
from learnhub.models.assignment import Assignment
from learnhub.schemas.assignment import AssignmentCreate

logger = logging.getLogger(__name__)


def create_assignment(db: Session, *, obj_in: AssignmentCreate) -> Assignment:
    db_obj = Assignment(**obj_in.model_dump(), submission_count=0)
    db.add(db_obj)
    commit(db, action="create assignment")
    db.refresh(db_obj)
    logger.info(f"Assignment {db_obj.id} created for class {obj_in.class_id}")
    return db_obj


def get_assignment(db: Session, assignment_id: int) -> Optional[Assignment]:
    return db.get(Assignment, assignment_id)


def list_assignments_for_class(db: Session, *, class_id: int) -> List[Assignment]:
    return (
        db.query(Assignment)
        .filter(Assignment.class_id == class_id)
        .order_by(Assignment.created_at.asc(), Assignment.id.asc())
        .all()
    )


def record_submission(db: Session, assignment_id: int) -> Assignment:
    """Increment the submission counter in the database, not in Python."""
    result = db.execute(
        update(Assignment)
        .where(Assignment.id == assignment_id)
        .values(submission_count=Assignment.submission_count + 1)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        db.rollback()
        raise NotFound("Assignment not found")
    commit(db, action=f"record submission for assignment {assignment_id}")
    return get_assignment(db, assignment_id)
