# learnhub/services/payment_service.py
import logging
from typing import List, Optional

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from learnhub.core.errors import Conflict, NotFound, StoreFailure
from learnhub.db.session import commit
from learnhub.models.course import Course
from learnhub.models.payment import Payment
from learnhub.schemas.payment import PaymentCreate
from learnhub.services import course_service

logger = logging.getLogger(__name__)


def get_payment(db: Session, payment_id: int) -> Optional[Payment]:
    return db.get(Payment, payment_id)


def get_payment_by_transaction(db: Session, transaction_id: str) -> Optional[Payment]:
    return db.query(Payment).filter(Payment.transaction_id == transaction_id).first()


def _replayed_payment(existing: Payment, obj_in: PaymentCreate) -> Payment:
    """A known transaction id only answers for the same payer and class."""
    if existing.email != obj_in.email or existing.class_id != obj_in.class_id:
        raise Conflict("Transaction id already used for another payment")
    return existing


def record_payment(db: Session, *, obj_in: PaymentCreate) -> tuple[Payment, bool]:
    """
    Store the payment and bump the class's enrollment counter in one
    transaction. Returns (payment, created); a known ``transaction_id``
    returns the stored payment without counting the enrollment again.
    """
    if obj_in.transaction_id:
        existing = get_payment_by_transaction(db, obj_in.transaction_id)
        if existing is not None:
            return _replayed_payment(existing, obj_in), False

    payment = Payment(**obj_in.model_dump())
    db.add(payment)

    result = db.execute(
        update(Course)
        .where(Course.id == obj_in.class_id)
        .values(total_enrollments=Course.total_enrollments + 1)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        db.rollback()
        raise NotFound("Class not found")

    try:
        db.commit()
    except IntegrityError:
        # a concurrent post with the same transaction id won; its increment stands
        db.rollback()
        existing = (
            get_payment_by_transaction(db, obj_in.transaction_id)
            if obj_in.transaction_id
            else None
        )
        if existing is None:
            raise
        return _replayed_payment(existing, obj_in), False
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"Store failure while recording payment for class {obj_in.class_id}", exc_info=True)
        raise StoreFailure() from exc

    db.refresh(payment)
    logger.info(f"Payment {payment.id} recorded: {obj_in.email} enrolled in class {obj_in.class_id}")
    return payment, True


def list_payments(db: Session, *, skip: int = 0, limit: int = 100) -> List[Payment]:
    return (
        db.query(Payment)
        .order_by(Payment.created_at.desc(), Payment.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


def list_payments_for_email(db: Session, *, email: str) -> List[Payment]:
    return (
        db.query(Payment)
        .filter(Payment.email == email.lower())
        .order_by(Payment.created_at.desc(), Payment.id.desc())
        .all()
    )


def list_enrolled_courses(db: Session, *, email: str) -> List[Course]:
    """Each paid-for class once, however many payments reference it."""
    class_ids = [
        class_id
        for (class_id,) in db.query(Payment.class_id)
        .filter(Payment.email == email.lower())
        .distinct()
        .all()
    ]
    return course_service.list_courses_by_ids(db, class_ids)


def correct_payment(db: Session, *, db_obj: Payment, amount: float) -> Payment:
    db_obj.amount = amount
    db.add(db_obj)
    commit(db, action=f"correct payment {db_obj.id}")
    db.refresh(db_obj)
    logger.info(f"Payment {db_obj.id} amount corrected to {amount}")
    return db_obj
