# learnhub/api/v1/endpoints/payments.py
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from learnhub.core.errors import NotFound
from learnhub.core.security import ensure_same_email, get_token_data, require_admin
from learnhub.db.session import get_db
from learnhub.schemas.auth import TokenData
from learnhub.schemas.course import CoursePublic
from learnhub.schemas.payment import (
    PaymentCreate,
    PaymentIntent,
    PaymentIntentRequest,
    PaymentPublic,
    PaymentUpdate,
)
from learnhub.services import payment_gateway, payment_service

router = APIRouter(prefix="/payments", tags=["payments"])


@router.post("/intent", response_model=PaymentIntent)
def create_payment_intent(
    payload: PaymentIntentRequest,
    _: TokenData = Depends(get_token_data),
):
    client_secret = payment_gateway.create_payment_intent(payload.price)
    return PaymentIntent(client_secret=client_secret)


@router.post("", response_model=PaymentPublic)
def record_payment(
    obj_in: PaymentCreate,
    response: Response,
    db: Session = Depends(get_db),
    token_data: TokenData = Depends(get_token_data),
):
    """
    Record a completed payment; the class gains one enrollment.
    """
    ensure_same_email(token_data, obj_in.email)
    payment, created = payment_service.record_payment(db, obj_in=obj_in)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return payment


@router.get("", response_model=List[PaymentPublic])
def list_payments(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    _: TokenData = Depends(require_admin),
):
    return payment_service.list_payments(db, skip=skip, limit=limit)


@router.patch("/{payment_id}", response_model=PaymentPublic)
def correct_payment(
    payment_id: int,
    obj_in: PaymentUpdate,
    db: Session = Depends(get_db),
    _: TokenData = Depends(require_admin),
):
    payment = payment_service.get_payment(db, payment_id)
    if payment is None:
        raise NotFound("Payment not found")
    return payment_service.correct_payment(db, db_obj=payment, amount=obj_in.amount)


@router.get("/{email}", response_model=List[PaymentPublic])
def list_my_payments(
    email: str,
    db: Session = Depends(get_db),
    token_data: TokenData = Depends(get_token_data),
):
    ensure_same_email(token_data, email)
    return payment_service.list_payments_for_email(db, email=email)


@router.get("/{email}/classes", response_model=List[CoursePublic])
def list_my_enrolled_classes(
    email: str,
    db: Session = Depends(get_db),
    token_data: TokenData = Depends(get_token_data),
):
    ensure_same_email(token_data, email)
    return payment_service.list_enrolled_courses(db, email=email)
