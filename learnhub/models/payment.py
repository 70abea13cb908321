# learnhub/models/payment.py
from sqlalchemy import Column, Integer, String, DateTime, Float
from sqlalchemy.sql import func
from learnhub.db.base import Base


class Payment(Base):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, index=True)

    email = Column(String(255), nullable=False, index=True)  # payer
    # no foreign key: payment history outlives a deleted class
    class_id = Column(Integer, nullable=False, index=True)
    amount = Column(Float, nullable=False)

    # payment intent id from Stripe, makes re-posting the same payment harmless
    transaction_id = Column(String(255), unique=True, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
