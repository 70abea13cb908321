# learnhub/schemas/payment.py
from datetime import datetime

from pydantic import Field

from learnhub.schemas.common import CamelModel, Email


class PaymentIntentRequest(CamelModel):
    price: int = Field(gt=0, description="amount in the smallest currency unit")


class PaymentIntent(CamelModel):
    client_secret: str


class PaymentCreate(CamelModel):
    email: Email
    class_id: int
    amount: float = Field(ge=0)
    transaction_id: str | None = None


class PaymentUpdate(CamelModel):
    """Admin correction."""
    amount: float = Field(ge=0)


class PaymentPublic(PaymentCreate):
    id: int
    created_at: datetime | None = None
