# learnhub/services/payment_gateway.py
import logging

import stripe

from learnhub.core.config import settings
from learnhub.core.errors import UpstreamFailure

logger = logging.getLogger(__name__)


def create_payment_intent(amount: int) -> str:
    """
    Ask Stripe for a card payment intent of ``amount`` in the smallest
    currency unit and return its client secret.
    """
    stripe.api_key = settings.STRIPE_SECRET_KEY
    try:
        intent = stripe.PaymentIntent.create(
            amount=amount,
            currency=settings.PAYMENT_CURRENCY,
            payment_method_types=["card"],
        )
    except stripe.StripeError as exc:
        logger.error(f"Stripe refused a payment intent for {amount}: {exc}")
        raise UpstreamFailure() from exc
    return intent.client_secret
