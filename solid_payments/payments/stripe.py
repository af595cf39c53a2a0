"""Stripe Payment - simulated Stripe charge, faster than the other methods."""

import asyncio
import logging

from solid_payments.payments.base import PaymentDetails, PaymentMethod, describe_amount
from solid_payments.utils.enums import PaymentMethodType

logger = logging.getLogger(__name__)


class StripePayment(PaymentMethod):
    TAG = PaymentMethodType.STRIPE
    PROCESSING_DELAY = 1.0

    def __init__(self):
        self._stripe_id = "stripe_123456"

    def get_name(self) -> str:
        return self.TAG

    async def process_payment(self, payment_details: PaymentDetails) -> None:
        logger.info(f"Processing Stripe payment for {describe_amount(payment_details)}")
        await asyncio.sleep(self.PROCESSING_DELAY)
        logger.info("Stripe payment processed successfully")

    async def get_payment_details(self, payment_id: str) -> str:
        return f"Stripe payment details for ID: {payment_id}"

    async def get_payment_status(self, payment_id: str) -> str:
        return f"Stripe payment status for ID: {payment_id} is successful"

    def get_stripe_id(self) -> str:
        return self._stripe_id
