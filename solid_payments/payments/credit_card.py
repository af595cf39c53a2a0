"""
Credit Card Payment - simulated card charge.

No gateway integration: logs, waits PROCESSING_DELAY seconds and reports success.
"""

import asyncio
import logging

from solid_payments.payments.base import PaymentDetails, PaymentMethod, describe_amount
from solid_payments.utils.enums import PaymentMethodType

logger = logging.getLogger(__name__)


class CreditCardPayment(PaymentMethod):
    TAG = PaymentMethodType.CREDIT_CARD
    PROCESSING_DELAY = 2.0

    def __init__(self):
        self._credit_card_number = "41111111111111"

    def get_name(self) -> str:
        return self.TAG

    async def process_payment(self, payment_details: PaymentDetails) -> None:
        logger.info(f"Processing credit card payments for {describe_amount(payment_details)}")
        await asyncio.sleep(self.PROCESSING_DELAY)
        logger.info("Credit card payment processed successfully")

    async def get_payment_details(self, payment_id: str) -> str:
        return f"Credit card details for ID: {payment_id}"

    async def get_payment_status(self, payment_id: str) -> str:
        # Outcome is fixed; it never depends on the id
        return f"Credit card payment status for ID: {payment_id} is failed"

    def get_credit_card_number(self) -> str:
        return self._credit_card_number
