"""PayPal Payment - simulated PayPal checkout."""

import asyncio
import logging

from solid_payments.payments.base import PaymentDetails, PaymentMethod, describe_amount
from solid_payments.utils.enums import PaymentMethodType

logger = logging.getLogger(__name__)


class PaypalPayment(PaymentMethod):
    TAG = PaymentMethodType.PAYPAL
    PROCESSING_DELAY = 2.0

    def __init__(self):
        self._paypal_account = "paypa_account_123"

    def get_name(self) -> str:
        return self.TAG

    async def process_payment(self, payment_details: PaymentDetails) -> None:
        logger.info(f"Processing paypal payments for {describe_amount(payment_details)}")
        await asyncio.sleep(self.PROCESSING_DELAY)
        logger.info("Paypal payment processed successfully")

    async def get_payment_details(self, payment_id: str) -> str:
        return f"Paypal payment details for ID: {payment_id}"

    async def get_payment_status(self, payment_id: str) -> str:
        return f"Paypal payment status for {payment_id} is successful"

    def get_paypal_account(self) -> str:
        return self._paypal_account
