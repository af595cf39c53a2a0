"""
Payment Service

Facade bound to one payment method for its whole lifetime. It depends on the
factory abstraction, not on any concrete payment method.
"""

from typing import Awaitable

from solid_payments.payments.base import PaymentDetails, PaymentMethod
from solid_payments.payments.factory import PaymentMethodFactoryBase


class PaymentService:
    def __init__(self, payment_factory: PaymentMethodFactoryBase, payment_method: str):
        # Resolved once; unknown tags fail here
        self._payment_method = payment_factory.get_payment(payment_method)

    @property
    def payment_method(self) -> PaymentMethod:
        return self._payment_method

    def process_payment(self, payment_details: PaymentDetails) -> Awaitable[None]:
        return self._payment_method.process_payment(payment_details)

    def get_payment_details(self, payment_id: str) -> Awaitable[str]:
        return self._payment_method.get_payment_details(payment_id)
