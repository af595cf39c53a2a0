"""
Payment methods - one class per supported method, built through the factory.

Usage:
    from solid_payments.payments import PaymentMethodFactory

    method = PaymentMethodFactory().get_payment("credit_card")
    await method.process_payment({"amount": 100, "currency": "USD"})
"""

from solid_payments.payments.base import PaymentDetails, PaymentMethod
from solid_payments.payments.credit_card import CreditCardPayment
from solid_payments.payments.factory import PaymentMethodFactory, PaymentMethodFactoryBase
from solid_payments.payments.paypal import PaypalPayment
from solid_payments.payments.stripe import StripePayment

__all__ = [
    "PaymentDetails",
    "PaymentMethod",
    "PaymentMethodFactory",
    "PaymentMethodFactoryBase",
    "CreditCardPayment",
    "PaypalPayment",
    "StripePayment",
]
