"""
String constants for payment method tags.
Using plain strings (not Enums) so callers can pass raw tags.
"""


class PaymentMethodType:
    CREDIT_CARD = "credit_card"
    STRIPE = "stripe"
    PAYPAL = "paypal"

    ALL = (CREDIT_CARD, STRIPE, PAYPAL)
