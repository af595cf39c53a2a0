"""Exceptions raised by the payments package."""


class PaymentError(Exception):
    """Base class for payment errors."""


class UnknownPaymentMethodError(PaymentError, ValueError):
    """Raised when the factory is asked for a tag it does not know."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"No payment system has been found named as {tag}")
