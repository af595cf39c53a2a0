"""
Payment Method - Abstract base for the supported payment methods.

Implementations: CreditCardPayment, StripePayment, PaypalPayment.
Each one also exposes its own identifier getter, which is deliberately
left out of this shared interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping

# Untyped record; usually a mapping, attribute objects are accepted too
PaymentDetails = Any


class PaymentMethod(ABC):
    """Capability set shared by every payment method."""

    TAG: str
    PROCESSING_DELAY: float = 0.0  # seconds

    @abstractmethod
    def get_name(self) -> str:
        """Tag this method is registered under."""
        pass

    @abstractmethod
    async def process_payment(self, payment_details: PaymentDetails) -> None:
        """Process a payment. Always succeeds."""
        pass

    @abstractmethod
    async def get_payment_details(self, payment_id: str) -> str:
        pass

    @abstractmethod
    async def get_payment_status(self, payment_id: str) -> str:
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__} tag={self.TAG}>"


def describe_amount(payment_details: PaymentDetails) -> str:
    """Render '<currency> <amount>' without validating either field."""
    if isinstance(payment_details, Mapping):
        currency = payment_details.get("currency")
        amount = payment_details.get("amount")
    else:
        currency = getattr(payment_details, "currency", None)
        amount = getattr(payment_details, "amount", None)
    return f"{currency} {amount}"
