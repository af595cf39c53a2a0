"""
Payment Method Factory

Maps a payment method tag to a freshly built PaymentMethod instance.
Services depend on PaymentMethodFactoryBase, never on the concrete classes.
"""

from abc import ABC, abstractmethod
from typing import Callable, Dict, List
import logging

from solid_payments.core.exceptions import UnknownPaymentMethodError
from solid_payments.payments.base import PaymentMethod
from solid_payments.payments.credit_card import CreditCardPayment
from solid_payments.payments.paypal import PaypalPayment
from solid_payments.payments.stripe import StripePayment
from solid_payments.utils.enums import PaymentMethodType

logger = logging.getLogger(__name__)


class PaymentMethodFactoryBase(ABC):
    """Abstraction the payment service is wired against."""

    @abstractmethod
    def get_payment(self, tag: str) -> PaymentMethod:
        pass


class PaymentMethodFactory(PaymentMethodFactoryBase):
    """
    Factory for the built-in payment methods.

    Every call builds a new instance, so two callers never share a method.

    Example:
        factory = PaymentMethodFactory()
        method = factory.get_payment("stripe")
        await method.process_payment({"amount": 10, "currency": "USD"})
    """

    _constructors: Dict[str, Callable[[], PaymentMethod]] = {
        PaymentMethodType.CREDIT_CARD: CreditCardPayment,
        PaymentMethodType.PAYPAL: PaypalPayment,
        PaymentMethodType.STRIPE: StripePayment,
    }

    def get_payment(self, tag: str) -> PaymentMethod:
        """
        Build the payment method registered under ``tag``.

        Raises:
            UnknownPaymentMethodError: if no method is registered for ``tag``
        """
        constructor = self._constructors.get(tag)
        if constructor is None:
            raise UnknownPaymentMethodError(tag)

        method = constructor()
        logger.debug(f"Created payment method {method!r}")
        return method

    def list_available(self) -> List[str]:
        return list(self._constructors.keys())

    def __contains__(self, tag: str) -> bool:
        return tag in self._constructors
