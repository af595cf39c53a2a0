from solid_payments.services.payment_service import PaymentService

__all__ = ["PaymentService"]
