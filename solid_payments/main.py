"""
Demo entry point: one service per configured payment method, all processed concurrently.

Usage:
    python -m solid_payments.main
"""

import asyncio
import logging

from solid_payments.core.config import Settings, get_settings
from solid_payments.core.logging import setup_logger
from solid_payments.payments.factory import PaymentMethodFactory
from solid_payments.services.payment_service import PaymentService

logger = logging.getLogger(__name__)


async def run(settings: Settings) -> None:
    factory = PaymentMethodFactory()
    services = [PaymentService(factory, tag) for tag in settings.payment_methods]

    # Launch every payment before awaiting any of them
    tasks = [asyncio.ensure_future(service.process_payment({})) for service in services]
    await asyncio.gather(*tasks)

    logger.info(f"Processed {len(tasks)} payments")


def main() -> None:
    settings = get_settings()
    setup_logger(settings.log_level)
    asyncio.run(run(settings))


if __name__ == "__main__":
    main()
