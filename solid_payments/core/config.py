"""
Runtime settings for the demo entry point.

Values come from environment variables; a .env file in the working
directory is loaded first when present.

    LOG_LEVEL        logging level name (default INFO)
    PAYMENT_METHODS  comma separated tags to run (default credit_card,stripe,paypal)
"""

from dataclasses import dataclass, field
from typing import List
import logging
import os

from dotenv import load_dotenv

from solid_payments.utils.enums import PaymentMethodType

DEFAULT_PAYMENT_METHODS = ",".join(PaymentMethodType.ALL)


def parse_log_level(value: str) -> int:
    """Map a level name to its logging constant, falling back to INFO."""
    level = logging.getLevelName((value or "").strip().upper())
    return level if isinstance(level, int) else logging.INFO


def parse_payment_methods(value: str) -> List[str]:
    return [tag.strip().lower() for tag in (value or "").split(",") if tag.strip()]


@dataclass
class Settings:
    log_level: int = logging.INFO
    payment_methods: List[str] = field(default_factory=lambda: list(PaymentMethodType.ALL))


def get_settings() -> Settings:
    load_dotenv()  # .env from current working directory
    return Settings(
        log_level=parse_log_level(os.getenv("LOG_LEVEL", "INFO")),
        payment_methods=parse_payment_methods(
            os.getenv("PAYMENT_METHODS", DEFAULT_PAYMENT_METHODS)
        ),
    )
