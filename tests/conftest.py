"""
Pytest global configuration for the payments package.

Fixtures:
- factory and service builders
- sample payment details
- a recorder replacing asyncio.sleep, for tests that should not wait
"""

import asyncio

import pytest

from solid_payments.payments.factory import PaymentMethodFactory
from solid_payments.utils.enums import PaymentMethodType

ALL_TAGS = list(PaymentMethodType.ALL)


@pytest.fixture
def factory():
    return PaymentMethodFactory()


@pytest.fixture
def payment_details():
    return {"amount": 100, "currency": "USD"}


@pytest.fixture
def recorded_sleeps(monkeypatch):
    """Replace asyncio.sleep with an instant stub; yields the requested delays."""
    delays = []
    real_sleep = asyncio.sleep

    async def fake_sleep(delay, *args, **kwargs):
        delays.append(delay)
        await real_sleep(0)

    monkeypatch.setattr(asyncio, "sleep", fake_sleep)
    yield delays
