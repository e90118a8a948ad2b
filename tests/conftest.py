import os
from pathlib import Path

import pytest


def pytest_sessionstart(session):
    """Point the extension at the fake gateway before anything is imported."""
    os.environ["ENVIRONMENT"] = "test"
    os.environ["PAYMENT_GATEWAY"] = "fake"
    os.environ.pop("BRAINTREE_MERCHANT_ACCOUNT", None)
    os.environ.pop("BRAINTREE_AUTOCAPTURE", None)


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def gateway():
    """A fresh FakeGateway installed as the active gateway for every test."""
    from gateway import reset_gateway, set_gateway
    from gateway.fake_adapter import FakeGateway

    fake = FakeGateway()
    set_gateway(fake)
    yield fake
    reset_gateway()


@pytest.fixture(autouse=True)
def _fresh_settings():
    from shared.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def settings():
    from shared.config import Settings

    return Settings(_env_file=None, braintree_merchant_account="ct-merchant", braintree_autocapture=False)


@pytest.fixture()
def make_payment():
    """Build a payment document with the given custom fields and transactions."""

    def _make(fields=None, transactions=None, cent_amount=1999, currency="USD", fraction_digits=2, **extra):
        payment = {
            "id": "pay-001",
            "version": 3,
            "amountPlanned": {
                "type": "centPrecision",
                "centAmount": cent_amount,
                "currencyCode": currency,
                "fractionDigits": fraction_digits,
            },
            "transactions": transactions or [],
            "custom": {"type": {"typeId": "type", "id": "type-001"}, "fields": fields or {}},
        }
        payment.update(extra)
        return payment

    return _make


@pytest.fixture()
def make_customer():
    """Build a customer document with the given custom fields."""

    def _make(fields=None, **extra):
        customer = {
            "id": "cust-001",
            "version": 1,
            "email": "jane.doe@example.com",
            "firstName": "Jane",
            "lastName": "Doe",
            "custom": {"type": {"typeId": "type", "id": "type-002"}, "fields": fields or {}},
        }
        customer.update(extra)
        return customer

    return _make
