"""Payment gateway factory.

Provides get_gateway() / set_gateway() to swap implementations:
- BraintreeGateway for sandbox and production
- FakeGateway for development, tests and load tests

The adapter is chosen by the ``payment_gateway`` setting.
"""

from gateway.port import PaymentGateway
from shared.config import get_settings

_current_gateway: PaymentGateway | None = None


def get_gateway() -> PaymentGateway:
    """Return the current payment gateway, creating it from settings on first use."""
    global _current_gateway
    if _current_gateway is None:
        settings = get_settings()
        if settings.payment_gateway == "fake":
            from gateway.fake_adapter import FakeGateway

            _current_gateway = FakeGateway()
        else:
            from gateway.braintree_adapter import BraintreeGateway

            _current_gateway = BraintreeGateway.from_settings(settings)
    return _current_gateway


def set_gateway(gateway: PaymentGateway) -> None:
    """Override the active payment gateway (useful for tests)."""
    global _current_gateway
    _current_gateway = gateway


def reset_gateway() -> None:
    """Reset to the configured gateway."""
    global _current_gateway
    _current_gateway = None
