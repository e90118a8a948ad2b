"""Braintree payment gateway adapter.

Wraps the braintree Python SDK. Every call either returns a serialized
result or raises ``GatewayError`` with the most specific message available
(validation errors, processor responses, SDK exceptions).
"""

import braintree
import structlog
from braintree.exceptions.braintree_error import BraintreeError

from gateway.port import PaymentGateway
from gateway.serialization import (
    serialize_customer,
    serialize_payment_method,
    serialize_transaction,
    to_sdk_params,
)
from shared.config import Settings
from shared.exceptions import GatewayError

logger = structlog.get_logger(__name__)

_ENVIRONMENTS = {
    "sandbox": braintree.Environment.Sandbox,
    "production": braintree.Environment.Production,
}


def _sdk_error_message(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


class BraintreeGateway(PaymentGateway):
    """Production gateway adapter backed by ``braintree.BraintreeGateway``."""

    def __init__(self, sdk_gateway: braintree.BraintreeGateway) -> None:
        self.sdk = sdk_gateway

    @classmethod
    def from_settings(cls, settings: Settings) -> "BraintreeGateway":
        config = braintree.Configuration(
            environment=_ENVIRONMENTS[settings.braintree_environment],
            merchant_id=settings.braintree_merchant_id,
            public_key=settings.braintree_public_key,
            private_key=settings.braintree_private_key,
        )
        return cls(braintree.BraintreeGateway(config))

    def _call(self, operation: str, func, *args):
        try:
            result = func(*args)
        except BraintreeError as exc:
            logger.error("Braintree call raised", operation=operation, error_type=type(exc).__name__)
            raise GatewayError(_sdk_error_message(exc)) from exc
        except (KeyError, ValueError) as exc:
            # Raised by the SDK for unknown or malformed parameters
            raise GatewayError(_sdk_error_message(exc)) from exc
        if hasattr(result, "is_success") and not result.is_success:
            message = getattr(result, "message", None) or f"{operation} failed"
            logger.warning("Braintree call unsuccessful", operation=operation, message=message)
            raise GatewayError(message)
        return result

    def transaction_sale(self, request: dict) -> dict:
        result = self._call("transaction_sale", self.sdk.transaction.sale, to_sdk_params(request))
        return serialize_transaction(result.transaction)

    def refund(self, transaction_id: str, amount: str | None = None) -> dict:
        args = (transaction_id,) if amount is None else (transaction_id, str(amount))
        result = self._call("refund", self.sdk.transaction.refund, *args)
        return serialize_transaction(result.transaction)

    def submit_for_settlement(self, transaction_id: str, amount: str | None = None) -> dict:
        args = (transaction_id,) if amount is None else (transaction_id, str(amount))
        result = self._call("submit_for_settlement", self.sdk.transaction.submit_for_settlement, *args)
        return serialize_transaction(result.transaction)

    def void(self, transaction_id: str) -> dict:
        result = self._call("void", self.sdk.transaction.void, transaction_id)
        return serialize_transaction(result.transaction)

    def generate_client_token(self, request: dict) -> str:
        return self._call("generate_client_token", self.sdk.client_token.generate, to_sdk_params(request))

    def find_customer(self, customer_id: str) -> dict:
        customer = self._call("find_customer", self.sdk.customer.find, customer_id)
        return serialize_customer(customer)

    def create_customer(self, request: dict) -> dict:
        result = self._call("create_customer", self.sdk.customer.create, to_sdk_params(request))
        return serialize_customer(result.customer)

    def create_payment_method(self, request: dict) -> dict:
        result = self._call("create_payment_method", self.sdk.payment_method.create, to_sdk_params(request))
        return serialize_payment_method(result.payment_method)
