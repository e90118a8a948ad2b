"""Payment gateway port (abstract interface).

Defines the contract every gateway adapter implements. Requests are the
camelCase JSON documents found in custom fields; results are camelCase dicts
ready to be serialized into response fields. Adapters raise
``GatewayError`` for any failure.
"""

from abc import ABC, abstractmethod


class PaymentGateway(ABC):
    """Abstract payment gateway interface."""

    @abstractmethod
    def transaction_sale(self, request: dict) -> dict:
        """Authorize (and optionally settle) a new transaction."""
        ...

    @abstractmethod
    def refund(self, transaction_id: str, amount: str | None = None) -> dict:
        """Refund a settled transaction, fully or partially."""
        ...

    @abstractmethod
    def submit_for_settlement(self, transaction_id: str, amount: str | None = None) -> dict:
        """Capture an authorized transaction."""
        ...

    @abstractmethod
    def void(self, transaction_id: str) -> dict:
        """Cancel an authorized, unsettled transaction."""
        ...

    @abstractmethod
    def generate_client_token(self, request: dict) -> str:
        """Issue a client token for a drop-in or hosted fields session."""
        ...

    @abstractmethod
    def find_customer(self, customer_id: str) -> dict:
        """Look up a vaulted customer."""
        ...

    @abstractmethod
    def create_customer(self, request: dict) -> dict:
        """Create a vaulted customer, optionally with a payment method."""
        ...

    @abstractmethod
    def create_payment_method(self, request: dict) -> dict:
        """Vault a payment method for an existing customer."""
        ...
