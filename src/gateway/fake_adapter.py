"""Configurable fake payment gateway for development and testing.

This adapter simulates Braintree without any external calls. It can be
configured at runtime to succeed or fail, which makes it useful for:
- Automated tests with predictable outcomes
- Load tests against a local extension
- Development without sandbox credentials

Transactions and customers created through the fake are remembered so that
follow-up calls (refund, settlement, void, find) behave consistently.
"""

from uuid import uuid4

from gateway.port import PaymentGateway
from shared.exceptions import GatewayError
from shared.interactions import current_timestamp

FAKE_CREDIT_CARD = {"cardType": "Visa", "maskedNumber": "411111******1111", "last4": "1111"}


class FakeGateway(PaymentGateway):
    """Configurable fake payment gateway."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Do Not Honor"
        self.calls: list[dict] = []
        self.transactions: dict[str, dict] = {}
        self.customers: dict[str, dict] = {}

    def configure(self, should_succeed: bool, failure_reason: str = "Do Not Honor") -> None:
        """Configure gateway behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def _record(self, method: str, **params) -> None:
        self.calls.append({"method": method, **params})
        if not self.should_succeed:
            raise GatewayError(self.failure_reason)

    def _transaction(self, amount: str, status: str, transaction_type: str = "sale", **extra) -> dict:
        transaction = {
            "id": f"fake_txn_{uuid4().hex[:8]}",
            "type": transaction_type,
            "status": status,
            "amount": amount,
            "createdAt": current_timestamp(),
            "updatedAt": current_timestamp(),
            "paymentInstrumentType": "credit_card",
            "creditCard": dict(FAKE_CREDIT_CARD),
            **extra,
        }
        self.transactions[transaction["id"]] = transaction
        return dict(transaction)

    def _known_transaction(self, transaction_id: str) -> dict:
        transaction = self.transactions.get(transaction_id)
        if transaction is None:
            raise GatewayError(f"Transaction {transaction_id} not found")
        return transaction

    def transaction_sale(self, request: dict) -> dict:
        self._record("transaction_sale", request=request)
        settle = (request.get("options") or {}).get("submitForSettlement", False)
        return self._transaction(
            amount=str(request.get("amount", "0.00")),
            status="submitted_for_settlement" if settle else "authorized",
            merchantAccountId=request.get("merchantAccountId"),
            orderId=request.get("orderId"),
        )

    def refund(self, transaction_id: str, amount: str | None = None) -> dict:
        self._record("refund", transaction_id=transaction_id, amount=amount)
        original = self._known_transaction(transaction_id)
        return self._transaction(
            amount=str(amount) if amount is not None else original["amount"],
            status="submitted_for_settlement",
            transaction_type="credit",
            refundedTransactionId=transaction_id,
        )

    def submit_for_settlement(self, transaction_id: str, amount: str | None = None) -> dict:
        self._record("submit_for_settlement", transaction_id=transaction_id, amount=amount)
        transaction = self._known_transaction(transaction_id)
        if transaction["status"] != "authorized":
            raise GatewayError("Cannot submit for settlement unless status is authorized.")
        transaction["status"] = "submitted_for_settlement"
        transaction["updatedAt"] = current_timestamp()
        if amount is not None:
            transaction["amount"] = str(amount)
        return dict(transaction)

    def void(self, transaction_id: str) -> dict:
        self._record("void", transaction_id=transaction_id)
        transaction = self._known_transaction(transaction_id)
        if transaction["status"] not in ("authorized", "submitted_for_settlement"):
            raise GatewayError("Transaction can only be voided if status is authorized or submitted_for_settlement.")
        transaction["status"] = "voided"
        transaction["updatedAt"] = current_timestamp()
        return dict(transaction)

    def generate_client_token(self, request: dict) -> str:
        self._record("generate_client_token", request=request)
        customer_id = request.get("customerId")
        if customer_id and customer_id not in self.customers:
            raise GatewayError("Customer specified by customer_id does not exist")
        return f"fake_client_token_{uuid4().hex}"

    def find_customer(self, customer_id: str) -> dict:
        self._record("find_customer", customer_id=customer_id)
        customer = self.customers.get(customer_id)
        if customer is None:
            raise GatewayError(f"Customer {customer_id} not found")
        return dict(customer)

    def create_customer(self, request: dict) -> dict:
        self._record("create_customer", request=request)
        customer_id = request.get("id") or uuid4().hex[:10]
        if customer_id in self.customers:
            raise GatewayError("Customer ID has already been taken.")
        payment_methods = []
        if request.get("paymentMethodNonce"):
            payment_methods.append({"token": uuid4().hex[:6], "default": True, **FAKE_CREDIT_CARD})
        customer = {
            "id": customer_id,
            "firstName": request.get("firstName"),
            "lastName": request.get("lastName"),
            "email": request.get("email"),
            "company": request.get("company"),
            "createdAt": current_timestamp(),
            "paymentMethods": payment_methods,
        }
        self.customers[customer_id] = customer
        return dict(customer)

    def create_payment_method(self, request: dict) -> dict:
        self._record("create_payment_method", request=request)
        customer = self.customers.get(request.get("customerId"))
        if customer is None:
            raise GatewayError("Customer ID is invalid.")
        payment_method = {
            "token": uuid4().hex[:6],
            "customerId": customer["id"],
            "default": not customer["paymentMethods"],
            **FAKE_CREDIT_CARD,
        }
        customer["paymentMethods"].append(payment_method)
        return dict(payment_method)
