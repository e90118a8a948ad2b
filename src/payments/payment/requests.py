"""Parsing of payment request fields into gateway requests.

Request fields hold either a JSON document or a bare string. A bare string
is shorthand for the one value the request cannot do without: the payment
method nonce for a sale, the gateway transaction id for follow-ups.
"""

from dataclasses import dataclass

from payments.mapping import to_gateway_amount
from shared.config import Settings
from shared.exceptions import ExtensionError
from shared.resources import custom_field, parse_json_object

CHANNEL_COMMERCETOOLS = "commercetools"


@dataclass(frozen=True)
class PaymentWithOptionalTransaction:
    """A payment, plus the transaction whose custom fields carry the request (if any)."""

    payment: dict
    transaction: dict | None = None

    @property
    def transaction_id(self) -> str | None:
        return self.transaction.get("id") if self.transaction else None

    def request_value(self, field: str) -> str | None:
        return custom_field(self.payment, field) or custom_field(self.transaction, field) or None


def parse_transaction_sale_request(payment: dict, settings: Settings) -> dict:
    sale_request = custom_field(payment, "transactionSaleRequest")
    if not sale_request:
        raise ExtensionError(500, "transactionSaleRequest is missing")
    amount_planned = payment.get("amountPlanned")
    if not amount_planned:
        raise ExtensionError(500, "amountPlanned is missing")

    request = parse_json_object(sale_request, "paymentMethodNonce")
    customer = request.get("customer")
    store_in_vault = bool(request.get("customerId")) or (isinstance(customer, dict) and bool(customer.get("id")))
    defaults = {
        "amount": to_gateway_amount(amount_planned["centAmount"], amount_planned.get("fractionDigits")),
        "merchantAccountId": settings.braintree_merchant_account or None,
        "channel": CHANNEL_COMMERCETOOLS,
        "options": {
            "submitForSettlement": settings.braintree_autocapture,
            "storeInVaultOnSuccess": store_in_vault,
        },
    }
    return {**defaults, **request}


def find_suitable_transaction_id(context: PaymentWithOptionalTransaction, transaction_type: str) -> str:
    """Gateway id of the transaction a follow-up request applies to."""
    if context.transaction:
        return context.transaction.get("interactionId")
    candidates = [
        transaction
        for transaction in context.payment.get("transactions") or []
        if transaction.get("type") == transaction_type
    ]
    if not candidates:
        raise ExtensionError(500, "The payment has no suitable transaction")
    return candidates[-1].get("interactionId")


def parse_request(context: PaymentWithOptionalTransaction, request_field: str, transaction_type: str) -> dict:
    """Parse a refund, settlement or void request, filling in the transaction id."""
    raw = context.request_value(request_field)
    if not raw:
        raise ExtensionError(500, f"{request_field} is missing")
    request = parse_json_object(raw, "transactionId")
    if not request.get("transactionId"):
        request["transactionId"] = find_suitable_transaction_id(context, transaction_type)
    return request
