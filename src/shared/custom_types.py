"""Custom type definitions the extension reads from and writes to.

Request fields are written by the storefront or checkout; the extension
answers in the paired response field and clears the request.
"""

from dataclasses import dataclass, field

from shared.interactions import PAYMENT_INTERACTION_TYPE_KEY

PAYMENT_TYPE_KEY = "braintree-payment-type"
TRANSACTION_TYPE_KEY = "braintree-transaction-type"
CUSTOMER_TYPE_KEY = "braintree-customer-type"

PAYMENT_REQUESTS = (
    "getClientToken",
    "transactionSale",
    "refund",
    "submitForSettlement",
    "void",
)
TRANSACTION_REQUESTS = ("refund", "submitForSettlement", "void")
CUSTOMER_REQUESTS = ("find", "create", "vault")


@dataclass(frozen=True)
class CustomType:
    key: str
    name: str
    resource_type_ids: tuple[str, ...]
    field_names: tuple[str, ...] = field(default_factory=tuple)

    def to_draft(self) -> dict:
        """Render as a commercetools ``TypeDraft``."""
        return {
            "key": self.key,
            "name": {"en": self.name},
            "resourceTypeIds": list(self.resource_type_ids),
            "fieldDefinitions": [
                {
                    "name": name,
                    "label": {"en": name},
                    "required": False,
                    "type": {"name": "String"},
                    "inputHint": "MultiLine",
                }
                for name in self.field_names
            ],
        }


def _request_response_fields(requests: tuple[str, ...]) -> tuple[str, ...]:
    names: list[str] = []
    for request in requests:
        names += [f"{request}Request", f"{request}Response"]
    return tuple(names)


PAYMENT_TYPE = CustomType(
    key=PAYMENT_TYPE_KEY,
    name="Braintree payment",
    resource_type_ids=("payment",),
    field_names=_request_response_fields(PAYMENT_REQUESTS),
)

TRANSACTION_TYPE = CustomType(
    key=TRANSACTION_TYPE_KEY,
    name="Braintree payment transaction",
    resource_type_ids=("transaction",),
    field_names=_request_response_fields(TRANSACTION_REQUESTS),
)

CUSTOMER_TYPE = CustomType(
    key=CUSTOMER_TYPE_KEY,
    name="Braintree customer",
    resource_type_ids=("customer",),
    field_names=("customerId",) + _request_response_fields(CUSTOMER_REQUESTS),
)

PAYMENT_INTERACTION_TYPE = CustomType(
    key=PAYMENT_INTERACTION_TYPE_KEY,
    name="Braintree payment interaction",
    resource_type_ids=("payment-interface-interaction",),
    field_names=("type", "data", "timestamp"),
)

ALL_TYPES = (PAYMENT_TYPE, TRANSACTION_TYPE, CUSTOMER_TYPE, PAYMENT_INTERACTION_TYPE)
