"""Faker-based data generators for Locust load test scenarios.

Each generator produces a commercetools extension call: the envelope
(action, typeId, id) plus a resource document carrying the custom fields
the extension reads.
"""

import json
import random
import uuid
from decimal import Decimal

from faker import Faker

fake = Faker()

# Braintree sandbox test nonces, also accepted by the fake gateway
VALID_NONCES = ("fake-valid-nonce", "fake-valid-visa-nonce", "fake-valid-mastercard-nonce")
CURRENCIES = {"USD": 2, "EUR": 2, "GBP": 2, "JPY": 0}


def nonce() -> str:
    return random.choice(VALID_NONCES)


def extension_call(action: str, type_id: str, resource: dict) -> dict:
    return {"action": action, "resource": {"typeId": type_id, "id": resource["id"], "obj": resource}}


# ---------- Payments ----------


def payment_resource(fields: dict | None = None) -> dict:
    """A payment with a random planned amount and no transactions yet."""
    currency, fraction_digits = random.choice(list(CURRENCIES.items()))
    cent_amount = random.randint(100, 50_000) if fraction_digits else random.randint(100, 5_000)
    return {
        "id": str(uuid.uuid4()),
        "version": 1,
        "amountPlanned": {
            "type": "centPrecision",
            "centAmount": cent_amount,
            "currencyCode": currency,
            "fractionDigits": fraction_digits,
        },
        "paymentMethodInfo": {"paymentInterface": "Braintree"},
        "transactions": [],
        "interfaceInteractions": [],
        "custom": {"type": {"typeId": "type", "key": "braintree-payment-type"}, "fields": fields or {}},
    }


def transaction_sale_request(submit_for_settlement: bool = False) -> str:
    request = {"paymentMethodNonce": nonce(), "orderId": f"LT-{uuid.uuid4().hex[:8]}"}
    if submit_for_settlement:
        request["options"] = {"submitForSettlement": True}
    return json.dumps(request)


def partial_refund_request(cent_amount: int, fraction_digits: int) -> str:
    """Refund a random part of the charged amount."""
    refund_cents = max(1, cent_amount // random.randint(2, 4))
    return json.dumps({"amount": str(Decimal(refund_cents).scaleb(-fraction_digits))})


# ---------- Customers ----------


def customer_resource(fields: dict | None = None) -> dict:
    return {
        "id": str(uuid.uuid4()),
        "version": 1,
        "email": f"{fake.user_name()[:20]}.{uuid.uuid4().hex[:4]}@{fake.free_email_domain()}",
        "firstName": fake.first_name(),
        "lastName": fake.last_name(),
        "companyName": fake.company() if random.random() < 0.3 else None,
        "custom": {"type": {"typeId": "type", "key": "braintree-customer-type"}, "fields": fields or {}},
    }
