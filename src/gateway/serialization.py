"""Conversion between custom-field JSON and the Braintree Python SDK.

Custom-field payloads use the camelCase keys of Braintree's client SDKs;
the Python SDK expects snake_case parameters and returns attribute objects.
"""

import re
from datetime import datetime
from decimal import Decimal
from typing import Any

from shared.interactions import format_timestamp

# Before a capital that follows a lowercase letter or digit, and before the
# last capital of an acronym run (``threeDSecure`` -> ``three_d_secure``)
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")

# Merchant-defined maps whose keys are passed through untouched
OPAQUE_PARAMS = frozenset({"custom_fields", "supplementary_data"})


def to_snake_case(key: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def to_sdk_params(data: Any) -> Any:
    """Recursively rename dict keys from camelCase to snake_case."""
    if isinstance(data, dict):
        params = {}
        for key, value in data.items():
            name = to_snake_case(key)
            params[name] = value if name in OPAQUE_PARAMS else to_sdk_params(value)
        return params
    if isinstance(data, list):
        return [to_sdk_params(item) for item in data]
    return data


def _value(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, datetime):
        return format_timestamp(value)
    return value


def _pick(source: Any, **attributes: str) -> dict | None:
    """Read ``attribute`` names off ``source`` into a dict keyed by the kwarg names."""
    if source is None:
        return None
    picked = {key: _value(getattr(source, attribute, None)) for key, attribute in attributes.items()}
    return {key: value for key, value in picked.items() if value is not None} or None


def serialize_transaction(transaction: Any) -> dict:
    data = _pick(
        transaction,
        id="id",
        type="type",
        status="status",
        amount="amount",
        currencyIsoCode="currency_iso_code",
        merchantAccountId="merchant_account_id",
        orderId="order_id",
        createdAt="created_at",
        updatedAt="updated_at",
        paymentInstrumentType="payment_instrument_type",
        processorResponseCode="processor_response_code",
        processorResponseText="processor_response_text",
        refundedTransactionId="refunded_transaction_id",
    ) or {}
    details = {
        "creditCard": _pick(
            getattr(transaction, "credit_card_details", None),
            cardType="card_type",
            maskedNumber="masked_number",
            last4="last_4",
            expirationDate="expiration_date",
            token="token",
        ),
        "paypalAccount": _pick(getattr(transaction, "paypal_details", None), payerEmail="payer_email"),
        "venmoAccount": _pick(getattr(transaction, "venmo_account_details", None), username="username"),
        "androidPayCard": _pick(
            getattr(transaction, "android_pay_card_details", None),
            sourceDescription="source_description",
        ),
        "applePayCard": _pick(
            getattr(transaction, "apple_pay_details", None),
            sourceDescription="source_description",
        ),
        "customer": _pick(getattr(transaction, "customer_details", None), id="id", email="email"),
    }
    data.update({key: value for key, value in details.items() if value})
    return data


def serialize_payment_method(payment_method: Any) -> dict:
    return (
        _pick(
            payment_method,
            token="token",
            customerId="customer_id",
            default="default",
            imageUrl="image_url",
            cardType="card_type",
            maskedNumber="masked_number",
            last4="last_4",
            email="email",
            username="username",
        )
        or {}
    )


def serialize_customer(customer: Any) -> dict:
    data = (
        _pick(
            customer,
            id="id",
            firstName="first_name",
            lastName="last_name",
            email="email",
            company="company",
            createdAt="created_at",
        )
        or {}
    )
    payment_methods = getattr(customer, "payment_methods", None) or []
    data["paymentMethods"] = [serialize_payment_method(method) for method in payment_methods]
    return data
