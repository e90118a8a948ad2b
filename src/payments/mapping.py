"""Translation between Braintree and commercetools payment vocabularies.

commercetools keeps money as an integer ``centAmount`` with
``fractionDigits``; Braintree uses decimal strings. Statuses map onto
commercetools transaction states and types.
"""

from decimal import ROUND_HALF_UP, Decimal

DEFAULT_FRACTION_DIGITS = 2

_TRANSACTION_STATES = {
    "authorization_expired": "Failure",
    "authorized": "Success",
    "authorizing": "Pending",
    "failed": "Failure",
    "gateway_rejected": "Failure",
    "processor_declined": "Failure",
    "settled": "Success",
    "settlement_confirmed": "Success",
    "settlement_declined": "Failure",
    "settlement_pending": "Pending",
    "settling": "Pending",
    "submitted_for_settlement": "Pending",
    "voided": "Success",
}

_CHARGE_STATUSES = frozenset(
    {
        "settled",
        "settlement_confirmed",
        "settlement_declined",
        "settlement_pending",
        "settling",
        "submitted_for_settlement",
    }
)


def _digits(fraction_digits: int | None) -> int:
    return DEFAULT_FRACTION_DIGITS if fraction_digits is None else fraction_digits


def to_gateway_amount(cent_amount: int, fraction_digits: int | None) -> str:
    """``1999, 2`` -> ``"19.99"``"""
    return str(Decimal(cent_amount).scaleb(-_digits(fraction_digits)))


def to_cent_amount(amount: str | int | float | None, fraction_digits: int | None) -> int:
    """``"19.99", 2`` -> ``1999``"""
    if amount is None or amount == "":
        return 0
    scaled = Decimal(str(amount)).scaleb(_digits(fraction_digits))
    return int(scaled.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def to_transaction_state(status: str | None) -> str:
    return _TRANSACTION_STATES.get(status or "", "Pending")


def to_transaction_type(status: str | None) -> str:
    if status in _CHARGE_STATUSES:
        return "Charge"
    if status == "voided":
        return "CancelAuthorization"
    return "Authorization"


def payment_method_hint(response: dict) -> str:
    """Short human-readable description of the instrument used."""
    instrument = response.get("paymentInstrumentType")
    if instrument == "credit_card":
        card = response.get("creditCard") or {}
        return f"{card.get('cardType')} {card.get('maskedNumber')}"
    if instrument == "paypal_account":
        return (response.get("paypalAccount") or {}).get("payerEmail") or ""
    if instrument == "venmo_account":
        return (response.get("venmoAccount") or {}).get("username") or ""
    if instrument == "android_pay_card":
        return (response.get("androidPayCard") or {}).get("sourceDescription") or ""
    if instrument == "apple_pay_card":
        return (response.get("applePayCard") or {}).get("sourceDescription") or ""
    return ""


def payment_method_info(response: dict) -> str:
    hint = payment_method_hint(response)
    method = response.get("paymentInstrumentType") or ""
    return f"{method} ({hint})" if hint else method
