"""Payment extension controller.

Runs every payment request handler against the payment and concatenates
their update actions. Handlers without a pending request contribute
nothing, so one call may answer several requests at once.
"""

import structlog

from payments.payment.client_token import handle_get_client_token_request
from payments.payment.refund import refund
from payments.payment.requests import PaymentWithOptionalTransaction
from payments.payment.sale import handle_transaction_sale_request
from payments.payment.settlement import submit_for_settlement
from payments.payment.void import void_transaction
from shared.custom_types import TRANSACTION_REQUESTS
from shared.exceptions import ExtensionError
from shared.interactions import UpdateAction
from shared.resources import custom_fields

logger = structlog.get_logger(__name__)

_FOLLOW_UPS = (refund, submit_for_settlement, void_transaction)


def _transactions_with_requests(payment: dict) -> list[dict]:
    request_fields = {f"{name}Request" for name in TRANSACTION_REQUESTS}
    return [
        transaction
        for transaction in payment.get("transactions") or []
        if request_fields & {name for name, value in custom_fields(transaction).items() if value}
    ]


def update(resource: dict) -> list[UpdateAction]:
    payment = resource.get("obj")
    if not payment:
        raise ExtensionError(400, "payment obj is missing")

    actions: list[UpdateAction] = []
    actions += handle_get_client_token_request(payment)
    actions += handle_transaction_sale_request(payment)

    context = PaymentWithOptionalTransaction(payment=payment)
    for handler in _FOLLOW_UPS:
        actions += handler(context)

    for transaction in _transactions_with_requests(payment):
        transaction_context = PaymentWithOptionalTransaction(
            payment=_without_payment_requests(payment),
            transaction=transaction,
        )
        for handler in _FOLLOW_UPS:
            actions += handler(transaction_context)

    logger.info("Payment processed", payment_id=payment.get("id"), action_count=len(actions))
    return actions


def _without_payment_requests(payment: dict) -> dict:
    """A view of the payment whose own follow-up requests were already handled."""
    fields = {
        name: value
        for name, value in custom_fields(payment).items()
        if name not in {f"{request}Request" for request in TRANSACTION_REQUESTS}
    }
    return {**payment, "custom": {**(payment.get("custom") or {}), "fields": fields}}


def payment_controller(action: str, resource: dict) -> list[UpdateAction]:
    """Handle a payment extension call (``Create`` or ``Update``)."""
    if action not in ("Create", "Update"):
        raise ExtensionError(
            500,
            "Internal Server Error - Resource not recognized. Allowed values are 'Create' or 'Update'.",
        )
    try:
        return update(resource)
    except ExtensionError:
        raise
    except Exception as exc:
        logger.exception("Payment controller failed", payment_id=resource.get("id"))
        raise ExtensionError(400, f"Internal server error on PaymentController: {exc}") from exc
