"""Refund of a charged transaction."""

from gateway import get_gateway
from payments.payment.follow_up import FollowUp, process_follow_up
from payments.payment.requests import PaymentWithOptionalTransaction
from shared.interactions import UpdateAction


def refund(context: PaymentWithOptionalTransaction) -> list[UpdateAction]:
    """Handle a ``refundRequest``; the refund is recorded as a ``Refund`` transaction."""
    gateway = get_gateway()
    return process_follow_up(
        context,
        FollowUp(
            request_name="refund",
            lookup_type="Charge",
            created_type="Refund",
            call=lambda request: gateway.refund(request["transactionId"], request.get("amount")),
        ),
    )
