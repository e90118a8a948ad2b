"""Capture of an authorized transaction."""

from gateway import get_gateway
from payments.payment.follow_up import FollowUp, process_follow_up
from payments.payment.requests import PaymentWithOptionalTransaction
from shared.interactions import UpdateAction


def submit_for_settlement(context: PaymentWithOptionalTransaction) -> list[UpdateAction]:
    """Handle a ``submitForSettlementRequest``, recorded as a ``Charge`` transaction."""
    gateway = get_gateway()
    return process_follow_up(
        context,
        FollowUp(
            request_name="submitForSettlement",
            lookup_type="Authorization",
            created_type="Charge",
            call=lambda request: gateway.submit_for_settlement(request["transactionId"], request.get("amount")),
        ),
    )
