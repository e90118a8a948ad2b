"""Cancellation of an authorized transaction."""

from gateway import get_gateway
from payments.payment.follow_up import FollowUp, process_follow_up
from payments.payment.requests import PaymentWithOptionalTransaction
from shared.interactions import UpdateAction


def void_transaction(context: PaymentWithOptionalTransaction) -> list[UpdateAction]:
    """Handle a ``voidRequest``, recorded as a ``CancelAuthorization`` transaction."""
    gateway = get_gateway()
    return process_follow_up(
        context,
        FollowUp(
            request_name="void",
            lookup_type="Authorization",
            created_type="CancelAuthorization",
            call=lambda request: gateway.void(request["transactionId"]),
        ),
    )
