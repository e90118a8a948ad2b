"""Follow-up requests on an existing gateway transaction.

Refund, settlement and void share one flow: parse the request (deriving the
gateway transaction id when it is not given), call the gateway, store the
response, and mirror the resulting gateway transaction onto the payment.
"""

from collections.abc import Callable
from dataclasses import dataclass

from payments.payment.actions import add_transaction, update_payment_fields
from payments.payment.requests import PaymentWithOptionalTransaction, parse_request
from shared.interactions import UpdateAction, handle_error, handle_request, handle_response


@dataclass(frozen=True)
class FollowUp:
    """How one kind of follow-up request is handled."""

    request_name: str
    lookup_type: str
    created_type: str
    call: Callable[[dict], dict]

    @property
    def request_field(self) -> str:
        return f"{self.request_name}Request"


def has_request(context: PaymentWithOptionalTransaction, request_field: str) -> bool:
    return context.request_value(request_field) is not None


def process_follow_up(context: PaymentWithOptionalTransaction, follow_up: FollowUp) -> list[UpdateAction]:
    if not has_request(context, follow_up.request_field):
        return []
    try:
        request = parse_request(context, follow_up.request_field, follow_up.lookup_type)
        actions = handle_request(follow_up.request_name, request)
        response = follow_up.call(request)
        actions += handle_response(follow_up.request_name, response, context.transaction_id)
        actions.append(add_transaction(context.payment, follow_up.created_type, response))
        actions += update_payment_fields(response)
        return actions
    except Exception as exc:
        return handle_error(follow_up.request_name, exc, context.transaction_id)
