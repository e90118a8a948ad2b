"""Customer lookup in the Braintree vault."""

import structlog

from customers.customer.responses import handle_customer_response
from gateway import get_gateway
from shared.interactions import UpdateAction, handle_error
from shared.resources import custom_field, parse_json_object

logger = structlog.get_logger(__name__)


def find_customer(customer: dict) -> list[UpdateAction]:
    """Handle a ``findRequest``.

    The Braintree id is taken from the request, then from the ``customerId``
    field, then from the commercetools customer id. A bare string request is
    the id itself.
    """
    raw = custom_field(customer, "findRequest")
    if not raw:
        return []
    try:
        request = parse_json_object(raw, "customerId")
        customer_id = request.get("customerId") or custom_field(customer, "customerId") or customer.get("id")
        logger.info("findCustomer request", customer_id=customer_id)
        response = get_gateway().find_customer(customer_id)
        return handle_customer_response("find", response, customer)
    except Exception as exc:
        logger.error("Call to find customer resulted in an error", error=str(exc))
        return handle_error("find", exc)
