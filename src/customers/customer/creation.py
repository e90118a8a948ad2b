"""Customer creation in the Braintree vault."""

import structlog

from customers.customer.mapping import to_customer_create_request
from customers.customer.responses import handle_customer_response
from gateway import get_gateway
from shared.exceptions import ExtensionError
from shared.interactions import UpdateAction, handle_error, stringify
from shared.resources import custom_field

logger = structlog.get_logger(__name__)


def create_customer(customer: dict) -> list[UpdateAction]:
    """Handle a ``createRequest``; the Braintree id must be known up front."""
    raw = custom_field(customer, "createRequest")
    if not raw:
        return []
    try:
        request = to_customer_create_request(customer, raw)
        logger.info("createCustomer request", request=stringify(request))
        if not request.get("id"):
            raise ExtensionError(400, "field customerId is missing")
        response = get_gateway().create_customer(request)
        return handle_customer_response("create", response, customer)
    except Exception as exc:
        logger.error("Call to create customer resulted in an error", error=str(exc))
        return handle_error("create", exc)
