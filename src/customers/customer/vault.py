"""Vaulting of a payment method for a customer.

A customer already linked to Braintree gets a new payment method; an
unlinked customer is created in Braintree together with the payment method.
"""

import structlog

from customers.customer.mapping import to_customer_create_request
from customers.customer.responses import handle_customer_response
from gateway import get_gateway
from shared.interactions import UpdateAction, handle_error, stringify
from shared.resources import custom_field, parse_json_object

logger = structlog.get_logger(__name__)


def parse_vault_request(customer: dict) -> dict:
    raw = custom_field(customer, "vaultRequest")
    request = parse_json_object(raw, "paymentMethodNonce")
    customer_id = custom_field(customer, "customerId")
    if not customer_id:
        return to_customer_create_request(customer, stringify(request))
    options = request.get("options")
    request["customerId"] = customer_id
    request["options"] = {**(options if isinstance(options, dict) else {}), "failOnDuplicatePaymentMethod": True}
    return request


def vault(customer: dict) -> list[UpdateAction]:
    """Handle a ``vaultRequest``."""
    if not custom_field(customer, "vaultRequest"):
        return []
    try:
        request = parse_vault_request(customer)
        gateway = get_gateway()
        if custom_field(customer, "customerId"):
            logger.info("createPaymentMethod request", request=stringify(request))
            response = gateway.create_payment_method(request)
        else:
            logger.info("createCustomer request", request=stringify(request))
            response = gateway.create_customer(request)
        return handle_customer_response("vault", response, customer)
    except Exception as exc:
        logger.error("Call to vault resulted in an error", error=str(exc))
        return handle_error("vault", exc)
