"""Storing customer request responses and linking the Braintree customer."""

from shared.interactions import UpdateAction, handle_response
from shared.resources import custom_field


def handle_customer_response(request_name: str, response: dict, customer: dict) -> list[UpdateAction]:
    """Store a customer request response and link the Braintree customer id.

    Customers have no interface interactions, so only the response and
    request fields are touched. A customer without a ``customerId`` is
    linked to the id the gateway returned.
    """
    actions = handle_response(request_name, response, add_interface_interaction=False)
    gateway_customer_id = response.get("customerId") or response.get("id")
    if gateway_customer_id and not custom_field(customer, "customerId"):
        actions.append({"action": "setCustomField", "name": "customerId", "value": gateway_customer_id})
    return actions
