"""Mapping of commercetools customers onto Braintree customer requests."""

from shared.interactions import remove_empty_properties
from shared.resources import custom_field, parse_json_object


def to_customer_create_request(customer: dict, request_json: str | None) -> dict:
    """Build a customer create request from the customer and a request payload.

    Profile fields of the customer are defaults; the payload wins. A bare
    string payload is a payment method nonce to vault with the customer.
    """
    request = {
        "id": custom_field(customer, "customerId"),
        "firstName": customer.get("firstName"),
        "lastName": customer.get("lastName"),
        "email": customer.get("email"),
        "company": customer.get("companyName"),
        **(parse_json_object(request_json, "paymentMethodNonce") if request_json else {}),
    }
    remove_empty_properties(request)
    return request
