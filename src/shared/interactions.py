"""Request/response bookkeeping shared by every gateway request handler.

Each handled request leaves a trace on the resource: an interface
interaction for the outgoing request, the serialized response (or error) in
the matching ``<name>Response`` custom field, and a cleared
``<name>Request`` field so the same request is never processed twice.
"""

import json
from datetime import UTC, datetime
from typing import Any

import structlog

logger = structlog.get_logger(__name__)

PAYMENT_INTERACTION_TYPE_KEY = "braintree-payment-interaction-type"

UpdateAction = dict[str, Any]


def format_timestamp(value: datetime) -> str:
    """ISO-8601 UTC in the form commercetools stores (``...T12:00:00.000Z``).

    Naive datetimes, as returned by the Braintree SDK, are taken as UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def current_timestamp() -> str:
    return format_timestamp(datetime.now(UTC))


def stringify(data: str | dict | list) -> str:
    if isinstance(data, str):
        return data
    return json.dumps(data, separators=(",", ":"), default=str)


def remove_empty_properties(data: Any) -> None:
    """Drop ``None`` values and empty nested objects, in place."""
    if isinstance(data, list):
        for item in data:
            remove_empty_properties(item)
        return
    if not isinstance(data, dict):
        return
    for key in list(data):
        value = data[key]
        if value is None:
            del data[key]
        elif isinstance(value, dict):
            remove_empty_properties(value)
            if not value:
                del data[key]
        elif isinstance(value, list):
            remove_empty_properties(value)


def _set_field(name: str, value: Any, transaction_id: str | None) -> UpdateAction:
    if transaction_id:
        return {
            "action": "setTransactionCustomField",
            "transactionId": transaction_id,
            "name": name,
            "value": value,
        }
    return {"action": "setCustomField", "name": name, "value": value}


def _interface_interaction(interaction_type: str, data: str | dict | list) -> UpdateAction:
    return {
        "action": "addInterfaceInteraction",
        "type": {"typeId": "type", "key": PAYMENT_INTERACTION_TYPE_KEY},
        "fields": {
            "type": interaction_type,
            "data": stringify(data),
            "timestamp": current_timestamp(),
        },
    }


def handle_request(request_name: str, request: str | dict) -> list[UpdateAction]:
    """Record an outgoing gateway request as an interface interaction."""
    if isinstance(request, dict):
        remove_empty_properties(request)
    logger.info("Gateway request", request_name=request_name, request=stringify(request))
    return [_interface_interaction(f"{request_name}Request", request)]


def handle_response(
    request_name: str,
    response: str | dict,
    transaction_id: str | None = None,
    add_interface_interaction: bool = True,
) -> list[UpdateAction]:
    """Store a gateway response and clear the request field that triggered it."""
    if isinstance(response, dict):
        remove_empty_properties(response)
    actions = [_set_field(f"{request_name}Response", stringify(response), transaction_id)]
    if add_interface_interaction:
        actions.append(_interface_interaction(f"{request_name}Response", response))
    actions.append(_set_field(f"{request_name}Request", None, transaction_id))
    return actions


def handle_error(request_name: str, error: object, transaction_id: str | None = None) -> list[UpdateAction]:
    """Store a failure in the response field and clear the request field."""
    if isinstance(error, Exception):
        message = getattr(error, "message", None) or str(error) or type(error).__name__
    else:
        message = "Unknown error"
    logger.warning("Gateway request failed", request_name=request_name, error=message)
    return [
        _set_field(
            f"{request_name}Response",
            stringify({"success": False, "message": message}),
            transaction_id,
        ),
        _set_field(f"{request_name}Request", None, transaction_id),
    ]
