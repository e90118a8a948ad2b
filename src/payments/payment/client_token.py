"""Client token issuance for drop-in and hosted fields checkouts."""

import structlog

from gateway import get_gateway
from shared.config import Settings, get_settings
from shared.interactions import UpdateAction, handle_error, handle_request, handle_response
from shared.resources import custom_field, parse_json_object

logger = structlog.get_logger(__name__)


def handle_get_client_token_request(payment: dict | None, settings: Settings | None = None) -> list[UpdateAction]:
    """Handle a ``getClientTokenRequest``.

    The request is a JSON object of client token options; a bare string is
    taken as the vaulted ``customerId``. No payment status is touched.
    """
    raw = custom_field(payment, "getClientTokenRequest")
    if not raw:
        return []
    settings = settings or get_settings()
    try:
        request = {
            "merchantAccountId": settings.braintree_merchant_account or None,
            **parse_json_object(raw, "customerId"),
        }
        actions = handle_request("getClientToken", request)
        response = get_gateway().generate_client_token(request)
        return actions + handle_response("getClientToken", response)
    except Exception as exc:
        logger.error("Call to getClientToken resulted in an error", error=str(exc))
        return handle_error("getClientToken", exc)
