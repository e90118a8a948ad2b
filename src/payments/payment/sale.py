"""Transaction sale: the first gateway transaction of a payment.

The sale amount always comes from ``amountPlanned`` unless the request
overrides it. The resulting transaction is an ``Authorization`` or a
``Charge`` depending on whether it was submitted for settlement.
"""

from gateway import get_gateway
from payments.mapping import to_transaction_type
from payments.payment.actions import add_transaction, update_payment_fields
from payments.payment.requests import parse_transaction_sale_request
from shared.config import Settings, get_settings
from shared.interactions import UpdateAction, handle_error, handle_request, handle_response
from shared.resources import custom_field


def handle_transaction_sale_request(payment: dict | None, settings: Settings | None = None) -> list[UpdateAction]:
    if not custom_field(payment, "transactionSaleRequest"):
        return []
    settings = settings or get_settings()
    try:
        request = parse_transaction_sale_request(payment, settings)
        actions = handle_request("transactionSale", request)
        response = get_gateway().transaction_sale(request)
        actions += handle_response("transactionSale", response)
        actions.append(add_transaction(payment, to_transaction_type(response.get("status")), response))
        if not payment.get("interfaceId"):
            actions.append({"action": "setInterfaceId", "interfaceId": response.get("id")})
        return actions + update_payment_fields(response)
    except Exception as exc:
        return handle_error("transactionSale", exc)
