"""Payment update actions derived from a gateway transaction."""

from payments.mapping import payment_method_info, to_cent_amount, to_transaction_state
from shared.interactions import UpdateAction


def add_transaction(payment: dict, transaction_type: str, response: dict) -> UpdateAction:
    """Mirror a gateway transaction onto the payment, in the payment's currency."""
    amount_planned = payment.get("amountPlanned") or {}
    return {
        "action": "addTransaction",
        "transaction": {
            "type": transaction_type,
            "amount": {
                "centAmount": to_cent_amount(response.get("amount"), amount_planned.get("fractionDigits")),
                "currencyCode": amount_planned.get("currencyCode"),
            },
            "interactionId": response.get("id"),
            "timestamp": response.get("updatedAt"),
            "state": to_transaction_state(response.get("status")),
        },
    }


def update_payment_fields(response: dict) -> list[UpdateAction]:
    status = response.get("status")
    return [
        {"action": "setStatusInterfaceCode", "interfaceCode": status},
        {"action": "setStatusInterfaceText", "interfaceText": status},
        {"action": "setMethodInfoMethod", "method": payment_method_info(response)},
    ]
