"""Customer extension controller.

Only ``Update`` calls carry requests: custom fields are written after the
customer exists. Each request is answered independently, so a failed
lookup does not discard the actions of a successful vaulting.
"""

import structlog

from customers.customer.creation import create_customer
from customers.customer.find import find_customer
from customers.customer.vault import vault
from shared.exceptions import ExtensionError
from shared.interactions import UpdateAction

logger = structlog.get_logger(__name__)


def update(resource: dict) -> list[UpdateAction]:
    customer = resource.get("obj")
    if not customer:
        raise ExtensionError(400, "customer obj is missing")

    actions: list[UpdateAction] = []
    actions += find_customer(customer)
    actions += create_customer(customer)
    actions += vault(customer)
    logger.info("Customer processed", customer_id=customer.get("id"), action_count=len(actions))
    return actions


def customer_controller(action: str, resource: dict) -> list[UpdateAction]:
    """Handle a customer extension call (``Create`` or ``Update``)."""
    if action == "Create":
        return []
    if action != "Update":
        raise ExtensionError(
            500,
            "Internal Server Error - Resource not recognized. Allowed values are 'Create' or 'Update'.",
        )
    try:
        return update(resource)
    except ExtensionError:
        raise
    except Exception as exc:
        logger.exception("Customer controller failed", customer_id=resource.get("id"))
        raise ExtensionError(400, f"Internal server error on CustomerController: {exc}") from exc
