"""Dispatch of extension calls to the per-resource controllers."""

import structlog

from customers.controller import customer_controller
from extension.schemas import ExtensionInput
from payments.controller import payment_controller
from shared.exceptions import ExtensionError
from shared.interactions import UpdateAction

logger = structlog.get_logger(__name__)

_CONTROLLERS = {
    "payment": payment_controller,
    "customer": customer_controller,
}


def dispatch(extension_input: ExtensionInput) -> list[UpdateAction]:
    resource = extension_input.resource
    controller = _CONTROLLERS.get(resource.type_id)
    if controller is None:
        raise ExtensionError(
            500,
            f"Internal Server Error - Resource not recognized. Allowed values are {', '.join(_CONTROLLERS)}.",
        )
    logger.info(
        "Extension call received",
        action=extension_input.action,
        type_id=resource.type_id,
        resource_id=resource.id,
    )
    return controller(extension_input.action, resource.model_dump(by_alias=True))
