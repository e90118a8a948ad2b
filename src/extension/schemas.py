"""Pydantic request/response schemas for the extension endpoint.

These mirror the commercetools API extension contract. The resource
document itself stays an untyped dict; only the envelope is validated.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ExtensionResource(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type_id: str = Field(alias="typeId")
    id: str
    obj: dict[str, Any] | None = None


class ExtensionInput(BaseModel):
    action: str
    resource: ExtensionResource

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "action": "Update",
                    "resource": {
                        "typeId": "payment",
                        "id": "b5c4e5b8-2d4c-4a1b-9c59-3c2f1e0f2a11",
                        "obj": {
                            "id": "b5c4e5b8-2d4c-4a1b-9c59-3c2f1e0f2a11",
                            "amountPlanned": {"centAmount": 1999, "currencyCode": "USD", "fractionDigits": 2},
                            "transactions": [],
                            "custom": {"fields": {"transactionSaleRequest": "fake-valid-nonce"}},
                        },
                    },
                }
            ]
        }
    }


class ExtensionResponse(BaseModel):
    actions: list[dict[str, Any]]


class ExtensionErrorItem(BaseModel):
    code: str
    message: str


class ExtensionErrorResponse(BaseModel):
    errors: list[ExtensionErrorItem]
