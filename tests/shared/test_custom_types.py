"""Tests for custom type definitions and the management CLI."""

import json

from manage import main, type_drafts
from shared.custom_types import (
    ALL_TYPES,
    CUSTOMER_TYPE,
    PAYMENT_INTERACTION_TYPE,
    PAYMENT_TYPE,
    TRANSACTION_TYPE,
)
from shared.interactions import PAYMENT_INTERACTION_TYPE_KEY


class TestCustomTypes:
    def test_payment_type_has_request_and_response_fields(self):
        names = PAYMENT_TYPE.field_names
        for request in ("getClientToken", "transactionSale", "refund", "submitForSettlement", "void"):
            assert f"{request}Request" in names
            assert f"{request}Response" in names

    def test_transaction_type_only_carries_follow_ups(self):
        assert "transactionSaleRequest" not in TRANSACTION_TYPE.field_names
        assert "refundRequest" in TRANSACTION_TYPE.field_names

    def test_customer_type_links_braintree_customer(self):
        assert CUSTOMER_TYPE.field_names[0] == "customerId"
        assert "vaultRequest" in CUSTOMER_TYPE.field_names

    def test_interaction_type_key_matches_interactions(self):
        assert PAYMENT_INTERACTION_TYPE.key == PAYMENT_INTERACTION_TYPE_KEY
        assert PAYMENT_INTERACTION_TYPE.resource_type_ids == ("payment-interface-interaction",)

    def test_draft_shape(self):
        draft = CUSTOMER_TYPE.to_draft()
        assert draft["key"] == "braintree-customer-type"
        assert draft["resourceTypeIds"] == ["customer"]
        field = draft["fieldDefinitions"][0]
        assert field["name"] == "customerId"
        assert field["type"] == {"name": "String"}
        assert field["required"] is False


class TestManageCli:
    def test_type_drafts_default_to_all(self):
        assert len(type_drafts()) == len(ALL_TYPES)

    def test_type_drafts_by_name(self):
        drafts = type_drafts(["transaction"])
        assert [d["key"] for d in drafts] == ["braintree-transaction-type"]

    def test_print_types(self, capsys):
        main(["print-types", "--type", "payment", "customer"])
        printed = json.loads(capsys.readouterr().out)
        assert [d["key"] for d in printed] == ["braintree-payment-type", "braintree-customer-type"]
