"""Tests for request/response bookkeeping actions."""

import json
import re
from datetime import datetime, timedelta, timezone

from shared.exceptions import ExtensionError
from shared.interactions import (
    PAYMENT_INTERACTION_TYPE_KEY,
    current_timestamp,
    format_timestamp,
    handle_error,
    handle_request,
    handle_response,
    remove_empty_properties,
    stringify,
)


class TestRemoveEmptyProperties:
    def test_drops_none_values(self):
        data = {"a": 1, "b": None}
        remove_empty_properties(data)
        assert data == {"a": 1}

    def test_drops_nested_objects_left_empty(self):
        data = {"options": {"submitForSettlement": None}, "amount": "10.00"}
        remove_empty_properties(data)
        assert data == {"amount": "10.00"}

    def test_keeps_falsy_scalars(self):
        data = {"flag": False, "count": 0, "text": ""}
        remove_empty_properties(data)
        assert data == {"flag": False, "count": 0, "text": ""}

    def test_walks_lists_without_shortening(self):
        data = {"items": [{"a": None, "b": 1}, {"c": None}]}
        remove_empty_properties(data)
        assert data == {"items": [{"b": 1}, {}]}


class TestStringify:
    def test_string_passes_through(self):
        assert stringify("token") == "token"

    def test_dict_is_compact_json(self):
        assert stringify({"a": 1, "b": "x"}) == '{"a":1,"b":"x"}'


def test_current_timestamp_is_utc_with_milliseconds():
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", current_timestamp())


class TestFormatTimestamp:
    def test_naive_datetime_is_utc(self):
        assert format_timestamp(datetime(2024, 5, 1, 12, 30)) == "2024-05-01T12:30:00.000Z"

    def test_aware_datetime_is_converted_to_utc(self):
        value = datetime(2024, 5, 1, 14, 30, 15, 250000, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(value) == "2024-05-01T12:30:15.250Z"


class TestHandleRequest:
    def test_adds_interface_interaction(self):
        actions = handle_request("refund", {"transactionId": "txn-1", "amount": None})
        assert len(actions) == 1
        action = actions[0]
        assert action["action"] == "addInterfaceInteraction"
        assert action["type"] == {"typeId": "type", "key": PAYMENT_INTERACTION_TYPE_KEY}
        assert action["fields"]["type"] == "refundRequest"
        assert json.loads(action["fields"]["data"]) == {"transactionId": "txn-1"}

    def test_strips_empty_properties_from_request_in_place(self):
        request = {"merchantAccountId": None, "amount": "1.00"}
        handle_request("transactionSale", request)
        assert request == {"amount": "1.00"}


class TestHandleResponse:
    def test_payment_level_actions_in_order(self):
        actions = handle_response("void", {"id": "txn-1", "status": "voided"})
        assert [a["action"] for a in actions] == [
            "setCustomField",
            "addInterfaceInteraction",
            "setCustomField",
        ]
        assert actions[0]["name"] == "voidResponse"
        assert json.loads(actions[0]["value"]) == {"id": "txn-1", "status": "voided"}
        assert actions[1]["fields"]["type"] == "voidResponse"
        assert actions[2] == {"action": "setCustomField", "name": "voidRequest", "value": None}

    def test_transaction_level_actions_carry_transaction_id(self):
        actions = handle_response("refund", {"id": "txn-2"}, transaction_id="ct-txn-1")
        field_actions = [a for a in actions if a["action"] == "setTransactionCustomField"]
        assert len(field_actions) == 2
        assert all(a["transactionId"] == "ct-txn-1" for a in field_actions)

    def test_payment_level_actions_have_no_transaction_id(self):
        actions = handle_response("void", {"id": "txn-1"})
        assert all("transactionId" not in a for a in actions)

    def test_string_response_is_stored_verbatim(self):
        actions = handle_response("getClientToken", "client-token-abc")
        assert actions[0]["value"] == "client-token-abc"

    def test_without_interface_interaction(self):
        actions = handle_response("find", {"id": "c-1"}, add_interface_interaction=False)
        assert [a["name"] for a in actions] == ["findResponse", "findRequest"]


class TestHandleError:
    def test_exception_message_is_stored_and_request_cleared(self):
        actions = handle_error("refund", ValueError("boom"))
        assert json.loads(actions[0]["value"]) == {"success": False, "message": "boom"}
        assert actions[1] == {"action": "setCustomField", "name": "refundRequest", "value": None}

    def test_extension_error_message(self):
        actions = handle_error("create", ExtensionError(400, "field customerId is missing"))
        assert json.loads(actions[0]["value"])["message"] == "field customerId is missing"

    def test_non_exception_is_unknown_error(self):
        actions = handle_error("void", "something odd")
        assert json.loads(actions[0]["value"])["message"] == "Unknown error"

    def test_transaction_level_error(self):
        actions = handle_error("void", ValueError("x"), transaction_id="ct-txn-9")
        assert [a["action"] for a in actions] == ["setTransactionCustomField", "setTransactionCustomField"]
        assert actions[1]["name"] == "voidRequest"
        assert actions[1]["value"] is None
