"""Tests for client token issuance."""

import json

from payments.payment.client_token import handle_get_client_token_request


class TestClientToken:
    def test_no_request(self, make_payment, settings):
        assert handle_get_client_token_request(make_payment(), settings) == []

    def test_token_is_stored_as_plain_string(self, make_payment, settings, gateway):
        actions = handle_get_client_token_request(make_payment({"getClientTokenRequest": "{}"}), settings)
        response = actions[1]
        assert response["name"] == "getClientTokenResponse"
        assert response["value"].startswith("fake_client_token_")
        assert actions[-1] == {"action": "setCustomField", "name": "getClientTokenRequest", "value": None}
        assert gateway.calls[0]["request"] == {"merchantAccountId": "ct-merchant"}

    def test_status_is_untouched(self, make_payment, settings):
        actions = handle_get_client_token_request(make_payment({"getClientTokenRequest": "{}"}), settings)
        assert {action["action"] for action in actions} == {"addInterfaceInteraction", "setCustomField"}

    def test_bare_string_is_customer_id(self, make_payment, settings, gateway):
        gateway.create_customer({"id": "bt-cust"})
        actions = handle_get_client_token_request(make_payment({"getClientTokenRequest": "bt-cust"}), settings)
        assert gateway.calls[-1]["request"]["customerId"] == "bt-cust"
        assert actions[1]["value"].startswith("fake_client_token_")

    def test_request_overrides_merchant_account(self, make_payment, settings, gateway):
        request = json.dumps({"merchantAccountId": "eur"})
        handle_get_client_token_request(make_payment({"getClientTokenRequest": request}), settings)
        assert gateway.calls[0]["request"] == {"merchantAccountId": "eur"}

    def test_unknown_customer(self, make_payment, settings):
        actions = handle_get_client_token_request(make_payment({"getClientTokenRequest": "nobody"}), settings)
        assert json.loads(actions[0]["value"]) == {
            "success": False,
            "message": "Customer specified by customer_id does not exist",
        }
        assert actions[1]["value"] is None
