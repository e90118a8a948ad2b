"""Shared BDD fixtures and step definitions for payment requests."""

import json

from pytest_bdd import given, parsers, then, when

from payments.controller import payment_controller


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a payment of {cent_amount:d} cents in "{currency}"'), target_fixture="payment")
def _payment(make_payment, cent_amount, currency):
    return make_payment(cent_amount=cent_amount, currency=currency)


@given(parsers.re(r'the payment field "(?P<name>\w+)" is "(?P<value>.*)"'))
def _payment_field(payment, name, value):
    payment["custom"]["fields"][name] = value


@given(parsers.cfparse('the gateway declines with "{reason}"'))
def _gateway_declines(gateway, reason):
    gateway.configure(should_succeed=False, failure_reason=reason)


@given("an authorized gateway transaction on the payment")
def _authorized_transaction(payment, gateway):
    sale = gateway.transaction_sale({"amount": "19.99"})
    payment["transactions"].append({"id": "ct-auth", "type": "Authorization", "interactionId": sale["id"]})


@given("a charged gateway transaction on the payment")
def _charged_transaction(payment, gateway):
    sale = gateway.transaction_sale({"amount": "19.99", "options": {"submitForSettlement": True}})
    payment["transactions"].append({"id": "ct-charge", "type": "Charge", "interactionId": sale["id"]})


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when("the payment is updated", target_fixture="actions")
def _update_payment(payment):
    return payment_controller("Update", {"typeId": "payment", "id": payment["id"], "obj": payment})


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
def _added_transactions(actions):
    return [action["transaction"] for action in actions if action["action"] == "addTransaction"]


@then(parsers.cfparse('a "{transaction_type}" transaction is added with state "{state}"'))
def _transaction_added(actions, transaction_type, state):
    added = _added_transactions(actions)
    assert [(t["type"], t["state"]) for t in added] == [(transaction_type, state)]


@then(parsers.cfparse('a "{transaction_type}" transaction of {cent_amount:d} cents is added'))
def _transaction_amount(actions, transaction_type, cent_amount):
    added = _added_transactions(actions)
    assert [(t["type"], t["amount"]["centAmount"]) for t in added] == [(transaction_type, cent_amount)]


@then("no transaction is added")
def _no_transaction(actions):
    assert _added_transactions(actions) == []


@then(parsers.cfparse('the field "{name}" is cleared'))
def _field_cleared(actions, name):
    assert {"action": "setCustomField", "name": name, "value": None} in actions


@then(parsers.cfparse('the field "{name}" reports "{message}"'))
def _field_reports(actions, name, message):
    value = next(action["value"] for action in actions if action.get("name") == name)
    assert json.loads(value) == {"success": False, "message": message}


@then("the interface id is set")
def _interface_id_set(actions):
    assert any(action["action"] == "setInterfaceId" for action in actions)
