"""Shared BDD fixtures and step definitions for customer requests."""

import json

from pytest_bdd import given, parsers, then, when

from customers.controller import customer_controller


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a customer without a Braintree customer id", target_fixture="customer")
def _unlinked_customer(make_customer):
    return make_customer()


@given(parsers.cfparse('a customer linked to Braintree customer "{customer_id}"'), target_fixture="customer")
def _linked_customer(make_customer, gateway, customer_id):
    gateway.create_customer({"id": customer_id, "paymentMethodNonce": "first-nonce"})
    return make_customer({"customerId": customer_id})


@given(
    parsers.cfparse('a customer linked to unknown Braintree customer "{customer_id}"'),
    target_fixture="customer",
)
def _dangling_customer(make_customer, customer_id):
    return make_customer({"customerId": customer_id})


@given(parsers.re(r'the customer field "(?P<name>\w+)" is "(?P<value>.*)"'))
def _customer_field(customer, name, value):
    customer["custom"]["fields"][name] = value


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when("the customer is updated", target_fixture="actions")
def _update_customer(customer):
    return customer_controller("Update", {"typeId": "customer", "id": customer["id"], "obj": customer})


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
def _linked_ids(actions):
    return [action["value"] for action in actions if action.get("name") == "customerId"]


@then("the customer is linked to the created Braintree customer")
def _linked_to_created(actions, gateway):
    assert _linked_ids(actions) == list(gateway.customers)


@then("the customer link is unchanged")
def _link_unchanged(actions):
    assert _linked_ids(actions) == []


@then(parsers.re(r"the Braintree customer has (?P<count>\d+) payment methods?"))
def _payment_method_count(gateway, count):
    (customer,) = gateway.customers.values()
    assert len(customer["paymentMethods"]) == int(count)


@then(parsers.cfparse('the field "{name}" reports "{message}"'))
def _field_reports(actions, name, message):
    value = next(action["value"] for action in actions if action.get("name") == name)
    assert json.loads(value) == {"success": False, "message": message}
