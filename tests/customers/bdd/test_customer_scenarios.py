"""BDD tests for customer vault requests."""

from pytest_bdd import scenarios

scenarios("features/customer_vault.feature")
