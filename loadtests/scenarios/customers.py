"""Customer extension load test scenarios."""

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import customer_resource, extension_call, nonce
from loadtests.helpers.response import extract_error_detail, stored_failure
from loadtests.helpers.state import CustomerState


class CustomerVaultJourney(SequentialTaskSet):
    """Vault (creates Braintree customer) -> Find -> Vault a second method."""

    def on_start(self):
        self.state = CustomerState(customer=customer_resource())

    def post_customer(self, request_name: str, name: str) -> bool:
        with self.client.post(
            "/",
            json=extension_call("Update", "customer", self.state.customer),
            catch_response=True,
            name=name,
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"{request_name} failed: {resp.status_code} - {extract_error_detail(resp)}")
                return False
            actions = resp.json()["actions"]
            failure = stored_failure(actions, f"{request_name}Response")
            if failure:
                resp.failure(f"{request_name} declined: {failure}")
                return False
            self.state.apply(actions)
            return True

    @task
    def vault_new_customer(self):
        self.state.request("vaultRequest", nonce())
        if not self.post_customer("vault", "POST / (vault, new customer)") or not self.state.braintree_customer_id:
            self.interrupt()

    @task
    def find(self):
        self.state.request("findRequest", "{}")
        self.post_customer("find", "POST / (find)")

    @task
    def vault_second_method(self):
        self.state.request("vaultRequest", nonce())
        self.post_customer("vault", "POST / (vault, linked customer)")

    @task
    def done(self):
        self.interrupt()


class CustomersUser(HttpUser):
    """Locust user simulating account pages that manage saved payment methods."""

    wait_time = between(1.0, 3.0)
    tasks = [CustomerVaultJourney]
