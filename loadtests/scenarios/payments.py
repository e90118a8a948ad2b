"""Payment extension load test scenarios.

Three stateful SequentialTaskSet journeys: authorize then capture,
charge then partial refund, and authorize then void. Each journey replays
a payment through the extension the way commercetools would, applying the
returned update actions between calls.
"""

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import (
    extension_call,
    partial_refund_request,
    payment_resource,
    transaction_sale_request,
)
from loadtests.helpers.response import extract_error_detail, stored_failure
from loadtests.helpers.state import PaymentState


class PaymentJourney(SequentialTaskSet):
    """Base journey: posts the tracked payment and applies the answer."""

    def on_start(self):
        self.state = PaymentState(payment=payment_resource())

    def post_payment(self, request_name: str, name: str, action: str = "Update") -> bool:
        with self.client.post(
            "/",
            json=extension_call(action, "payment", self.state.payment),
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


class AuthorizeCaptureJourney(PaymentJourney):
    """Client Token -> Sale (authorize) -> Submit For Settlement.

    The drop-in checkout path with manual capture.
    """

    @task
    def get_client_token(self):
        self.state.request("getClientTokenRequest", "{}")
        if not self.post_payment("getClientToken", "POST / (getClientToken)", action="Create"):
            self.interrupt()

    @task
    def authorize(self):
        self.state.request("transactionSaleRequest", transaction_sale_request())
        if not self.post_payment("transactionSale", "POST / (transactionSale)"):
            self.interrupt()

    @task
    def capture(self):
        self.state.request("submitForSettlementRequest", "{}")
        self.post_payment("submitForSettlement", "POST / (submitForSettlement)")

    @task
    def done(self):
        self.interrupt()


class ChargeRefundJourney(PaymentJourney):
    """Sale (submitted for settlement) -> Partial Refund."""

    @task
    def charge(self):
        self.state.request("transactionSaleRequest", transaction_sale_request(submit_for_settlement=True))
        if not self.post_payment("transactionSale", "POST / (transactionSale, settle)"):
            self.interrupt()

    @task
    def refund(self):
        amount_planned = self.state.payment["amountPlanned"]
        request = partial_refund_request(amount_planned["centAmount"], amount_planned["fractionDigits"])
        self.state.request("refundRequest", request)
        self.post_payment("refund", "POST / (refund)")

    @task
    def done(self):
        self.interrupt()


class AuthorizeVoidJourney(PaymentJourney):
    """Sale (authorize) -> Void, requested on the authorization transaction."""

    @task
    def authorize(self):
        self.state.request("transactionSaleRequest", transaction_sale_request())
        if not self.post_payment("transactionSale", "POST / (transactionSale)"):
            self.interrupt()

    @task
    def void(self):
        authorization = self.state.transactions_of("Authorization")[-1]
        authorization["custom"] = {"fields": {"voidRequest": "{}"}}
        with self.client.post(
            "/",
            json=extension_call("Update", "payment", self.state.payment),
            catch_response=True,
            name="POST / (void on transaction)",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"void failed: {resp.status_code} - {extract_error_detail(resp)}")
            elif not any(action["action"] == "addTransaction" for action in resp.json()["actions"]):
                resp.failure("void did not add a CancelAuthorization transaction")

    @task
    def done(self):
        self.interrupt()


class PaymentsUser(HttpUser):
    """Locust user simulating checkout traffic.

    Weighted distribution:
    - 50% Authorize + capture (most common)
    - 30% Charge + partial refund
    - 20% Authorize + void
    """

    wait_time = between(0.5, 2.0)
    tasks = {
        AuthorizeCaptureJourney: 5,
        ChargeRefundJourney: 3,
        AuthorizeVoidJourney: 2,
    }
