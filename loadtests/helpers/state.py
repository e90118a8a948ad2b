"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance keeps its own copy of the resource it works on
and applies the returned update actions to it, standing in for
commercetools between extension calls.
"""

from dataclasses import dataclass, field


def _set_field(resource: dict, name: str, value) -> None:
    fields = resource.setdefault("custom", {}).setdefault("fields", {})
    if value is None:
        fields.pop(name, None)
    else:
        fields[name] = value


@dataclass
class PaymentState:
    """Tracks a payment document across a journey."""

    payment: dict = field(default_factory=dict)

    @property
    def fields(self) -> dict:
        return self.payment["custom"]["fields"]

    def request(self, name: str, value: str) -> None:
        _set_field(self.payment, name, value)

    def apply(self, actions: list[dict]) -> None:
        for action in actions:
            kind = action["action"]
            if kind == "setCustomField":
                _set_field(self.payment, action["name"], action["value"])
            elif kind == "addTransaction":
                transaction = {"id": f"ct-{len(self.payment['transactions']) + 1}", **action["transaction"]}
                self.payment["transactions"].append(transaction)
            elif kind == "setInterfaceId":
                self.payment["interfaceId"] = action["interfaceId"]
            elif kind == "addInterfaceInteraction":
                self.payment["interfaceInteractions"].append(action["fields"])
        self.payment["version"] += 1

    def transactions_of(self, transaction_type: str) -> list[dict]:
        return [t for t in self.payment["transactions"] if t["type"] == transaction_type]


@dataclass
class CustomerState:
    """Tracks a customer document across a journey."""

    customer: dict = field(default_factory=dict)

    @property
    def braintree_customer_id(self) -> str | None:
        return self.customer["custom"]["fields"].get("customerId")

    def request(self, name: str, value: str) -> None:
        _set_field(self.customer, name, value)

    def apply(self, actions: list[dict]) -> None:
        for action in actions:
            if action["action"] == "setCustomField":
                _set_field(self.customer, action["name"], action["value"])
        self.customer["version"] += 1
