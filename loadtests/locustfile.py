"""Braintree extension load testing - Locust entry point.

Discovers all user classes from the scenarios package. Point the
extension at the fake gateway (``PAYMENT_GATEWAY=fake``) unless the
Braintree sandbox is meant to take the load.

Usage:
    # All scenarios (web UI):
    locust -f loadtests/locustfile.py --host http://localhost:8080

    # Checkout traffic only:
    locust -f loadtests/locustfile.py PaymentsUser

    # Headless (CI mode):
    locust -f loadtests/locustfile.py --headless \
           -u 50 -r 5 -t 300s --csv=results/loadtest
"""

import logging
import time

import requests
from locust import events

# Import all user classes so Locust discovers them
from loadtests.helpers.response import extract_error_detail
from loadtests.scenarios.customers import CustomersUser  # noqa: F401
from loadtests.scenarios.payments import PaymentsUser  # noqa: F401

logger = logging.getLogger("loadtest")


@events.request.add_listener
def on_request(request_type, name, response, exception, **_kw):
    """Log error details for every failed request.

    Extracts the commercetools error body so you see "payment obj is missing"
    instead of just "400".
    """
    if exception:
        logger.error("[EXCEPTION] %s %s: %s", request_type, name, exception)
    elif response is not None and response.status_code >= 400:
        detail = extract_error_detail(response)
        logger.error("[%s] %s %s: %s", response.status_code, request_type, name, detail)


@events.test_start.add_listener
def on_test_start(environment, **_kwargs):
    """Log a marker and the extension's gateway when load test begins."""
    print(f"\n[LOADTEST] Started at {time.strftime('%H:%M:%S')}")
    print(f"[LOADTEST] Target host: {environment.host}")
    try:
        health = requests.get(f"{environment.host}/health", timeout=5).json()
        print(f"[LOADTEST] Extension gateway: {health.get('gateway')} ({health.get('environment')})")
    except requests.RequestException as e:
        print(f"[LOADTEST] Could not reach extension health endpoint: {e}")
    print()


@events.test_stop.add_listener
def on_test_stop(**_kwargs):
    print(f"\n[LOADTEST] Stopped at {time.strftime('%H:%M:%S')}\n")
