"""Payment extension handlers.

Client tokens, sales, and the follow-up requests on a sale (settlement,
void, refund), each mirrored onto the payment as update actions.
"""
